"""Exception classes for root finding module."""


class RootFindingError(Exception):
    """Base exception for root finding errors."""

    pass


class BracketError(RootFindingError):
    """Raised when no sign change can be bracketed."""

    pass


class RootFindingWarning(UserWarning):
    """Warning for root finding issues (e.g., a fallback method was used)."""

    pass
