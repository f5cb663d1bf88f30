import hypothesis.strategies


def real_numbers(
    min_value: float = -1e3,
    max_value: float = 1e3,
    *,
    allow_zero: bool = True,
) -> hypothesis.strategies.SearchStrategy[float]:
    """Strategy for finite real numbers, optionally excluding zero."""
    strategy = hypothesis.strategies.floats(
        min_value=min_value,
        max_value=max_value,
        allow_nan=False,
        allow_infinity=False,
    )
    if not allow_zero:
        strategy = strategy.filter(lambda x: x != 0.0)
    return strategy
