"""Test helpers for torchroots.

Hypothesis strategies generating polynomials with known structure live in
:mod:`torchroots.testing.strategies`. Importing this package requires the
``test`` extra.
"""

from . import strategies
from ._assert_roots_close import assert_roots_close

__all__ = [
    "assert_roots_close",
    "strategies",
]
