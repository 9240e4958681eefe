"""Applying signed liquidity deltas."""

from .constants import MAX_INT128, MAX_UINT128, MIN_INT128
from .errors import AddDeltaOverflowError


def add_delta(x, y):
    """Add the signed delta ``y`` to the liquidity ``x``.

    Raises AddDeltaOverflowError if the result leaves the uint128 range.
    """
    if not 0 <= x <= MAX_UINT128:
        raise ValueError(f"liquidity is not a uint128: {x}")
    if not MIN_INT128 <= y <= MAX_INT128:
        raise ValueError(f"delta is not an int128: {y}")
    result = x + y
    if not 0 <= result <= MAX_UINT128:
        raise AddDeltaOverflowError()
    return result