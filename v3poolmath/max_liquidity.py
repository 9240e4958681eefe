"""Maximum liquidity obtainable for given token amounts and price bounds."""

from .constants import Q96


def _sorted_pair(a, b):
    return (b, a) if a > b else (a, b)


def max_liquidity_for_amount0_imprecise(sqrt_ratio_a_x96, sqrt_ratio_b_x96, amount0):
    """Return an imprecise maximum liquidity for an amount of token0.

    Matches the router's calculation, which divides by Q96 in the
    intermediate step and so loses up to 32 bits of precision.
    """
    lower, upper = _sorted_pair(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    intermediate = (lower * upper) >> 96
    return amount0 * intermediate // (upper - lower)


def max_liquidity_for_amount0_precise(sqrt_ratio_a_x96, sqrt_ratio_b_x96, amount0):
    """Return the precise maximum liquidity for an amount of token0."""
    lower, upper = _sorted_pair(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    numerator = amount0 * lower * upper
    denominator = (upper - lower) << 96
    return numerator // denominator


def max_liquidity_for_amount1(sqrt_ratio_a_x96, sqrt_ratio_b_x96, amount1):
    """Return the maximum liquidity for an amount of token1."""
    lower, upper = _sorted_pair(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    return amount1 * Q96 // (upper - lower)


def max_liquidity_for_amounts(
    sqrt_ratio_current_x96,
    sqrt_ratio_a_x96,
    sqrt_ratio_b_x96,
    amount0,
    amount1,
    use_full_precision,
):
    """Return the maximum liquidity for amounts of token0 and token1.

    With ``use_full_precision`` false, liquidity is limited to what the
    router can calculate rather than what the pool could support.
    """
    lower, upper = _sorted_pair(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    amount0_liquidity = (
        max_liquidity_for_amount0_precise
        if use_full_precision
        else max_liquidity_for_amount0_imprecise
    )

    if sqrt_ratio_current_x96 <= lower:
        return amount0_liquidity(lower, upper, amount0)
    if sqrt_ratio_current_x96 < upper:
        liquidity0 = amount0_liquidity(sqrt_ratio_current_x96, upper, amount0)
        liquidity1 = max_liquidity_for_amount1(lower, sqrt_ratio_current_x96, amount1)
        return min(liquidity0, liquidity1)
    return max_liquidity_for_amount1(lower, upper, amount1)