"""Encoding a price ratio as a Q64.96 square root."""

from math import isqrt


def encode_sqrt_ratio_x96(amount1, amount0):
    """Return sqrt(amount1 / amount0) as a Q64.96 fixed-point integer."""
    if amount0 == 0:
        raise ZeroDivisionError("amount0 must not be zero")
    numerator = amount1 << 192
    quotient = abs(numerator) // abs(amount0)
    if (numerator < 0) != (amount0 < 0):
        quotient = -quotient
    if quotient < 0:
        raise ValueError("ratio must not be negative")
    return isqrt(quotient)