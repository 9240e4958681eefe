"""Full-precision multiply-then-divide on 256-bit unsigned integers."""

from .constants import MAX_UINT256, Q96
from .errors import MulDivOverflowError


def _require_u256(**values):
    for name, value in values.items():
        if not 0 <= value <= MAX_UINT256:
            raise ValueError(f"{name} is not a uint256: {value}")


def mul_div(a, b, denominator):
    """Return floor(a * b / denominator).

    Raises MulDivOverflowError if the result exceeds 256 bits or the
    denominator is zero.
    """
    _require_u256(a=a, b=b, denominator=denominator)
    if denominator == 0:
        raise MulDivOverflowError()
    result = a * b // denominator
    if result > MAX_UINT256:
        raise MulDivOverflowError()
    return result


def mul_div_rounding_up(a, b, denominator):
    """Return ceil(a * b / denominator), with the same failure cases as mul_div."""
    result = mul_div(a, b, denominator)
    if a * b % denominator == 0:
        return result
    if result == MAX_UINT256:
        raise MulDivOverflowError()
    return result + 1


def mul_div_q96(a, b):
    """Return floor(a * b / 2**96), raising if the result exceeds 256 bits."""
    _require_u256(a=a, b=b)
    product = a * b
    if product >> 256 >= Q96:
        raise MulDivOverflowError()
    return product >> 96