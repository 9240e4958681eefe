"""Sqrt price movements and token amounts between two sqrt prices."""

from .bigint import to_signed
from .constants import MAX_INT128, MAX_UINT128, MAX_UINT160, MAX_UINT256, MIN_INT128, Q96
from .errors import (
    InsufficientLiquidityError,
    InvalidPriceError,
    InvalidPriceOrLiquidityError,
    PriceOverflowError,
    SafeCastOverflowError,
)
from .full_math import mul_div, mul_div_q96, mul_div_rounding_up


def _require_liquidity(liquidity):
    if not 0 <= liquidity <= MAX_UINT128:
        raise ValueError(f"liquidity is not a uint128: {liquidity}")


def _require_signed_liquidity(liquidity):
    if not MIN_INT128 <= liquidity <= MAX_INT128:
        raise ValueError(f"liquidity is not an int128: {liquidity}")


def _ceil_div(numerator, denominator):
    return -(-numerator // denominator)


def _to_uint160(value):
    if value > MAX_UINT160:
        raise SafeCastOverflowError()
    return value


def get_next_sqrt_price_from_amount_0_rounding_up(sqrt_price_x96, liquidity, amount, add):
    """Return the sqrt price after adding or removing ``amount`` of token0.

    Always rounds up, so the price moves at least far enough for an exact
    output and not too far for an exact input.
    """
    _require_liquidity(liquidity)
    if amount == 0:
        return sqrt_price_x96
    numerator_1 = liquidity << 96
    product = amount * sqrt_price_x96
    product_fits = product <= MAX_UINT256

    if add:
        if product_fits:
            denominator = numerator_1 + product
            if denominator <= MAX_UINT256:
                return mul_div_rounding_up(numerator_1, sqrt_price_x96, denominator)
        denominator = numerator_1 // sqrt_price_x96 + amount
        if denominator > MAX_UINT256:
            raise PriceOverflowError()
        return _ceil_div(numerator_1, denominator)

    if not (product_fits and numerator_1 > product):
        raise PriceOverflowError()
    denominator = numerator_1 - product
    return _to_uint160(mul_div_rounding_up(numerator_1, sqrt_price_x96, denominator))


def get_next_sqrt_price_from_amount_1_rounding_down(sqrt_price_x96, liquidity, amount, add):
    """Return the sqrt price after adding or removing ``amount`` of token1.

    Always rounds down; the result is within one unit of sqrt_price +- amount / liquidity.
    """
    _require_liquidity(liquidity)
    if add:
        if amount <= MAX_UINT160:
            quotient = (amount << 96) // liquidity
        else:
            quotient = mul_div(amount, Q96, liquidity)
        return _to_uint160(sqrt_price_x96 + quotient)

    if amount <= MAX_UINT160:
        quotient = _ceil_div(amount << 96, liquidity)
    else:
        quotient = mul_div_rounding_up(amount, Q96, liquidity)
    if sqrt_price_x96 > quotient:
        return sqrt_price_x96 - quotient
    raise InsufficientLiquidityError()


def get_next_sqrt_price_from_input(sqrt_price_x96, liquidity, amount_in, zero_for_one):
    """Return the sqrt price after swapping ``amount_in`` of token0 or token1 in.

    Raises InvalidPriceOrLiquidityError if the price or the liquidity is zero.
    """
    if sqrt_price_x96 == 0 or liquidity == 0:
        raise InvalidPriceOrLiquidityError()
    if zero_for_one:
        return get_next_sqrt_price_from_amount_0_rounding_up(
            sqrt_price_x96, liquidity, amount_in, True
        )
    return get_next_sqrt_price_from_amount_1_rounding_down(
        sqrt_price_x96, liquidity, amount_in, True
    )


def get_next_sqrt_price_from_output(sqrt_price_x96, liquidity, amount_out, zero_for_one):
    """Return the sqrt price after swapping ``amount_out`` of token0 or token1 out.

    Raises InvalidPriceOrLiquidityError if the price or the liquidity is zero.
    """
    if sqrt_price_x96 == 0 or liquidity == 0:
        raise InvalidPriceOrLiquidityError()
    if zero_for_one:
        return get_next_sqrt_price_from_amount_1_rounding_down(
            sqrt_price_x96, liquidity, amount_out, False
        )
    return get_next_sqrt_price_from_amount_0_rounding_up(
        sqrt_price_x96, liquidity, amount_out, False
    )


def _sorted_pair(a, b):
    return (b, a) if a > b else (a, b)


def get_amount_0_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity, round_up):
    """Return the token0 amount covering ``liquidity`` between two sqrt prices.

    Raises InvalidPriceError if the lower sqrt price is zero.
    """
    _require_liquidity(liquidity)
    lower, upper = _sorted_pair(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    if lower == 0:
        raise InvalidPriceError()
    numerator_1 = liquidity << 96
    numerator_2 = upper - lower
    if round_up:
        return _ceil_div(mul_div_rounding_up(numerator_1, numerator_2, upper), lower)
    return mul_div(numerator_1, numerator_2, upper) // lower


def get_amount_1_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity, round_up):
    """Return the token1 amount covering ``liquidity`` between two sqrt prices."""
    _require_liquidity(liquidity)
    lower, upper = _sorted_pair(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    numerator = upper - lower
    amount_1 = mul_div_q96(liquidity, numerator)
    if round_up and (liquidity * numerator) % Q96:
        amount_1 += 1
    return amount_1


def get_amount_0_delta_signed(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity):
    """Return the signed token0 amount for a signed liquidity change.

    Positive liquidity rounds up; negative liquidity rounds down and yields a
    negative amount.
    """
    _require_signed_liquidity(liquidity)
    positive = liquidity >= 0
    amount = get_amount_0_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, abs(liquidity), positive)
    return to_signed(amount if positive else -amount, 256)


def get_amount_1_delta_signed(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity):
    """Return the signed token1 amount for a signed liquidity change.

    Positive liquidity rounds up; negative liquidity rounds down and yields a
    negative amount.
    """
    _require_signed_liquidity(liquidity)
    positive = liquidity >= 0
    amount = get_amount_1_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, abs(liquidity), positive)
    return to_signed(amount if positive else -amount, 256)