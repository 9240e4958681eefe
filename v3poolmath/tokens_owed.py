"""Fees owed to a position."""

from .bigint import to_unsigned
from .constants import Q128


def get_tokens_owed(
    fee_growth_inside_0_last_x128,
    fee_growth_inside_1_last_x128,
    liquidity,
    fee_growth_inside_0_x128,
    fee_growth_inside_1_x128,
):
    """Return the amounts of token0 and token1 owed to a position as fees."""

    def owed(current, last):
        growth = to_unsigned(current - last, 256)
        return to_unsigned(growth * liquidity, 256) // Q128

    return (
        owed(fee_growth_inside_0_x128, fee_growth_inside_0_last_x128),
        owed(fee_growth_inside_1_x128, fee_growth_inside_1_last_x128),
    )