"""Fee growth inside a tick range."""

from dataclasses import dataclass

from .bigint import to_unsigned

_BITS = 256


@dataclass(frozen=True)
class FeeGrowthOutside:
    """Fee growth recorded on the far side of a tick, per unit of liquidity."""

    fee_growth_outside0_x128: int = 0
    fee_growth_outside1_x128: int = 0


def get_fee_growth_inside(
    lower,
    upper,
    tick_lower,
    tick_upper,
    tick_current,
    fee_growth_global0_x128,
    fee_growth_global1_x128,
):
    """Return the fee growth of token0 and token1 inside ``[tick_lower, tick_upper)``.

    Subtractions wrap modulo 2**256, as the on-chain accounting does.
    """
    if tick_current < tick_lower:
        inside0 = lower.fee_growth_outside0_x128 - upper.fee_growth_outside0_x128
        inside1 = lower.fee_growth_outside1_x128 - upper.fee_growth_outside1_x128
    elif tick_current >= tick_upper:
        inside0 = upper.fee_growth_outside0_x128 - lower.fee_growth_outside0_x128
        inside1 = upper.fee_growth_outside1_x128 - lower.fee_growth_outside1_x128
    else:
        inside0 = (
            fee_growth_global0_x128
            - lower.fee_growth_outside0_x128
            - upper.fee_growth_outside0_x128
        )
        inside1 = (
            fee_growth_global1_x128
            - lower.fee_growth_outside1_x128
            - upper.fee_growth_outside1_x128
        )
    return to_unsigned(inside0, _BITS), to_unsigned(inside1, _BITS)