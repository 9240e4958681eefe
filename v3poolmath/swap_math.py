"""Single swap steps and full swaps across initialized ticks."""

from dataclasses import dataclass

from .bigint import to_signed, to_unsigned
from .full_math import mul_div, mul_div_rounding_up
from .liquidity_math import add_delta
from .sqrt_price_math import (
    get_amount_0_delta,
    get_amount_1_delta,
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)
from .tick_math import (
    MAX_SQRT_RATIO,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MIN_TICK,
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
)

_MAX_FEE = 1_000_000
_BITS = 256


@dataclass
class SwapState:
    """The running state of a swap."""

    amount_specified_remaining: int = 0
    amount_calculated: int = 0
    sqrt_price_x96: int = 0
    tick_current: int = 0
    liquidity: int = 0


def compute_swap_step(
    sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, amount_remaining, fee_pips
):
    """Compute one swap step towards a target sqrt price.

    A non-negative ``amount_remaining`` is an exact input, a negative one an
    exact output. Returns ``(sqrt_ratio_next_x96, amount_in, amount_out, fee_amount)``.
    """
    fee_complement = _MAX_FEE - fee_pips
    zero_for_one = sqrt_ratio_current_x96 >= sqrt_ratio_target_x96

    if amount_remaining >= 0:
        amount_remaining_abs = amount_remaining
        amount_remaining_less_fee = mul_div(amount_remaining_abs, fee_complement, _MAX_FEE)
        if zero_for_one:
            amount_in = get_amount_0_delta(
                sqrt_ratio_target_x96, sqrt_ratio_current_x96, liquidity, True
            )
        else:
            amount_in = get_amount_1_delta(
                sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, True
            )

        if amount_remaining_less_fee >= amount_in:
            sqrt_ratio_next_x96 = sqrt_ratio_target_x96
            fee_amount = mul_div_rounding_up(amount_in, fee_pips, fee_complement)
        else:
            amount_in = amount_remaining_less_fee
            sqrt_ratio_next_x96 = get_next_sqrt_price_from_input(
                sqrt_ratio_current_x96, liquidity, amount_in, zero_for_one
            )
            fee_amount = amount_remaining_abs - amount_in

        if zero_for_one:
            amount_out = get_amount_1_delta(
                sqrt_ratio_next_x96, sqrt_ratio_current_x96, liquidity, False
            )
        else:
            amount_out = get_amount_0_delta(
                sqrt_ratio_current_x96, sqrt_ratio_next_x96, liquidity, False
            )
        return sqrt_ratio_next_x96, amount_in, amount_out, fee_amount

    amount_remaining_abs = to_unsigned(-amount_remaining, _BITS)
    if zero_for_one:
        amount_out = get_amount_1_delta(
            sqrt_ratio_target_x96, sqrt_ratio_current_x96, liquidity, False
        )
    else:
        amount_out = get_amount_0_delta(
            sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, False
        )

    if amount_remaining_abs >= amount_out:
        sqrt_ratio_next_x96 = sqrt_ratio_target_x96
    else:
        amount_out = amount_remaining_abs
        sqrt_ratio_next_x96 = get_next_sqrt_price_from_output(
            sqrt_ratio_current_x96, liquidity, amount_out, zero_for_one
        )

    if zero_for_one:
        amount_in = get_amount_0_delta(
            sqrt_ratio_next_x96, sqrt_ratio_current_x96, liquidity, True
        )
    else:
        amount_in = get_amount_1_delta(
            sqrt_ratio_current_x96, sqrt_ratio_next_x96, liquidity, True
        )
    fee_amount = mul_div_rounding_up(amount_in, fee_pips, fee_complement)
    return sqrt_ratio_next_x96, amount_in, amount_out, fee_amount


def v3_swap(
    fee,
    sqrt_price_x96,
    tick_current,
    liquidity,
    tick_spacing,
    tick_data_provider,
    zero_for_one,
    amount_specified,
    sqrt_price_limit_x96=None,
):
    """Simulate a swap across the ticks supplied by ``tick_data_provider``.

    Raises ValueError if the price limit is out of range or on the wrong side
    of the current price. Returns the final SwapState.
    """
    if sqrt_price_limit_x96 is None:
        sqrt_price_limit_x96 = MIN_SQRT_RATIO + 1 if zero_for_one else MAX_SQRT_RATIO - 1

    if zero_for_one:
        if sqrt_price_limit_x96 <= MIN_SQRT_RATIO:
            raise ValueError("RATIO_MIN")
        if sqrt_price_limit_x96 >= sqrt_price_x96:
            raise ValueError("RATIO_CURRENT")
    else:
        if sqrt_price_limit_x96 >= MAX_SQRT_RATIO:
            raise ValueError("RATIO_MAX")
        if sqrt_price_limit_x96 <= sqrt_price_x96:
            raise ValueError("RATIO_CURRENT")

    exact_input = amount_specified >= 0
    state = SwapState(
        amount_specified_remaining=amount_specified,
        amount_calculated=0,
        sqrt_price_x96=sqrt_price_x96,
        tick_current=tick_current,
        liquidity=liquidity,
    )

    while state.amount_specified_remaining != 0 and state.sqrt_price_x96 != sqrt_price_limit_x96:
        sqrt_price_start_x96 = state.sqrt_price_x96
        tick_next, initialized = tick_data_provider.next_initialized_tick_within_one_word(
            state.tick_current, zero_for_one, tick_spacing
        )
        tick_next = min(max(tick_next, MIN_TICK), MAX_TICK)
        sqrt_price_next_x96 = get_sqrt_ratio_at_tick(tick_next)

        if zero_for_one:
            target = max(sqrt_price_next_x96, sqrt_price_limit_x96)
        else:
            target = min(sqrt_price_next_x96, sqrt_price_limit_x96)

        state.sqrt_price_x96, amount_in, amount_out, fee_amount = compute_swap_step(
            state.sqrt_price_x96,
            target,
            state.liquidity,
            state.amount_specified_remaining,
            fee,
        )

        if exact_input:
            state.amount_specified_remaining = to_signed(
                state.amount_specified_remaining - amount_in - fee_amount, _BITS
            )
            state.amount_calculated = to_signed(state.amount_calculated - amount_out, _BITS)
        else:
            state.amount_specified_remaining = to_signed(
                state.amount_specified_remaining + amount_out, _BITS
            )
            state.amount_calculated = to_signed(
                state.amount_calculated + amount_in + fee_amount, _BITS
            )

        if state.sqrt_price_x96 == sqrt_price_next_x96:
            if initialized:
                liquidity_net = tick_data_provider.get_tick(tick_next).liquidity_net
                # moving leftward, liquidityNet applies with the opposite sign
                if zero_for_one:
                    liquidity_net = -liquidity_net
                state.liquidity = add_delta(state.liquidity, liquidity_net)
            state.tick_current = tick_next - 1 if zero_for_one else tick_next
        elif state.sqrt_price_x96 != sqrt_price_start_x96:
            state.tick_current = get_tick_at_sqrt_ratio(state.sqrt_price_x96)

    return state