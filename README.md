# v3poolmath

Exact integer arithmetic for concentrated-liquidity pools. Every function works
on plain Python `int`s and follows the fixed-width rules of the on-chain pool
contracts. Results wrap, round and fail at the same points. Sqrt prices are
Q64.96 fixed-point values, fee growth is Q128.128, and ticks are integers in the
range ±887272.

## Installation

```
pip install v3poolmath
```

The package has no third-party dependencies.

## Modules

| Module | Contents |
| --- | --- |
| `v3poolmath.bit_math` | `most_significant_bit`, `least_significant_bit` |
| `v3poolmath.full_math` | `mul_div`, `mul_div_rounding_up`, `mul_div_q96`. These multiply and then divide without losing precision, and fail when the result does not fit in 256 bits. |
| `v3poolmath.liquidity_math` | `add_delta`. It adds a signed `int128` delta to a `uint128` liquidity and checks for overflow. |
| `v3poolmath.encode_sqrt_ratio` | `encode_sqrt_ratio_x96(amount1, amount0)` returns `sqrt(amount1 / amount0)` as a Q64.96 value. |
| `v3poolmath.tick_math` | `get_sqrt_ratio_at_tick`, `get_tick_at_sqrt_ratio`, and the bounds `MIN_TICK`, `MAX_TICK`, `MIN_SQRT_RATIO` and `MAX_SQRT_RATIO` |
| `v3poolmath.nearest_usable_tick` | `nearest_usable_tick(tick, tick_spacing)` |
| `v3poolmath.sqrt_price_math` | Next-price functions (`get_next_sqrt_price_from_input`, `get_next_sqrt_price_from_output`, and the two token-specific forms). Amount functions (`get_amount_0_delta`, `get_amount_1_delta` and their `_signed` variants). |
| `v3poolmath.max_liquidity` | `max_liquidity_for_amounts`, `max_liquidity_for_amount0_precise`, `max_liquidity_for_amount0_imprecise`, `max_liquidity_for_amount1` |
| `v3poolmath.fee_growth` | `FeeGrowthOutside`, `get_fee_growth_inside` |
| `v3poolmath.tokens_owed` | `get_tokens_owed` |
| `v3poolmath.tick_list` | `Tick`, `TickList`. A `TickList` is an immutable sequence of ticks sorted by index. It offers `validate_list`, `binary_search_by_tick`, `next_initialized_tick`, `get_tick` and `next_initialized_tick_within_one_word`, so it can serve as the tick data provider for `v3_swap`. |
| `v3poolmath.swap_math` | `compute_swap_step`, `v3_swap`, `SwapState` |
| `v3poolmath.bigint` | `to_unsigned(value, bits)` and `to_signed(value, bits)` reduce an integer to a fixed-width two's complement value. |
| `v3poolmath.constants` | `Q96`, `Q128`, `Q192`, integer bounds such as `MAX_UINT256`, and the `MethodParameters` dataclass (`calldata`, `value`) |
| `v3poolmath.errors` | `MathError` and its subclasses |

## Examples

```python
from v3poolmath.encode_sqrt_ratio import encode_sqrt_ratio_x96
from v3poolmath.tick_math import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio

price = encode_sqrt_ratio_x96(1, 1)          # 2**96
assert get_sqrt_ratio_at_tick(0) == price
assert get_tick_at_sqrt_ratio(price) == 0
```

```python
from v3poolmath.nearest_usable_tick import nearest_usable_tick

nearest_usable_tick(5, 10)    # 10
nearest_usable_tick(-5, 10)   # 0
```

A single swap step towards a fixed price target:

```python
from v3poolmath.swap_math import compute_swap_step
from v3poolmath.encode_sqrt_ratio import encode_sqrt_ratio_x96

next_price, amount_in, amount_out, fee = compute_swap_step(
    encode_sqrt_ratio_x96(1, 1),
    encode_sqrt_ratio_x96(101, 100),
    2 * 10**18,
    10**18,
    600,
)
```

A full swap across the ticks of a `TickList`:

```python
from v3poolmath.tick_list import Tick, TickList
from v3poolmath.swap_math import v3_swap
from v3poolmath.encode_sqrt_ratio import encode_sqrt_ratio_x96

ticks = TickList([
    Tick(index=-60, liquidity_gross=10**18, liquidity_net=10**18),
    Tick(index=60, liquidity_gross=10**18, liquidity_net=-10**18),
])
state = v3_swap(3000, encode_sqrt_ratio_x96(1, 1), 0, 10**18, 60,
                ticks, True, 10**15, None)
print(state.amount_calculated, state.tick_current)
```

In `v3_swap`, a non-negative `amount_specified` is an exact input and a negative
one is an exact output. If you pass `None` as the price limit, the swap uses the
range boundary one step inside `MIN_SQRT_RATIO` or `MAX_SQRT_RATIO`.

## Errors

Arithmetic failures raise subclasses of `v3poolmath.errors.MathError`:

- `MulDivOverflowError`
- `AddDeltaOverflowError`
- `PriceOverflowError`
- `SafeCastOverflowError`
- `InsufficientLiquidityError`
- `InvalidPriceOrLiquidityError`
- `InvalidPriceError`
- `InvalidTickError`
- `InvalidSqrtPriceError`
- `TickListError`

Invalid arguments raise `ValueError`. This covers a non-positive tick spacing, a
tick out of bounds, a value outside its integer width, a failed
`TickList.validate_list`, or a swap price limit on the wrong side. `encode_sqrt_ratio_x96`
raises `ZeroDivisionError` when `amount0` is zero.

## What this package does not do

The package computes numbers only. It does not provide:

- token, price or pool objects;
- conversion between ticks and human-readable token prices;
- pool address computation;
- encoding of routes or call data. `MethodParameters` is only a container for call data and a value.

## Running the tests

```
pip install -e ".[test]"
pytest
```