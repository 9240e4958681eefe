import pytest

from v3poolmath.constants import MAX_UINT256
from v3poolmath.encode_sqrt_ratio import encode_sqrt_ratio_x96
from v3poolmath.max_liquidity import (
    max_liquidity_for_amount0_imprecise,
    max_liquidity_for_amount0_precise,
    max_liquidity_for_amount1,
    max_liquidity_for_amounts,
)

LOWER = encode_sqrt_ratio_x96(100, 110)
UPPER = encode_sqrt_ratio_x96(110, 100)
INSIDE = encode_sqrt_ratio_x96(1, 1)
BELOW = encode_sqrt_ratio_x96(99, 110)
ABOVE = encode_sqrt_ratio_x96(111, 100)

BIG_BELOW_IMPRECISE = int(
    "1214437677402050006470401421068302637228917309992228326090730924516431320489727"
)
BIG_BELOW_PRECISE = int(
    "1214437677402050006470401421082903520362793114274352355276488318240158678126184"
)
BIG_ABOVE = int(
    "1214437677402050006470401421098959354205873606971497132040612572422243086574654"
)

CASES = [
    (INSIDE, 100, 200, False, 2148),
    (INSIDE, 100, MAX_UINT256, False, 2148),
    (INSIDE, MAX_UINT256, 200, False, 4297),
    (BELOW, 100, 200, False, 1048),
    (BELOW, 100, MAX_UINT256, False, 1048),
    (BELOW, MAX_UINT256, 200, False, BIG_BELOW_IMPRECISE),
    (ABOVE, 100, 200, False, 2097),
    (ABOVE, 100, MAX_UINT256, False, BIG_ABOVE),
    (ABOVE, MAX_UINT256, 200, False, 2097),
    (INSIDE, 100, 200, True, 2148),
    (INSIDE, 100, MAX_UINT256, True, 2148),
    (INSIDE, MAX_UINT256, 200, True, 4297),
    (BELOW, 100, 200, True, 1048),
    (BELOW, 100, MAX_UINT256, True, 1048),
    (BELOW, MAX_UINT256, 200, True, BIG_BELOW_PRECISE),
    (ABOVE, 100, 200, True, 2097),
    (ABOVE, 100, MAX_UINT256, True, BIG_ABOVE),
    (ABOVE, MAX_UINT256, 200, True, 2097),
]


@pytest.mark.parametrize("current, amount0, amount1, precise, expected", CASES)
def test_max_liquidity_for_amounts(current, amount0, amount1, precise, expected):
    result = max_liquidity_for_amounts(current, LOWER, UPPER, amount0, amount1, precise)
    assert result == expected


@pytest.mark.parametrize("precise", [False, True])
def test_bounds_order_does_not_matter(precise):
    forward = max_liquidity_for_amounts(INSIDE, LOWER, UPPER, 100, 200, precise)
    backward = max_liquidity_for_amounts(INSIDE, UPPER, LOWER, 100, 200, precise)
    assert forward == backward == 2148


def test_single_amount_helpers_are_symmetric_in_bounds():
    one_a = max_liquidity_for_amount1(LOWER, UPPER, 200)
    one_b = max_liquidity_for_amount1(UPPER, LOWER, 200)
    assert one_a == one_b
    precise_a = max_liquidity_for_amount0_precise(LOWER, UPPER, 100)
    precise_b = max_liquidity_for_amount0_precise(UPPER, LOWER, 100)
    assert precise_a == precise_b
    imprecise_a = max_liquidity_for_amount0_imprecise(LOWER, UPPER, 100)
    imprecise_b = max_liquidity_for_amount0_imprecise(UPPER, LOWER, 100)
    assert imprecise_a == imprecise_b


def test_below_range_matches_amount0_helpers():
    assert max_liquidity_for_amount0_imprecise(LOWER, UPPER, 100) == 1048
    assert max_liquidity_for_amount0_precise(LOWER, UPPER, 100) == 1048


def test_above_range_matches_amount1_helper():
    assert max_liquidity_for_amount1(LOWER, UPPER, 200) == 2097


def test_precise_is_never_below_imprecise():
    imprecise = max_liquidity_for_amount0_imprecise(LOWER, UPPER, MAX_UINT256)
    precise = max_liquidity_for_amount0_precise(LOWER, UPPER, MAX_UINT256)
    assert precise >= imprecise


def test_zero_width_range_raises():
    with pytest.raises(ZeroDivisionError):
        max_liquidity_for_amount1(INSIDE, INSIDE, 100)