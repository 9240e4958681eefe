import pytest

from v3poolmath.constants import MAX_UINT256, Q96, Q128
from v3poolmath.errors import MulDivOverflowError
from v3poolmath.full_math import mul_div, mul_div_q96, mul_div_rounding_up


def test_mul_div_zero_denominator():
    with pytest.raises(MulDivOverflowError):
        mul_div(Q128, 5, 0)


def test_mul_div_overflow():
    with pytest.raises(MulDivOverflowError):
        mul_div(Q128, Q128, 1)
    with pytest.raises(MulDivOverflowError):
        mul_div(MAX_UINT256, MAX_UINT256, MAX_UINT256 - 1)


def test_mul_div_all_max():
    assert mul_div(MAX_UINT256, MAX_UINT256, MAX_UINT256) == MAX_UINT256


def test_mul_div_identity_cases():
    assert mul_div(Q128, Q128, Q128) == Q128
    assert mul_div(Q128, 1, 1) == Q128
    assert mul_div(0, MAX_UINT256, 7) == 0


def test_mul_div_phantom_overflow_result_fits():
    assert mul_div(Q128, 35 * Q128, 8 * Q128) == mul_div(35, Q128, 8)


def test_mul_div_rejects_negative_input():
    with pytest.raises(ValueError):
        mul_div(-1, 1, 1)


def test_rounding_up_exact_matches_floor():
    assert mul_div_rounding_up(MAX_UINT256, MAX_UINT256, MAX_UINT256) == MAX_UINT256
    assert mul_div_rounding_up(Q128, 4, 2) == mul_div(Q128, 4, 2)


def test_rounding_up_adds_one_on_remainder():
    assert mul_div_rounding_up(Q128, 1, 3) == mul_div(Q128, 1, 3) + 1
    assert mul_div_rounding_up(Q128, 50, 150) == mul_div(Q128, 50, 150) + 1


def test_rounding_up_overflow():
    with pytest.raises(MulDivOverflowError):
        mul_div_rounding_up(
            535006138814359,
            432862656469423142931042426214547535783388063929571229938474969,
            2,
        )
    with pytest.raises(MulDivOverflowError):
        mul_div_rounding_up(Q128, 5, 0)


def test_mul_div_q96_matches_mul_div():
    for a, b in [(Q96, Q96), (Q128, 12345), (MAX_UINT256, 3), (7, 11)]:
        assert mul_div_q96(a, b) == mul_div(a, b, Q96)


def test_mul_div_q96_identity():
    assert mul_div_q96(Q96, Q96) == Q96


def test_mul_div_q96_overflow():
    with pytest.raises(MulDivOverflowError):
        mul_div_q96(MAX_UINT256, MAX_UINT256)