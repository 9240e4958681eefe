import pytest

from v3poolmath.constants import Q96
from v3poolmath.encode_sqrt_ratio import encode_sqrt_ratio_x96


@pytest.mark.parametrize(
    ("amount1", "amount0", "expected"),
    [
        (1, 1, Q96),
        (100, 1, 792281625142643375935439503360),
        (1, 100, 7922816251426433759354395033),
        (111, 333, 45742400955009932534161870629),
        (333, 111, 137227202865029797602485611888),
    ],
)
def test_encode_sqrt_ratio_x96(amount1, amount0, expected):
    assert encode_sqrt_ratio_x96(amount1, amount0) == expected


def test_zero_denominator():
    with pytest.raises(ZeroDivisionError):
        encode_sqrt_ratio_x96(1, 0)


def test_negative_ratio():
    with pytest.raises(ValueError):
        encode_sqrt_ratio_x96(-100, 1)