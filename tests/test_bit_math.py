import pytest

from v3poolmath.bit_math import least_significant_bit, most_significant_bit

U256_MAX = (1 << 256) - 1
U160_MAX = (1 << 160) - 1


def test_most_significant_bit_throws_for_zero():
    with pytest.raises(ValueError):
        most_significant_bit(0)


def test_most_significant_bit_powers_of_two():
    for i in range(256):
        assert most_significant_bit(1 << i) == i


def test_most_significant_bit_all_ones():
    for i in range(1, 256):
        assert most_significant_bit((1 << i) - 1) == i - 1
    assert most_significant_bit(U256_MAX) == 255


def test_most_significant_bit_examples():
    assert most_significant_bit(int("101010", 2)) == 5
    assert most_significant_bit(U160_MAX) == 159


def test_least_significant_bit_powers_of_two():
    for i in range(256):
        assert least_significant_bit(1 << i) == i


def test_least_significant_bit_all_ones():
    for i in range(1, 256):
        assert least_significant_bit((1 << i) - 1) == 0
    assert least_significant_bit(U256_MAX) == 0


def test_least_significant_bit_examples():
    assert least_significant_bit(int("101010", 2)) == 1
    assert least_significant_bit(1 << 42) == 42


def test_least_significant_bit_rejects_zero():
    with pytest.raises(ValueError):
        least_significant_bit(0)