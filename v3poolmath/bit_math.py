"""Positions of the highest and lowest set bits of an unsigned integer."""


def most_significant_bit(x):
    """Return the index of the most significant set bit of ``x``."""
    if x <= 0:
        raise ValueError("most_significant_bit overflow: input must be positive")
    return x.bit_length() - 1


def least_significant_bit(x):
    """Return the index of the least significant set bit of ``x``."""
    if x <= 0:
        raise ValueError("least_significant_bit: input must be positive")
    return (x & -x).bit_length() - 1