"""Conversions between Python integers and fixed-width two's complement values."""


def to_unsigned(value, bits):
    """Return ``value`` wrapped into the unsigned range of ``bits`` bits."""
    if bits <= 0:
        raise ValueError("bit width must be positive")
    return value & ((1 << bits) - 1)


def to_signed(value, bits):
    """Return ``value`` read as a two's complement integer of ``bits`` bits."""
    unsigned = to_unsigned(value, bits)
    if unsigned >> (bits - 1):
        return unsigned - (1 << bits)
    return unsigned