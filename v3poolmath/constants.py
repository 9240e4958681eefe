"""Fixed-point constants, integer bounds and call parameters."""

from dataclasses import dataclass

MAX_UINT256 = (1 << 256) - 1
MAX_UINT160 = (1 << 160) - 1
MAX_UINT128 = (1 << 128) - 1
MAX_INT128 = (1 << 127) - 1
MIN_INT128 = -(1 << 127)

Q96 = 1 << 96
Q128 = 1 << 128
Q192 = 1 << 192


@dataclass(frozen=True)
class MethodParameters:
    """Generated parameters for executing a contract call."""

    calldata: bytes
    value: int