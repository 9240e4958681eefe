"""Exact integer math for concentrated-liquidity pools: ticks, sqrt prices, liquidity and swaps."""

__version__ = "0.1.0"