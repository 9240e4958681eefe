"""Sorted lists of initialized ticks and lookups over them."""

from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass

from .errors import TickListError

_WORD_BITS = 8


@dataclass(frozen=True, order=True)
class Tick:
    """An initialized tick and the liquidity that changes when it is crossed."""

    index: int
    liquidity_gross: int = 0
    liquidity_net: int = 0


class TickList(Sequence):
    """An immutable list of ticks sorted by index, usable as a tick data provider."""

    def __init__(self, ticks=()):
        self._ticks = tuple(ticks)
        self._indices = [tick.index for tick in self._ticks]

    def __getitem__(self, position):
        return self._ticks[position]

    def __len__(self):
        return len(self._ticks)

    def __repr__(self):
        return f"TickList({list(self._ticks)!r})"

    def validate_list(self, tick_spacing):
        """Check spacing, ordering and net liquidity; raise ValueError on failure."""
        if tick_spacing <= 0:
            raise ValueError("TICK_SPACING_NONZERO")
        if not self._ticks:
            raise ValueError("LENGTH")
        if any(tick.index % tick_spacing for tick in self._ticks):
            raise ValueError("TICK_SPACING")
        if any(later < earlier for earlier, later in zip(self._ticks, self._ticks[1:])):
            raise ValueError("SORTED")
        total = 0
        for tick in self._ticks:
            total += tick.liquidity_net
            if total < 0:
                raise ValueError("ZERO_NET")
        if total != 0:
            raise ValueError("ZERO_NET")

    def is_below_smallest(self, tick):
        """Return whether ``tick`` lies below the first tick of the list."""
        return tick < self._ticks[0].index

    def is_at_or_above_largest(self, tick):
        """Return whether ``tick`` lies at or above the last tick of the list."""
        return tick >= self._ticks[-1].index

    def binary_search_by_tick(self, tick):
        """Return the position of the largest tick whose index is at most ``tick``.

        Raises TickListError if ``tick`` lies below the smallest tick.
        """
        if self.is_below_smallest(tick):
            raise TickListError(TickListError.BELOW_SMALLEST)
        return bisect_right(self._indices, tick) - 1

    def next_initialized_tick(self, tick, lte):
        """Return the nearest tick at or below ``tick`` (lte) or strictly above it."""
        if lte:
            if self.is_below_smallest(tick):
                raise TickListError(TickListError.BELOW_SMALLEST)
            if self.is_at_or_above_largest(tick):
                return self._ticks[-1]
            return self._ticks[self.binary_search_by_tick(tick)]
        if self.is_at_or_above_largest(tick):
            raise TickListError(TickListError.AT_OR_ABOVE_LARGEST)
        if self.is_below_smallest(tick):
            return self._ticks[0]
        return self._ticks[self.binary_search_by_tick(tick) + 1]

    def get_tick(self, index):
        """Return the tick with exactly the given index.

        Raises TickListError if the list holds no such tick.
        """
        tick = self._ticks[self.binary_search_by_tick(index)]
        if tick.index != index:
            raise TickListError(TickListError.NOT_CONTAINED)
        return tick

    def next_initialized_tick_within_one_word(self, tick, lte, tick_spacing):
        """Return the next tick within the same bitmap word and whether it is initialized."""
        compressed = tick // tick_spacing
        if lte:
            word_pos = compressed >> _WORD_BITS
            minimum = (word_pos << _WORD_BITS) * tick_spacing
            if self.is_below_smallest(tick):
                return minimum, False
            index = self.next_initialized_tick(tick, lte).index
            nearest = max(minimum, index)
            return nearest, nearest == index
        word_pos = (compressed + 1) >> _WORD_BITS
        maximum = (((word_pos + 1) << _WORD_BITS) - 1) * tick_spacing
        if self.is_at_or_above_largest(tick):
            return maximum, False
        index = self.next_initialized_tick(tick, lte).index
        nearest = min(maximum, index)
        return nearest, nearest == index