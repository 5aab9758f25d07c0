"""Fixed-size bit sets with ordered iteration and rank/select support."""

from __future__ import annotations

import copy as _copy
from functools import total_ordering
from itertools import islice
from typing import Iterator

from .bits import MAX_INDEX, WORD_BITS


@total_ordering
class Bitvector:
    """A set of indices in ``range(size)`` backed by one integer.

    A sentinel bit is kept at position ``size`` so that scanning for the next
    set bit always terminates at ``size``.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("bitvector size must be non-negative")
        self._size = size
        self._bits = 1 << size

    @property
    def size(self) -> int:
        return self._size

    @property
    def _sentinel(self) -> int:
        return 1 << self._size

    def _check_index(self, i: int) -> None:
        if not 0 <= i < self._size:
            raise IndexError(f"index {i} out of range for bitvector of size {self._size}")

    def _check_same_size(self, *others: Bitvector) -> None:
        for other in others:
            if other._size != self._size:
                raise ValueError("bitvectors must have the same size")

    def set(self, i: int) -> None:
        """Set bit ``i``."""
        self._check_index(i)
        self._bits |= 1 << i

    def clr(self, i: int) -> None:
        """Clear bit ``i``."""
        self._check_index(i)
        self._bits &= ~(1 << i)

    def flip(self, i: int) -> None:
        """Flip bit ``i``."""
        self._check_index(i)
        self._bits ^= 1 << i

    def get(self, i: int) -> bool:
        """Return bit ``i``."""
        self._check_index(i)
        return bool((self._bits >> i) & 1)

    def empty(self) -> bool:
        """Return True if no bit is set."""
        return self._bits == self._sentinel

    def blank(self) -> None:
        """Clear all bits."""
        self._bits = self._sentinel

    def invert(self) -> None:
        """Invert all bits."""
        self._bits ^= self._sentinel - 1

    def bitwise_xor(self, other: Bitvector) -> None:
        """Apply element-wise xor with ``other``."""
        self._check_same_size(other)
        self._bits = (self._bits ^ other._bits) | self._sentinel

    def set_bitwise_or(self, fst: Bitvector, snd: Bitvector) -> None:
        """Make this bitvector the element-wise or of ``fst`` and ``snd``."""
        self._check_same_size(fst, snd)
        self._bits = fst._bits | snd._bits

    def first_set(self) -> int:
        """Return the first set index, or ``size`` if none is set."""
        return (self._bits & -self._bits).bit_length() - 1

    def next_set(self, i: int) -> int:
        """Return the next set index after ``i``, or ``size`` if there is none."""
        self._check_index(i)
        rest = self._bits >> (i + 1)
        return (rest & -rest).bit_length() + i

    def last_set(self) -> int:
        """Return the index one past the last element."""
        return self._size

    def __iter__(self) -> Iterator[int]:
        i = self.first_set()
        while i < self._size:
            yield i
            i = self.next_set(i)

    def copy(self) -> Bitvector:
        return _copy.copy(self)

    def _blocks(self) -> tuple[int, ...]:
        return tuple(
            (self._bits >> (block * WORD_BITS)) & MAX_INDEX
            for block in range(self._size // WORD_BITS + 1)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitvector):
            return NotImplemented
        return self._size == other._size and self._bits == other._bits

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Bitvector):
            return NotImplemented
        self._check_same_size(other)
        return self._blocks() < other._blocks()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, bits={list(self)})"


class RankedBitvector(Bitvector):
    """A bitvector answering rank and select queries after ``update_ranks``."""

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._ranked_bits: int | None = None
        self._count = 0

    def _require_ranks(self) -> None:
        if self._ranked_bits != self._bits:
            raise RuntimeError("ranks are out of date; call update_ranks() first")

    def update_ranks(self) -> None:
        """Refresh the rank data after the bits were changed."""
        self._ranked_bits = self._bits
        self._count = self._bits.bit_count() - 1

    def count(self) -> int:
        """Return the number of set bits."""
        self._require_ranks()
        return self._count

    def rank(self, i: int) -> int:
        """Return the number of set bits in ``range(i)``."""
        self._require_ranks()
        if not 0 <= i <= self._size:
            raise IndexError(f"rank index {i} out of range")
        return (self._bits & ((1 << i) - 1)).bit_count()

    def select(self, i: int) -> int:
        """Return the index of the ``i``-th set bit; ``size`` for ``i == count()``."""
        count = self.count()
        if not 0 <= i <= count:
            raise IndexError(f"select index {i} out of range")
        if i == count:
            return self._size
        return next(islice(self, i, None))


def full_set(size: int) -> Bitvector:
    """Return a bitvector containing all ``size`` elements."""
    result = Bitvector(size)
    result.invert()
    return result


def full_ranked_set(size: int) -> RankedBitvector:
    """Return a ranked bitvector containing all ``size`` elements."""
    result = RankedBitvector(size)
    result.invert()
    result.update_ranks()
    return result