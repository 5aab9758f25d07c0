"""Enumeration of the bipartitions of a leaf set packed into one word."""

from __future__ import annotations

from .bits import WORD_BITS, bitscan, popcount, rbitscan


class SmallBipartition:
    """Iterates over the left halves of all bipartitions of the bits in ``mask``.

    The left half always contains the lowest leaf, so each unordered
    bipartition is produced exactly once.
    """

    def __init__(self, mask: int = 1) -> None:
        self.mask = mask
        self.cur_bip = 0
        self.reset()

    def masked_increment(self, bip: int) -> int:
        """Return the next subset of ``mask`` after ``bip`` in counting order."""
        return -(bip ^ self.mask) & self.mask

    def has_choices(self) -> bool:
        return self.num_leaves() > 2

    def is_valid(self) -> bool:
        return (self.cur_bip >> rbitscan(self.mask)) == 0

    def next(self) -> bool:
        """Advance to the next bipartition; return whether it is still valid."""
        if not self.is_valid():
            raise RuntimeError("bipartition enumeration is already exhausted")
        self.cur_bip = self.masked_increment(self.cur_bip)
        return self.is_valid()

    def reset(self) -> None:
        self.cur_bip = 1 << bitscan(self.mask)

    def left_mask(self) -> int:
        return self.cur_bip

    def right_mask(self) -> int:
        return self.cur_bip ^ self.mask

    def leftmost_leaf(self) -> int:
        return bitscan(self.mask)

    def rightmost_leaf(self) -> int:
        return rbitscan(self.mask)

    def num_leaves(self) -> int:
        return popcount(self.mask)

    @staticmethod
    def full_set(num_leaves: int) -> SmallBipartition:
        """Return the bipartition enumerator over leaves ``0 .. num_leaves - 1``."""
        if not 0 <= num_leaves < WORD_BITS:
            raise ValueError(f"at most {WORD_BITS - 1} leaves fit into a word")
        return SmallBipartition((1 << num_leaves) - 1)