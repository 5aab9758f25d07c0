"""Disjoint-set forest with union by rank and path compression."""

from __future__ import annotations

from typing import Sequence


class UnionFind:
    """Disjoint sets over ``range(n)``.

    A representative stores ``n + rank`` as its parent entry; every other
    element stores the index of its parent.
    """

    def __init__(self, n: int) -> None:
        self._parent = [n] * n
        self._compressed = True

    def __len__(self) -> int:
        return len(self._parent)

    def is_representative(self, x: int) -> bool:
        return self._parent[x] >= len(self._parent)

    def find(self, x: int) -> int:
        """Return the representative of ``x``, compressing the path to it."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")
        root = x
        while not self.is_representative(root):
            root = self._parent[root]
        while x != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def simple_find(self, x: int) -> int:
        """Return the representative of ``x``; valid only after ``compress``."""
        if not self._compressed:
            raise RuntimeError("simple_find requires a compressed union-find")
        return x if self.is_representative(x) else self._parent[x]

    def compress(self) -> None:
        """Point every element directly at its representative."""
        for i in range(len(self._parent)):
            self.find(i)
        self._compressed = True

    def merge(self, x: int, y: int) -> None:
        """Unite the sets containing ``x`` and ``y``."""
        self._compressed = False
        i = self.find(x)
        j = self.find(y)
        if i == j:
            return
        if self._parent[i] < self._parent[j]:
            self._parent[i] = j
        elif self._parent[i] > self._parent[j]:
            self._parent[j] = i
        else:
            self._parent[j] = i
            self._parent[i] += 1

    @staticmethod
    def make_bipartition(split: Sequence[bool]) -> UnionFind:
        """Return a compressed union-find with one set per side of ``split``."""
        result = UnionFind(len(split))
        first: dict[bool, int] = {}
        for i, side in enumerate(split):
            representative = first.setdefault(bool(side), i)
            result.merge(representative, i)
        result.compress()
        return result