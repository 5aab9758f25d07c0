"""Helpers for applying triplet constraints to leaf sets during supertree search."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Sequence

from .bitvector import Bitvector, RankedBitvector
from .trees import Node, is_leaf
from .union_find import UnionFind


@dataclass(frozen=True)
class Constraint:
    """A rooted triplet: ``left`` and ``shared`` are closer to each other than to ``right``."""

    left: int
    shared: int
    right: int


def filter_constraints(
    leaves: RankedBitvector, c_occ: Bitvector, constraints: Sequence[Constraint]
) -> Bitvector:
    """Return the subset of ``c_occ`` whose constraints lie entirely within ``leaves``."""
    result = Bitvector(c_occ.size)
    for c_i in c_occ:
        c = constraints[c_i]
        if leaves.get(c.left) and leaves.get(c.shared) and leaves.get(c.right):
            result.set(c_i)
    return result


def apply_constraints(
    leaves: RankedBitvector, c_occ: Bitvector, constraints: Sequence[Constraint]
) -> UnionFind:
    """Return the sets of leaf ranks formed by joining every constraint's close pair.

    The constraints in ``c_occ`` must already be filtered with ``leaves``.
    """
    sets = UnionFind(leaves.count())
    for c_i in c_occ:
        c = constraints[c_i]
        sets.merge(leaves.rank(c.left), leaves.rank(c.shared))
    sets.compress()
    return sets


def map_constraints(
    leaves: RankedBitvector, constraints: Sequence[Constraint]
) -> list[Constraint]:
    """Return the constraints with every leaf replaced by its rank in ``leaves``."""
    return [
        dataclasses.replace(
            c,
            left=leaves.rank(c.left),
            shared=leaves.rank(c.shared),
            right=leaves.rank(c.right),
        )
        for c in constraints
    ]


def leaf_occ(tree: Sequence[Node]) -> RankedBitvector:
    """Return a ranked bitvector over the node indices that marks the tree's leaves."""
    leaves = RankedBitvector(len(tree))
    for i, node in enumerate(tree):
        if is_leaf(node):
            leaves.set(i)
    leaves.update_ranks()
    return leaves