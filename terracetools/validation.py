"""Comparison of trees by topology."""

from __future__ import annotations

from typing import Sequence

from .bitvector import Bitvector
from .trees import Node, foreach_postorder, foreach_preorder, is_leaf, is_root


def tree_bipartitions(tree: Sequence[Node]) -> list[Bitvector]:
    """Return the sorted, normalised bipartitions induced by the tree's edges."""
    num_leaves = (len(tree) + 1) // 2
    bips = [Bitvector(0) for _ in tree]
    subtrees = [Bitvector(num_leaves) for _ in tree]

    def collect(i: int) -> None:
        node = tree[i]
        if is_leaf(node):
            subtrees[i].set(node.taxon)
        else:
            subtrees[i].set_bitwise_or(subtrees[node.lchild], subtrees[node.rchild])

    def normalise(i: int) -> None:
        node = tree[i]
        at_root = is_root(node)
        at_rhs_of_root = (
            not at_root and is_root(tree[node.parent]) and tree[node.parent].rchild == i
        )
        if not (at_root or at_rhs_of_root):
            if subtrees[i].get(0):
                subtrees[i].invert()
            bips[i] = subtrees[i]

    foreach_postorder(tree, collect)
    foreach_preorder(tree, normalise)
    right = tree[0].rchild
    bips[right] = subtrees[right]
    bips[right].blank()
    bips[0] = subtrees[0]
    bips[0].blank()
    return sorted(bips)


def is_isomorphic_unrooted(fst: Sequence[Node], snd: Sequence[Node]) -> bool:
    """Return whether both trees have the same unrooted topology."""
    if len(fst) != len(snd):
        raise ValueError("trees must have the same number of nodes")
    return tree_bipartitions(fst) == tree_bipartitions(snd)


def _isomorphic_rooted(fst: Sequence[Node], snd: Sequence[Node], i: int, j: int) -> bool:
    a, b = fst[i], snd[j]
    if is_leaf(a) != is_leaf(b):
        return False
    if is_leaf(a):
        return a.taxon == b.taxon
    return (
        _isomorphic_rooted(fst, snd, a.lchild, b.lchild)
        and _isomorphic_rooted(fst, snd, a.rchild, b.rchild)
    ) or (
        _isomorphic_rooted(fst, snd, a.lchild, b.rchild)
        and _isomorphic_rooted(fst, snd, a.rchild, b.lchild)
    )


def is_isomorphic_rooted(fst: Sequence[Node], snd: Sequence[Node]) -> bool:
    """Return whether both trees have the same rooted topology."""
    if len(fst) != len(snd):
        raise ValueError("trees must have the same number of nodes")
    return _isomorphic_rooted(fst, snd, 0, 0)