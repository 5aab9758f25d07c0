"""Extraction of the subtrees induced by the taxa present in each site."""

from __future__ import annotations

from typing import Sequence

from .trees import (
    NONE,
    Node,
    check_rooted_tree,
    foreach_postorder,
    foreach_preorder,
    is_leaf,
    num_nodes_from_leaves,
)

Matrix = Sequence[Sequence[bool]]


class BadInputError(ValueError):
    """Raised when a tree and an occurrence matrix do not fit together."""


def compute_node_occ(tree: Sequence[Node], occ: Matrix) -> tuple[list[list[bool]], list[int]]:
    """Return the site occurrences of every node and the number of leaves per site.

    ``occ`` holds one row per taxon and one column per site; an inner node
    occurs in a site if either of its children does.
    """
    num_sites = len(occ[0]) if occ else 0
    if len(tree) != num_nodes_from_leaves(len(occ)):
        raise BadInputError("tree size does not match the number of taxa")
    check_rooted_tree(tree)
    node_occ = [[False] * num_sites for _ in tree]
    num_leaves_per_site = [0] * num_sites

    def visit(i: int) -> None:
        node = tree[i]
        if is_leaf(node):
            if node.taxon == NONE:
                raise BadInputError("tree contains an unnamed leaf")
            row = [bool(value) for value in occ[node.taxon]]
            node_occ[i] = row
            for site, present in enumerate(row):
                num_leaves_per_site[site] += present
        else:
            node_occ[i] = [
                a or b for a, b in zip(node_occ[node.lchild], node_occ[node.rchild])
            ]

    foreach_postorder(tree, visit)
    return node_occ, num_leaves_per_site


def induced_lca(tree: Sequence[Node], node_occ: Matrix, column: int) -> int:
    """Return the lowest node whose subtree holds every taxon present in ``column``."""
    lca = 0
    while not is_leaf(tree[lca]):
        node = tree[lca]
        left = node_occ[node.lchild][column]
        right = node_occ[node.rchild][column]
        if left and right:
            return lca
        lca = node.lchild if left else node.rchild
    return lca


def subtree(tree: Sequence[Node], node_occ: Matrix,
            num_leaves_per_site: Sequence[int], site: int) -> list[Node]:
    """Return the tree induced by the taxa present in ``site``."""
    root = induced_lca(tree, node_occ, site)
    if is_leaf(tree[root]):
        return [Node(NONE, NONE, NONE, tree[root].taxon)]

    def present(i: int) -> bool:
        return bool(node_occ[i][site])

    out: list[Node] = [Node()]
    boundary: list[int] = []

    def visit(i: int) -> None:
        node = tree[i]
        leaf_occ = is_leaf(node) and present(i)
        inner_occ = not is_leaf(node) and present(node.lchild) and present(node.rchild)
        if leaf_occ or (inner_occ and i != root):
            if not boundary:
                raise BadInputError("site induces a tree with a single edge")
            parent = boundary[-1]
            out.append(Node(parent, NONE, NONE, node.taxon))
            if out[parent].lchild == NONE:
                out[parent].lchild = len(out) - 1
            else:
                out[parent].rchild = len(out) - 1
                boundary.pop()
        if inner_occ:
            boundary.append(len(out) - 1)

    foreach_preorder(tree, visit, root)
    return out


def subtrees(tree: Sequence[Node], occ: Matrix) -> list[list[Node]]:
    """Return the induced subtree of every site of ``occ``."""
    node_occ, num_leaves_per_site = compute_node_occ(tree, occ)
    num_sites = len(occ[0]) if occ else 0
    return [subtree(tree, node_occ, num_leaves_per_site, site) for site in range(num_sites)]