"""Rooted binary trees stored as flat node lists, with traversal and output helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .bits import MAX_INDEX

NONE = MAX_INDEX
"""Marker for a missing parent, child or taxon."""


@dataclass
class Node:
    """A tree node referring to its relatives by index."""

    parent: int = NONE
    lchild: int = NONE
    rchild: int = NONE
    taxon: int = NONE

    def child(self, right: bool) -> int:
        """Return the right child if ``right`` is true, else the left child."""
        return self.rchild if right else self.lchild

    def set_child(self, right: bool, value: int) -> None:
        """Set the right child if ``right`` is true, else the left child."""
        if right:
            self.rchild = value
        else:
            self.lchild = value


Tree = List[Node]
Callback = Callable[[int], None]


class InvalidTreeError(ValueError):
    """Raised when a tree is not a valid rooted binary tree."""


def is_root(node: Node) -> bool:
    """Return whether ``node`` has no parent."""
    return node.parent == NONE


def is_leaf(node: Node) -> bool:
    """Return whether ``node`` has no children."""
    return node.lchild == NONE


def _ensure(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidTreeError(message)


def check_rooted_tree(tree: Sequence[Node]) -> None:
    """Raise InvalidTreeError unless ``tree`` is a consistent tree rooted at node 0."""
    size = len(tree)
    _ensure(size != 0, "tree is empty")
    _ensure(size != 1 or (is_leaf(tree[0]) and is_root(tree[0])), "invalid trivial tree")
    for i, node in enumerate(tree):
        if is_leaf(node):
            p = node.parent
            _ensure(p < size, "parent overflow")
            _ensure(tree[p].lchild == i or tree[p].rchild == i,
                    "leaf's parent doesn't point to leaf")
        else:
            lc, rc = node.lchild, node.rchild
            _ensure(lc < size, "lchild overflow")
            _ensure(rc < size, "rchild overflow")
            _ensure(tree[lc].parent == i and tree[rc].parent == i,
                    "nodes children don't point to node")
            _ensure(lc != rc, "lchild == rchild")
    _ensure(is_root(tree[0]), "first node is not the root")


def count_unrooted_trees(num_leaves: int) -> int:
    """Return the number of unrooted binary trees on ``num_leaves`` leaves."""
    result = 1
    for i in range(3, num_leaves + 2):
        result *= 2 * i - 5
    return result


def num_leaves_from_nodes(num_nodes: int) -> int:
    """Return the number of leaves of a binary tree with ``num_nodes`` nodes."""
    if num_nodes % 2 == 0:
        raise ValueError("a binary tree has an odd number of nodes")
    return (num_nodes + 1) // 2


def num_nodes_from_leaves(num_leaves: int) -> int:
    """Return the number of nodes of a binary tree with ``num_leaves`` leaves."""
    return 2 * num_leaves - 1


_DESCEND_LEFT, _DESCEND_RIGHT, _ASCEND = range(3)


def tree_traversal(
    tree: Sequence[Node],
    pre_cb: Optional[Callback],
    post_cb: Optional[Callback],
    sibling_cb: Optional[Callback],
    leaf_cb: Optional[Callback],
    root: int = 0,
) -> None:
    """Walk the subtree below ``root`` depth-first, left before right.

    ``pre_cb`` fires on entering an inner node, ``sibling_cb`` between its
    children, ``post_cb`` on leaving it, and ``leaf_cb`` on every leaf.
    Any callback may be None to skip that event.
    """
    stack = [(root, _DESCEND_LEFT)]
    while stack:
        index, state = stack.pop()
        node = tree[index]
        if is_leaf(node):
            callback = leaf_cb
        elif state == _DESCEND_LEFT:
            callback = pre_cb
            stack.append((index, _DESCEND_RIGHT))
            stack.append((node.lchild, _DESCEND_LEFT))
        elif state == _DESCEND_RIGHT:
            callback = sibling_cb
            stack.append((index, _ASCEND))
            stack.append((node.rchild, _DESCEND_LEFT))
        else:
            callback = post_cb
        if callback is not None:
            callback(index)


def foreach_postorder(tree: Sequence[Node], cb: Callback, root: int = 0) -> None:
    """Call ``cb`` on every node below ``root`` in post-order."""
    tree_traversal(tree, None, cb, None, cb, root)


def foreach_preorder(tree: Sequence[Node], cb: Callback, root: int = 0) -> None:
    """Call ``cb`` on every node below ``root`` in pre-order."""
    tree_traversal(tree, cb, None, None, cb, root)


def preorder(tree: Sequence[Node]) -> list[int]:
    """Return the node indices in pre-order."""
    result: list[int] = []
    foreach_preorder(tree, result.append)
    return result


def postorder(tree: Sequence[Node]) -> list[int]:
    """Return the node indices in post-order."""
    result: list[int] = []
    foreach_postorder(tree, result.append)
    return result


def as_newick(tree: Sequence[Node], names: Sequence[str]) -> str:
    """Return the tree in Newick format, naming leaves by their taxon."""
    parts: list[str] = []

    def leaf(i: int) -> None:
        if tree[i].taxon != NONE:
            parts.append(names[tree[i].taxon])

    tree_traversal(
        tree,
        lambda _: parts.append("("),
        lambda _: parts.append(")"),
        lambda _: parts.append(","),
        leaf,
        0,
    )
    parts.append(";")
    return "".join(parts)


def print_tree_dot(tree: Sequence[Node], names: Sequence[str], rooted: bool) -> str:
    """Return a Graphviz description of the tree."""
    lines: list[str] = []
    edge = " -> " if rooted else " -- "

    def inner(node: int) -> None:
        lines.append(f"{node} [shape=point];\n")
        lines.append(f"{tree[node].lchild}{edge}{node};\n")
        lines.append(f"{tree[node].rchild}{edge}{node};\n")

    def leaf(node: int) -> None:
        lines.append(f'{node} [label="{names[tree[node].taxon]}"];\n')

    lines.append("digraph {\n" if rooted else "graph {\n")
    if rooted:
        tree_traversal(tree, inner, None, None, leaf, 0)
    elif is_leaf(tree[0]):
        leaf(0)
    else:
        tree_traversal(tree, inner, None, None, leaf, tree[0].lchild)
        tree_traversal(tree, inner, None, None, leaf, tree[0].rchild)
        lines.append(f"{tree[0].lchild}{edge}{tree[0].rchild};\n")
    lines.append("}\n")
    return "".join(lines)