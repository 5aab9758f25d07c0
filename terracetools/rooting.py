"""Moving the root of a rooted binary tree."""

from __future__ import annotations

import dataclasses
from typing import Sequence

from .trees import NONE, Node, check_rooted_tree, foreach_preorder, is_leaf


def _is_rchild(tree: Sequence[Node], node: int) -> bool:
    return tree[tree[node].parent].rchild == node


def _copy_subtree(src: Sequence[Node], dst: list[Node], sub_root: int) -> None:
    stack = [sub_root]
    while stack:
        idx = stack.pop()
        node = src[idx]
        target = dst[idx]
        if is_leaf(node):
            target.lchild = NONE
            target.rchild = NONE
            target.taxon = node.taxon
        else:
            target.lchild = node.lchild
            target.rchild = node.rchild
            target.taxon = NONE
            dst[node.lchild].parent = idx
            dst[node.rchild].parent = idx
            stack.append(node.lchild)
            stack.append(node.rchild)


def _copy_reversed(src: Sequence[Node], dst: list[Node], child: int, cur: int,
                   new_child: int, extra: int | None = None) -> None:
    from_right = _is_rchild(src, child)
    opposite = src[cur].child(not from_right)
    dst[cur].set_child(from_right, new_child)
    dst[cur].set_child(not from_right, opposite)
    dst[new_child].parent = cur
    dst[opposite].parent = cur
    _copy_subtree(src, dst, opposite)
    if extra is not None:
        _copy_subtree(src, dst, extra)


def root_split(tree: Sequence[Node], num_leaves: int) -> list[bool]:
    """Return which taxa lie in the right subtree of the root."""
    split = [False] * num_leaves

    def mark(i: int) -> None:
        if is_leaf(tree[i]):
            split[tree[i].taxon] = True

    foreach_preorder(tree, mark, tree[0].rchild)
    return split


def reroot_at_node(tree: Sequence[Node], node_idx: int) -> list[Node]:
    """Return a copy of the tree rooted on the edge above ``node_idx``."""
    if node_idx == 0:
        raise ValueError("can't reroot at the root")
    check_rooted_tree(tree)
    if tree[node_idx].parent == 0:
        return [dataclasses.replace(node) for node in tree]

    out = [Node() for _ in tree]
    _copy_subtree(tree, out, node_idx)

    parent = tree[node_idx].parent
    reverse = _is_rchild(tree, node_idx)
    root = out[0]
    root.parent = NONE
    root.taxon = NONE
    root.set_child(reverse, node_idx)
    root.set_child(not reverse, parent)
    out[node_idx].parent = 0
    out[parent].parent = 0

    prev, cur, nxt = node_idx, parent, tree[parent].parent
    while nxt != 0:
        _copy_reversed(tree, out, prev, cur, nxt)
        prev, cur, nxt = cur, nxt, tree[nxt].parent

    opposite = tree[0].child(not _is_rchild(tree, cur))
    _copy_reversed(tree, out, prev, cur, opposite, extra=opposite)

    check_rooted_tree(out)
    return out


def reroot_at_taxon_inplace(tree: list[Node], taxon: int) -> None:
    """Rearrange the tree so that the leaf of ``taxon`` is the root's right child."""
    matches = [i for i, node in enumerate(tree) if node.taxon == taxon]
    if not matches:
        raise ValueError("the tree doesn't contain the given taxon")
    if len(matches) > 1:
        raise ValueError("the tree contains the given taxon more than once")
    root_leaf = matches[0]
    check_rooted_tree(tree)

    # make root_leaf the rightmost leaf
    cur, p = root_leaf, tree[root_leaf].parent
    while cur != 0:
        if tree[p].lchild == cur:
            tree[p].lchild, tree[p].rchild = tree[p].rchild, tree[p].lchild
        cur, p = p, tree[p].parent

    # move the root down the right spine until it meets root_leaf
    root = tree[0]
    while root.rchild != root_leaf:
        li, ri = root.lchild, root.rchild
        right = tree[ri]
        rli, rri = right.lchild, right.rchild
        left, right_right = tree[li], tree[rri]
        left.parent, right_right.parent = right_right.parent, left.parent
        root.lchild, root.rchild = ri, rri
        right.lchild, right.rchild = li, rli