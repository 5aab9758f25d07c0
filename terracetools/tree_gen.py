"""Generator of random rooted binary trees in Newick-like format."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass


@dataclass
class _GenNode:
    parent: int | None = None
    left: int | None = None
    right: int | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _extract_random(items: list[int], rng: random.Random) -> int:
    i = rng.randint(0, len(items) - 1)
    result = items[i]
    items[i] = items[-1]
    items.pop()
    return result


def _render(tree: list[_GenNode], names: list[str]) -> str:
    parts: list[str] = []
    stack: list[tuple[int, int]] = [(0, 0)]
    while stack:
        index, state = stack.pop()
        node = tree[index]
        if node.is_leaf():
            parts.append(names[index])
        elif state == 0:
            parts.append("(")
            stack.append((index, 1))
            stack.append((node.left, 0))
        elif state == 1:
            parts.append(", ")
            stack.append((index, 2))
            stack.append((node.right, 0))
        else:
            parts.append(")" + names[index])
    return "".join(parts)


def generate_tree(num_leaves: int, rng: random.Random | None = None) -> str:
    """Return a random binary tree on leaves ``s0 .. s{num_leaves-1}``.

    The tree grows by repeatedly splitting a randomly chosen leaf in two.
    """
    if num_leaves < 2:
        raise ValueError("a tree needs at least two leaves")
    rng = rng if rng is not None else random.Random()
    tree = [_GenNode()]
    leaves = [0]
    for _ in range(1, num_leaves):
        parent = _extract_random(leaves, rng)
        lchild = len(tree)
        tree.append(_GenNode(parent))
        leaves.append(lchild)
        rchild = len(tree)
        tree.append(_GenNode(parent))
        leaves.append(rchild)
        tree[parent].left = lchild
        tree[parent].right = rchild
    names = [""] * len(tree)
    for i, leaf in enumerate(leaves):
        names[leaf] = f"s{i}"
    return _render(tree, names)


def main(argv: list[str] | None = None) -> int:
    """Print a random tree with the number of leaves given as first argument."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 1:
        return 1
    try:
        num_leaves = int(args[0])
        if num_leaves < 2:
            return 2
        print(generate_tree(num_leaves))
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        return 42
    return 0


if __name__ == "__main__":
    sys.exit(main())