import dataclasses

import pytest

from terracetools.rooting import reroot_at_node, reroot_at_taxon_inplace, root_split
from terracetools.trees import NONE, InvalidTreeError, Node, check_rooted_tree, is_leaf
from terracetools.validation import is_isomorphic_unrooted


def parse(text, indices=None):
    """Parse a binary Newick string into a pre-order numbered node list."""
    text = text.strip().rstrip(";").replace(" ", "")
    known = dict(indices) if indices is not None else {}
    nodes = []
    pos = 0

    def node(parent):
        nonlocal pos
        idx = len(nodes)
        nodes.append(Node(parent))
        if text[pos] == "(":
            pos += 1
            nodes[idx].lchild = node(idx)
            pos += 1
            nodes[idx].rchild = node(idx)
            pos += 1
        else:
            end = pos
            while end < len(text) and text[end] not in ",()":
                end += 1
            name = text[pos:end]
            pos = end
            if indices is None:
                known.setdefault(name, len(known))
            nodes[idx].taxon = known[name]
        return idx

    node(NONE)
    return nodes, known


def copy_tree(tree):
    return [dataclasses.replace(n) for n in tree]


COMPLEX = "((((s2,s4),((s13,s1),s7)),s3),s5);"


def test_root_split_marks_right_subtree():
    t, idx = parse("(1,(2,3));")
    assert root_split(t, 3) == [False, True, True]


def test_root_split_covers_right_taxa():
    t, idx = parse(COMPLEX)
    split = root_split(t, len(idx))
    right_taxa = {t[i].taxon for i in range(len(t)) if is_leaf(t[i])} - {
        idx[n] for n in ("s2", "s4", "s13", "s1", "s7", "s3")
    }
    assert {i for i, b in enumerate(split) if b} == right_taxa


@pytest.mark.parametrize("node_idx", range(1, 13))
def test_reroot_at_node_preserves_topology(node_idx):
    t, _ = parse(COMPLEX)
    original = copy_tree(t)
    out = reroot_at_node(t, node_idx)
    check_rooted_tree(out)
    assert out[node_idx].parent == 0
    assert is_isomorphic_unrooted(original, out)
    assert t == original


def test_reroot_at_root_raises():
    t, _ = parse(COMPLEX)
    with pytest.raises(ValueError, match="root"):
        reroot_at_node(t, 0)


def test_reroot_rejects_invalid_tree():
    t, _ = parse(COMPLEX)
    t[3].parent = 0
    with pytest.raises(InvalidTreeError):
        reroot_at_node(t, 3)


@pytest.mark.parametrize("name", ["s2", "s4", "s13", "s1", "s7", "s3", "s5"])
def test_reroot_at_taxon_puts_leaf_right_of_root(name):
    t, idx = parse(COMPLEX)
    original = copy_tree(t)
    reroot_at_taxon_inplace(t, idx[name])
    assert t[t[0].rchild].taxon == idx[name]
    assert is_isomorphic_unrooted(original, t)
    assert sorted(n.taxon for n in t if is_leaf(n)) == sorted(idx.values())


def test_reroot_at_missing_taxon_raises():
    t, _ = parse("(1,(2,3));")
    with pytest.raises(ValueError):
        reroot_at_taxon_inplace(t, 7)