# terracetools

Building blocks for working with phylogenetic terraces. Trees are rooted
binary trees held as flat lists of nodes. The package also provides
bitvectors with rank and select, a union-find structure, rerooting,
per-partition subtree extraction and tree isomorphism checks. Two small
commands generate random test data.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Trees

A tree is a list of `terracetools.trees.Node` objects, and node 0 is the root.
Each node has `parent`, `lchild`, `rchild` and `taxon` fields. A missing
relative or taxon is marked with `terracetools.trees.NONE`. Leaves carry a
taxon index into a list of names.

```python
from terracetools.trees import NONE, Node, as_newick, check_rooted_tree

tree = [
    Node(NONE, 1, 2, NONE),
    Node(0, NONE, NONE, 1),
    Node(0, 3, 4, NONE),
    Node(2, NONE, NONE, 3),
    Node(2, NONE, NONE, 4),
]
check_rooted_tree(tree)          # raises InvalidTreeError if inconsistent
as_newick(tree, ["root", "foo", "", "bar", "baz"])   # '(foo,(bar,baz));'
```

## Modules

- `terracetools.trees` provides `Node`, `InvalidTreeError`, `is_root`,
  `is_leaf` and `check_rooted_tree`. For traversal it has `tree_traversal`,
  `foreach_preorder`, `foreach_postorder`, `preorder` and `postorder`. It
  counts with `count_unrooted_trees`, `num_leaves_from_nodes` and
  `num_nodes_from_leaves`. For output, `as_newick` and `print_tree_dot` both
  return strings; `print_tree_dot` returns Graphviz text.
- `terracetools.rooting` provides the following:
  - `reroot_at_node` returns a new tree rooted on the edge above a node.
  - `reroot_at_taxon_inplace` moves the root so that the given taxon's leaf
    becomes the root's right child.
  - `root_split` marks the taxa in the root's right subtree.
- `terracetools.subtree_extraction` provides `compute_node_occ`,
  `induced_lca`, `subtree` and `subtrees`. `subtrees` builds the tree induced
  by each column of an occurrence matrix. The matrix is a sequence of rows of
  booleans, one row per taxon. Mismatched input raises `BadInputError`.
- `terracetools.validation` provides `tree_bipartitions`,
  `is_isomorphic_rooted` and `is_isomorphic_unrooted`.
- `terracetools.bitvector` provides `Bitvector` and `RankedBitvector`, along
  with `full_set` and `full_ranked_set`.
- `terracetools.union_find` provides `UnionFind`, including
  `UnionFind.make_bipartition`.
- `terracetools.small_bipartition` provides `SmallBipartition`, which
  enumerates the bipartitions of a leaf set that fits into one word.
- `terracetools.supertree_helpers` provides `Constraint`,
  `filter_constraints`, `apply_constraints`, `map_constraints` and
  `leaf_occ`.
- `terracetools.bits` provides 64-bit word helpers: `popcount`, `bitscan`,
  `rbitscan`, `partial_popcount`, `add_overflow` and `mul_overflow`.
- `terracetools.io_utils` provides `comma_separated` and `read_file_full`.
  `read_file_full` raises `FileOpenError` when a file cannot be opened.

## Command-line tools

`terrace-tree-gen` prints a random binary tree with the given number of
leaves. The leaves are named `s0`, `s1`, and so on. Children are separated by
`", "` and the output has no trailing `;`. The command exits with status 1
when no argument is given and 2 when fewer than two leaves are requested.

```
terrace-tree-gen 10
```

`terrace-site-gen` prints a random occurrence matrix for a number of species
and sites. Each entry is 1 with the given probability. The first line is
`<species> <sites>`. Each following row holds the 0/1 entries and then the
species name. One species, drawn at random, is present in every site. The
draw can also fall past the last species, in which case no species is forced
to be present everywhere.

```
terrace-site-gen 10 4 0.5
```

The same generators are available from Python as
`terracetools.tree_gen.generate_tree` and
`terracetools.site_gen.generate_sites`. Both take an optional
`random.Random` argument.

## What this package does not do

This package does not:

- read Newick strings or occurrence-matrix files;
- count or enumerate the trees on a terrace.

It provides the tree, bitvector, union-find and constraint structures that
such an analysis builds on. Trees and matrices must be built in Python before
they are passed to these functions.