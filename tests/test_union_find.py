import pytest

from terracetools.union_find import UnionFind


def test_fresh_elements_are_singletons():
    uf = UnionFind(5)
    assert len(uf) == 5
    for i in range(5):
        assert uf.is_representative(i)
        assert uf.find(i) == i
        assert uf.simple_find(i) == i


def test_merges_join_sets():
    uf = UnionFind(6)
    uf.merge(0, 1)
    uf.merge(2, 3)
    uf.merge(1, 3)
    assert len({uf.find(i) for i in range(4)}) == 1
    assert uf.find(4) == 4
    assert uf.find(5) == 5
    assert uf.find(0) != uf.find(4)


def test_merge_same_set_is_noop():
    uf = UnionFind(3)
    uf.merge(0, 1)
    rep = uf.find(0)
    uf.merge(1, 0)
    assert uf.find(0) == rep
    assert uf.find(1) == rep
    assert sum(uf.is_representative(i) for i in range(3)) == 2


def test_compress_makes_simple_find_exact():
    uf = UnionFind(8)
    for a, b in [(0, 1), (2, 3), (0, 2), (4, 5), (6, 7), (4, 6), (0, 4)]:
        uf.merge(a, b)
    uf.compress()
    for i in range(8):
        assert uf.simple_find(i) == uf.find(i)
    assert len({uf.simple_find(i) for i in range(8)}) == 1


def test_simple_find_requires_compression():
    uf = UnionFind(3)
    uf.merge(0, 1)
    with pytest.raises(RuntimeError):
        uf.simple_find(0)


def test_find_out_of_range_raises():
    with pytest.raises(IndexError):
        UnionFind(3).find(3)


def test_make_bipartition_groups_by_side():
    split = [False, True, True, False, True]
    uf = UnionFind.make_bipartition(split)
    left = {uf.simple_find(i) for i, side in enumerate(split) if not side}
    right = {uf.simple_find(i) for i, side in enumerate(split) if side}
    assert len(left) == 1
    assert len(right) == 1
    assert left != right
    assert sum(uf.is_representative(i) for i in range(len(split))) == 2


def test_make_bipartition_single_side():
    uf = UnionFind.make_bipartition([True] * 4)
    assert len({uf.simple_find(i) for i in range(4)}) == 1