import pytest

from terracetools.small_bipartition import SmallBipartition

MASK = 0b00101001011100

EXPECTED_STEPS = [
    0b00000000000100,
    0b00000000001000,
    0b00000000001100,
    0b00000000010000,
    0b00000000010100,
    0b00000000011000,
    0b00000000011100,
    0b00000001000000,
    0b00000001000100,
    0b00000001001000,
    0b00000001001100,
    0b00000001010000,
    0b00000001010100,
    0b00000001011000,
    0b00000001011100,
    0b00001000000000,
    0b00001000000100,
    0b00001000001000,
    0b00001000001100,
    0b00001000010000,
    0b00001000010100,
    0b00001000011000,
    0b00001000011100,
    0b00001001000000,
    0b00001001000100,
    0b00001001001000,
    0b00001001001100,
    0b00001001010000,
    0b00001001010100,
    0b00001001011000,
    0b00001001011100,
]


def test_small_bipartition_enumeration():
    bip = SmallBipartition(MASK)
    assert bip.leftmost_leaf() == 2
    assert bip.rightmost_leaf() == 11
    assert bip.num_leaves() == 6
    for expected in EXPECTED_STEPS:
        assert bip.is_valid()
        assert bip.left_mask() == expected
        bip.next()
    assert not bip.is_valid()


def test_left_and_right_partition_the_mask():
    bip = SmallBipartition(MASK)
    while bip.is_valid():
        left, right = bip.left_mask(), bip.right_mask()
        assert left & right == 0
        assert left | right == MASK
        bip.next()


def test_next_after_exhaustion_raises():
    bip = SmallBipartition(MASK)
    while bip.next():
        pass
    with pytest.raises(RuntimeError):
        bip.next()


def test_reset_restarts_enumeration():
    bip = SmallBipartition(MASK)
    bip.next()
    bip.next()
    bip.reset()
    assert bip.left_mask() == EXPECTED_STEPS[0]


def test_full_set_and_choices():
    bip = SmallBipartition.full_set(4)
    assert bip.num_leaves() == 4
    assert bip.leftmost_leaf() == 0
    assert bip.rightmost_leaf() == 3
    assert bip.has_choices()
    assert not SmallBipartition.full_set(2).has_choices()


def test_full_set_too_large_raises():
    with pytest.raises(ValueError):
        SmallBipartition.full_set(64)