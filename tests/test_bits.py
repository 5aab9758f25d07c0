import pytest

from terracetools.bits import (
    MAX_INDEX,
    WORD_BITS,
    add_overflow,
    bitscan,
    mul_overflow,
    partial_popcount,
    popcount,
    rbitscan,
)

MASK = 0b00101001011100


def test_scans_on_reference_mask():
    assert bitscan(MASK) == 2
    assert rbitscan(MASK) == 11
    assert popcount(MASK) == 6


@pytest.mark.parametrize("k", [0, 1, 31, 32, 63])
def test_single_bit_words(k):
    word = 1 << k
    assert bitscan(word) == k
    assert rbitscan(word) == k
    assert popcount(word) == 1


def test_full_word():
    assert popcount(MAX_INDEX) == WORD_BITS
    assert bitscan(MAX_INDEX) == 0
    assert rbitscan(MAX_INDEX) == WORD_BITS - 1


def test_scans_of_zero_raise():
    with pytest.raises(ValueError):
        bitscan(0)
    with pytest.raises(ValueError):
        rbitscan(0)


@pytest.mark.parametrize("word", [-1, MAX_INDEX + 1])
def test_out_of_range_words_raise(word):
    with pytest.raises(ValueError):
        popcount(word)


def test_partial_popcount_increments_by_bit():
    for i in range(WORD_BITS - 1):
        step = partial_popcount(MASK, i + 1) - partial_popcount(MASK, i)
        assert step == (MASK >> i) & 1


def test_partial_popcount_bounds():
    assert partial_popcount(MASK, 0) == 0
    assert partial_popcount(MASK, WORD_BITS - 1) == popcount(MASK)
    assert partial_popcount(MASK, WORD_BITS) == partial_popcount(MASK, 0)


def test_add_without_overflow():
    assert add_overflow(MAX_INDEX - 5, 5) == (MAX_INDEX, False)


def test_add_with_overflow():
    assert add_overflow(MAX_INDEX, 1) == (0, True)


def test_mul_overflow():
    assert mul_overflow(1 << 32, 1 << 32) == (0, True)
    assert mul_overflow(1 << 31, 1 << 32) == (1 << 63, False)


def test_mul_is_commutative():
    a, b = 123456789, 987654321
    assert mul_overflow(a, b) == mul_overflow(b, a)
    assert mul_overflow(MAX_INDEX, 3) == mul_overflow(3, MAX_INDEX)