"""Bit operations on 64-bit unsigned machine words."""

WORD_BITS = 64
MAX_INDEX = (1 << WORD_BITS) - 1


def _check_word(word: int) -> None:
    if not 0 <= word <= MAX_INDEX:
        raise ValueError(f"{word} does not fit into a {WORD_BITS}-bit word")


def popcount(word: int) -> int:
    """Return the number of set bits in ``word``."""
    _check_word(word)
    return word.bit_count()


def bitscan(word: int) -> int:
    """Return the index of the lowest set bit of a non-zero ``word``."""
    _check_word(word)
    if word == 0:
        raise ValueError("bitscan of an empty word is undefined")
    return (word & -word).bit_length() - 1


def rbitscan(word: int) -> int:
    """Return the index of the highest set bit of a non-zero ``word``."""
    _check_word(word)
    if word == 0:
        raise ValueError("rbitscan of an empty word is undefined")
    return word.bit_length() - 1


def partial_popcount(word: int, i: int) -> int:
    """Return the number of set bits of ``word`` below position ``i`` (modulo the word size)."""
    _check_word(word)
    prefix_mask = (1 << (i & (WORD_BITS - 1))) - 1
    return (word & prefix_mask).bit_count()


def add_overflow(a: int, b: int) -> tuple[int, bool]:
    """Add two words; return the wrapped result and whether it overflowed."""
    _check_word(a)
    _check_word(b)
    total = a + b
    return total & MAX_INDEX, total > MAX_INDEX


def mul_overflow(a: int, b: int) -> tuple[int, bool]:
    """Multiply two words; return the wrapped result and whether it overflowed."""
    _check_word(a)
    _check_word(b)
    product = a * b
    return product & MAX_INDEX, product > MAX_INDEX