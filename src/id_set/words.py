"""
Word-level constants and helpers.

A word is a 32-bit unsigned integer; bit i of word w represents id ``w * 32 + i``.
"""

import sys
from array import array

BITS = 32
WORD_MASK = (1 << BITS) - 1

# array typecode holding exactly one 32-bit unsigned word
TYPECODE = "I" if array("I").itemsize == 4 else "L"


def word_index(id_: int) -> tuple[int, int]:
    """Split an id into (word index, bit mask)."""
    return id_ >> 5, 1 << (id_ & (BITS - 1))


def words_for_bits(nbits: int) -> int:
    """Number of words needed to hold ``nbits`` ids."""
    return -(-nbits // BITS)


def popcount(words) -> int:
    """Total number of set bits across an iterable of words."""
    return sum(word.bit_count() for word in words)


def saturating_bits(nwords: int) -> int:
    """Convert a word count to an id count, saturating at ``sys.maxsize``."""
    if nwords > sys.maxsize // BITS:
        return sys.maxsize
    return nwords * BITS


def new_words(length: int = 0) -> array:
    """Allocate a zeroed word buffer."""
    return array(TYPECODE, [0]) * length
