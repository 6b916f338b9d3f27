"""
Word streams.

Id decoding and set-algebra combinators over streams of 32-bit words.
"""

from .base import WordIter, WordStream, as_word_stream
from .combinators import (
    Complement,
    Difference,
    Intersection,
    SymmetricDifference,
    Union,
)
from .ids import IdIter, SetIdIter

__all__ = [
    "WordStream",
    "WordIter",
    "as_word_stream",
    "IdIter",
    "SetIdIter",
    "Union",
    "Intersection",
    "Difference",
    "SymmetricDifference",
    "Complement",
]
