"""
Set-algebra combinators.

Each combinator wraps one or two word streams and combines their next words
with a fixed boolean operator:

| Combinator          | Word op      | Length                   |
|---------------------|--------------|--------------------------|
| Union               | OR           | max(left, right)         |
| Intersection        | AND          | min(left, right)         |
| Difference          | AND-NOT      | left                     |
| SymmetricDifference | XOR          | max(left, right)         |
| Complement          | NOT          | unbounded                |

An exhausted side of a binary combinator supplies zero words.
"""

from typing import Optional

from ..words import WORD_MASK
from .base import WordStream


def _max_remaining(left: WordStream, right: WordStream) -> Optional[int]:
    lhs, rhs = left.remaining(), right.remaining()
    if lhs is None or rhs is None:
        return None
    return max(lhs, rhs)


class _Binary(WordStream):
    """Shared plumbing for two-operand combinators."""

    __slots__ = ("left", "right")

    def __init__(self, left: WordStream, right: WordStream):
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.left!r}, {self.right!r})"


class Union(_Binary):
    """Words of either side (OR)."""

    def __next__(self) -> int:
        lhs = next(self.left, None)
        rhs = next(self.right, None)
        if lhs is None and rhs is None:
            raise StopIteration
        return (lhs or 0) | (rhs or 0)

    def remaining(self) -> Optional[int]:
        return _max_remaining(self.left, self.right)


class Intersection(_Binary):
    """
    Words of both sides (AND).

    Ends as soon as either side ends: past that point every bit is zero on at
    least one side.
    """

    def __next__(self) -> int:
        lhs = next(self.left, None)
        if lhs is None:
            raise StopIteration
        rhs = next(self.right, None)
        if rhs is None:
            raise StopIteration
        return lhs & rhs

    def remaining(self) -> Optional[int]:
        lhs, rhs = self.left.remaining(), self.right.remaining()
        if lhs is None:
            return rhs
        if rhs is None:
            return lhs
        return min(lhs, rhs)


class Difference(_Binary):
    """Words of the left side not present on the right (AND-NOT)."""

    def __next__(self) -> int:
        lhs = next(self.left)
        rhs = next(self.right, 0)
        return lhs & ~rhs & WORD_MASK

    def remaining(self) -> Optional[int]:
        return self.left.remaining()


class SymmetricDifference(_Binary):
    """Words on exactly one side (XOR)."""

    def __next__(self) -> int:
        lhs = next(self.left, None)
        rhs = next(self.right, None)
        if lhs is None and rhs is None:
            raise StopIteration
        return (lhs or 0) ^ (rhs or 0)

    def remaining(self) -> Optional[int]:
        return _max_remaining(self.left, self.right)


class Complement(WordStream):
    """
    Bitwise NOT of a stream, continuing with all-ones words forever.

    Never terminates on its own. Consumers must bound it, typically by
    intersecting it with a finite stream such as ``IdSet.filled(n).blocks()``.
    """

    __slots__ = ("source",)

    def __init__(self, source: WordStream):
        self.source = source

    def __next__(self) -> int:
        word = next(self.source, None)
        if word is None:
            return WORD_MASK
        return ~word & WORD_MASK

    def remaining(self) -> Optional[int]:
        return None

    def __repr__(self) -> str:
        return f"Complement({self.source!r})"
