"""
Iterators over raw storage words.

- BlockIter: borrows a live store; the store must not be resized while it runs
- BlockIntoIter: owns a detached word buffer
- Drain: owns the tail removed from a store by ``BlockStore.drain``

All three are exact-size word streams, so they plug straight into the
set-algebra combinators.
"""

from array import array
from typing import Optional

from ..stream.base import WordStream


class BlockIter(WordStream):
    """Borrowing iterator over the words of a ``BlockStore``."""

    __slots__ = ("_store", "_pos", "_end")

    def __init__(self, store):
        self._store = store
        self._pos = 0
        self._end = len(store)

    def __next__(self) -> int:
        pos = self._pos
        if pos >= self._end:
            raise StopIteration
        self._pos = pos + 1
        return self._store[pos]

    def remaining(self) -> Optional[int]:
        return self._end - self._pos

    def __repr__(self) -> str:
        return f"BlockIter(pos={self._pos}, end={self._end})"


class _OwnedWords(WordStream):
    """Iterator over a word buffer it exclusively owns."""

    __slots__ = ("_words", "_pos")

    def __init__(self, words: array):
        self._words = words
        self._pos = 0

    def __next__(self) -> int:
        pos = self._pos
        if pos >= len(self._words):
            raise StopIteration
        self._pos = pos + 1
        return self._words[pos]

    def remaining(self) -> Optional[int]:
        return len(self._words) - self._pos


class BlockIntoIter(_OwnedWords):
    """Consuming iterator over the whole buffer taken from a store."""


class Drain(_OwnedWords):
    """Words removed from the tail of a store."""
