"""
Id decoding.

Turns a word stream into the ascending sequence of ids whose bits are set,
peeling the lowest set bit of each word. Total cost is proportional to the
number of words consumed plus the number of ids emitted.
"""

from typing import Iterable, Iterator

from ..words import BITS


class IdIter:
    """
    Lazy, single-use decoder of ids from a word stream.

    Zero words are skipped without emitting anything, but still advance the
    base id by one word width.
    """

    __slots__ = ("_words", "_word", "_base")

    def __init__(self, words: Iterable[int]):
        self._words = iter(words)
        self._word = 0
        # First consumed word moves the base to 0
        self._base = -BITS

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        word = self._word
        while not word:
            word = next(self._words)
            self._base += BITS

        low = word & -word
        self._word = word & (word - 1)
        return self._base + low.bit_length() - 1


class SetIdIter(IdIter):
    """
    Id decoder over a set's own storage.

    Knows the exact number of ids left (starting at the set's cached
    cardinality), so callers can pre-size destination buffers via ``len()``.
    """

    __slots__ = ("_remaining",)

    def __init__(self, words: Iterable[int], cardinality: int):
        super().__init__(words)
        self._remaining = cardinality

    def __next__(self) -> int:
        if not self._remaining:
            raise StopIteration
        id_ = super().__next__()
        self._remaining -= 1
        return id_

    def __len__(self) -> int:
        return self._remaining
