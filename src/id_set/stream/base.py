"""
Word-stream protocol.

A word stream is a single-use iterator of 32-bit words read left to right.
Finite streams know exactly how many words remain and report it through
``len()``; unbounded streams (complement) raise ``TypeError`` instead.

Every stream can be fed into another combinator, decoded into ascending ids,
or materialized into a new ``IdSet`` without building intermediate sets.
"""

from typing import Iterable, Iterator, Optional


class WordStream:
    """
    Base class for every producer of words.

    Subclasses implement ``__next__`` and ``remaining``.
    """

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        raise NotImplementedError

    def remaining(self) -> Optional[int]:
        """
        Number of words left in the stream.

        Returns:
            Exact count of remaining words, or None if the stream is unbounded
        """
        raise NotImplementedError

    @property
    def bounded(self) -> bool:
        """Whether the stream terminates on its own."""
        return self.remaining() is not None

    def __len__(self) -> int:
        n = self.remaining()
        if n is None:
            raise TypeError(f"{type(self).__name__} is unbounded and has no length")
        return n

    # Combinator chaining

    def union(self, other) -> "WordStream":
        """OR this stream with ``other``."""
        from .combinators import Union

        return Union(self, as_word_stream(other))

    def intersection(self, other) -> "WordStream":
        """AND this stream with ``other``."""
        from .combinators import Intersection

        return Intersection(self, as_word_stream(other))

    def difference(self, other) -> "WordStream":
        """AND-NOT this stream with ``other``."""
        from .combinators import Difference

        return Difference(self, as_word_stream(other))

    def symmetric_difference(self, other) -> "WordStream":
        """XOR this stream with ``other``."""
        from .combinators import SymmetricDifference

        return SymmetricDifference(self, as_word_stream(other))

    def complement(self) -> "WordStream":
        """
        NOT this stream.

        The result never terminates on its own; bound it by intersecting with
        a finite stream before exhausting it.
        """
        from .combinators import Complement

        return Complement(self)

    # Consumers

    def ids(self):
        """Decode the remaining words into ascending ids."""
        from .ids import IdIter

        return IdIter(self)

    def count(self) -> int:
        """Consume the stream and return the number of set bits."""
        return sum(word.bit_count() for word in self)

    def is_zero(self) -> bool:
        """Consume the stream until a non-zero word is found."""
        return not any(self)

    def collect(self):
        """Materialize the remaining words into a new ``IdSet``."""
        from ..core.id_set import IdSet

        return IdSet.from_blocks(self)


class WordIter(WordStream):
    """Exact-size word stream over a plain sequence of words."""

    def __init__(self, words: Iterable[int]):
        self._words = list(words)
        self._pos = 0

    def __next__(self) -> int:
        if self._pos >= len(self._words):
            raise StopIteration
        word = self._words[self._pos]
        self._pos += 1
        return word

    def remaining(self) -> Optional[int]:
        return len(self._words) - self._pos


def as_word_stream(source) -> WordStream:
    """
    Coerce an operand of the set algebra into a word stream.

    Args:
        source: An ``IdSet`` (borrowed), a ``BlockStore`` or an existing ``WordStream``

    Returns:
        Word stream over the operand's words

    Raises:
        TypeError: If the operand cannot supply words
    """
    if isinstance(source, WordStream):
        return source

    blocks = getattr(source, "blocks", None)
    if callable(blocks):
        return blocks()

    raise TypeError(
        f"Expected IdSet, BlockStore or WordStream, got {type(source).__name__}"
    )
