"""
Ordered set of non-negative integer ids backed by a bit-vector.

Each id maps to one bit of a 32-bit word (word ``id // 32``, bit ``id % 32``).
The set keeps a cached cardinality that every mutation updates incrementally,
so ``len()`` is O(1). Membership, insert and remove are O(1); iteration yields
ids in ascending order.

Set algebra comes in two forms:
- views (``union``, ``intersection``, ...) return lazy word streams that borrow
  their operands and can be chained, decoded or collected
- in-place operations (``union_with``, ...) rewrite this set's words and adjust
  the cardinality by the popcount delta of the words that changed
"""

import logging
import sys
from array import array
from itertools import zip_longest
from typing import Callable, Iterable, Optional

from ..config import get_config
from ..errors import CardinalityMismatchError
from ..models import IdSetStats
from ..store import BlockIntoIter, BlockIter, BlockStore
from ..stream import (
    Complement,
    Difference,
    Intersection,
    SetIdIter,
    SymmetricDifference,
    Union,
    WordIter,
    WordStream,
    as_word_stream,
)
from ..words import (
    BITS,
    TYPECODE,
    WORD_MASK,
    popcount,
    saturating_bits,
    word_index,
    words_for_bits,
)

logger = logging.getLogger(__name__)


class IdSet:
    """
    Compact ordered set of non-negative integers.

    >>> s = IdSet([3, 1, 400])
    >>> list(s)
    [1, 3, 400]
    >>> s.insert(3)
    False
    >>> len(s)
    3

    Views borrow the sets they were built from; do not mutate a set while a
    view over it is still being consumed.
    """

    __slots__ = ("_blocks", "_len")

    def __init__(self, ids: Iterable[int] = ()):
        self._blocks = BlockStore()
        self._len = 0
        for id_ in ids:
            self.insert(id_)

    @classmethod
    def _from_store(cls, blocks: BlockStore, cardinality: int) -> "IdSet":
        id_set = cls.__new__(cls)
        id_set._blocks = blocks
        id_set._len = cardinality
        return id_set

    # Constructors

    @classmethod
    def with_capacity(cls, nbits: int) -> "IdSet":
        """
        Create an empty set with room for ids ``0..nbits-1``.

        Args:
            nbits: Number of ids to pre-size storage for

        Raises:
            ValueError: If ``nbits`` is negative
        """
        if nbits < 0:
            raise ValueError(f"nbits must be non-negative, got {nbits}")
        return cls._from_store(BlockStore.with_capacity(words_for_bits(nbits)), 0)

    @classmethod
    def filled(cls, n: int) -> "IdSet":
        """
        Create the set ``{0, ..., n-1}``.

        Built from whole all-ones words plus one masked partial word.

        Raises:
            ValueError: If ``n`` is negative
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")

        full, rest = divmod(n, BITS)
        words = array(TYPECODE, [WORD_MASK]) * full
        if rest:
            words.append((1 << rest) - 1)
        return cls._from_store(BlockStore.from_words(words), n)

    @classmethod
    def from_ids(cls, ids: Iterable[int]) -> "IdSet":
        """Create a set from any iterable of ids; duplicates are ignored."""
        return cls(ids)

    @classmethod
    def from_words(cls, words: Iterable[int]) -> "IdSet":
        """
        Import raw 32-bit words.

        Bit i of word w marks id ``w * 32 + i``. Cardinality is computed with
        one full popcount over the imported words.

        Args:
            words: Words in index order

        Raises:
            OverflowError: If a word is outside ``0..2**32-1``
        """
        blocks = BlockStore.from_words(words)
        cardinality = popcount(blocks)
        logger.debug(f"Imported {len(blocks)} words, {cardinality} ids")
        return cls._from_store(blocks, cardinality)

    @classmethod
    def from_bytes(cls, data: bytes) -> "IdSet":
        """
        Import little-endian bytes.

        Byte k holds ids ``8k..8k+7`` (least significant bit first). A trailing
        partial word is zero-padded.
        """
        data = bytes(data)
        padding = -len(data) % 4
        words = array(TYPECODE)
        words.frombytes(data + bytes(padding))
        if sys.byteorder == "big":
            words.byteswap()
        return cls.from_words(words)

    @classmethod
    def from_blocks(cls, stream: Iterable[int]) -> "IdSet":
        """
        Materialize a word stream, such as a combinator view, into a new set.

        The stream must be finite; an unbounded complement never returns.
        """
        return cls.from_words(stream)

    # Bookkeeping

    def __len__(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def __bool__(self) -> bool:
        return self._len != 0

    def capacity(self) -> int:
        """Number of ids storable without reallocating (saturating)."""
        return saturating_bits(self._blocks.capacity())

    def reserve(self, nbits: int) -> None:
        """Make room for ids ``0..nbits-1``."""
        self._blocks.reserve(words_for_bits(nbits))

    def shrink_to_fit(self) -> None:
        """Release trailing empty words, moving back to inline storage if possible."""
        self._blocks.shrink_to_fit()
        self._verify("shrink_to_fit")

    def clear(self) -> None:
        self._blocks.clear()
        self._len = 0

    # Membership

    def insert(self, id_: int) -> bool:
        """
        Add ``id_`` to the set, growing storage as needed.

        Returns:
            True if the id was added, False if it was already present

        Raises:
            ValueError: If ``id_`` is negative
        """
        if id_ < 0:
            raise ValueError(f"id must be non-negative, got {id_}")

        word, mask = word_index(id_)
        blocks = self._blocks
        if word >= len(blocks):
            blocks.resize(word + 1)

        old = blocks[word]
        if old & mask:
            return False
        blocks[word] = old | mask
        self._len += 1
        return True

    def remove(self, id_: int) -> bool:
        """
        Remove ``id_`` from the set.

        Returns:
            True if the id was present, False otherwise (including ids past
            the end of storage and negative ids)
        """
        if id_ < 0:
            return False

        word, mask = word_index(id_)
        blocks = self._blocks
        if word >= len(blocks):
            return False

        old = blocks[word]
        if not old & mask:
            return False
        blocks[word] = old & ~mask
        self._len -= 1
        return True

    def contains(self, id_: int) -> bool:
        if id_ < 0:
            return False
        word, mask = word_index(id_)
        if word >= len(self._blocks):
            return False
        return bool(self._blocks[word] & mask)

    __contains__ = contains

    def retain(self, predicate: Callable[[int], bool]) -> None:
        """
        Keep only the ids for which ``predicate`` returns true.

        The predicate is called once per id, in ascending order. Empty words
        are skipped without calling it. If the predicate raises, ids already
        rejected stay removed and the rest of the set is left unchanged.
        """
        blocks = self._blocks
        for index in range(len(blocks)):
            word = blocks[index]
            if not word:
                continue

            base = index * BITS
            kept = word
            removed = 0
            try:
                while word:
                    low = word & -word
                    word ^= low
                    if not predicate(base + low.bit_length() - 1):
                        kept ^= low
                        removed += 1
            finally:
                # word and count are written together so len() stays exact
                if removed:
                    blocks[index] = kept
                    self._len -= removed

        self._verify("retain")

    def min(self) -> Optional[int]:
        """Smallest id, or None if the set is empty."""
        if not self._len:
            return None
        return next(self.ids())

    def max(self) -> Optional[int]:
        """Largest id, or None if the set is empty."""
        if not self._len:
            return None
        blocks = self._blocks
        for index in range(len(blocks) - 1, -1, -1):
            word = blocks[index]
            if word:
                return index * BITS + word.bit_length() - 1
        return None

    # Iteration

    def ids(self) -> SetIdIter:
        """Borrowing iterator over the ids in ascending order, with exact ``len()``."""
        return SetIdIter(self._blocks.iter(), self._len)

    __iter__ = ids

    def into_ids(self) -> SetIdIter:
        """
        Consume the set's contents as ascending ids.

        The set is left empty; the returned iterator owns the words.
        """
        cardinality = self._len
        words = self._blocks.into_iter()
        self._len = 0
        return SetIdIter(words, cardinality)

    def blocks(self) -> BlockIter:
        """Borrowing iterator over the raw words."""
        return self._blocks.iter()

    def into_blocks(self) -> BlockIntoIter:
        """Consume the set's raw words, leaving it empty."""
        self._len = 0
        return self._blocks.into_iter()

    # Algebra views

    def union(self, other) -> Union:
        """Lazy view of ids in either set."""
        return Union(self.blocks(), as_word_stream(other))

    def intersection(self, other) -> Intersection:
        """Lazy view of ids in both sets."""
        return Intersection(self.blocks(), as_word_stream(other))

    def difference(self, other) -> Difference:
        """Lazy view of ids in this set but not in ``other``."""
        return Difference(self.blocks(), as_word_stream(other))

    def symmetric_difference(self, other) -> SymmetricDifference:
        """Lazy view of ids in exactly one of the sets."""
        return SymmetricDifference(self.blocks(), as_word_stream(other))

    def complement(self) -> Complement:
        """
        Lazy view of every id not in this set.

        Unbounded: intersect it with a finite operand before consuming it,
        e.g. ``IdSet.filled(n).intersection(s.complement())``.
        """
        return Complement(self.blocks())

    # In-place algebra

    def _operand(self, other) -> WordStream:
        if other is self:
            return WordIter(self._blocks.to_list())
        return as_word_stream(other)

    def _grow_to(self, stream: WordStream) -> None:
        needed = stream.remaining()
        if needed is not None and needed > len(self._blocks):
            self._blocks.resize(needed)

    def union_with(self, other) -> None:
        """Add every id of ``other`` to this set."""
        stream = self._operand(other)
        self._grow_to(stream)

        blocks = self._blocks
        for index, word in enumerate(stream):
            if index >= len(blocks):
                blocks.resize(index + 1)
            old = blocks[index]
            new = old | word
            if new != old:
                blocks[index] = new
                self._len += new.bit_count() - old.bit_count()

        self._verify("union_with")

    def intersection_with(self, other) -> None:
        """Keep only the ids also in ``other``."""
        stream = self._operand(other)

        blocks = self._blocks
        consumed = 0
        for index in range(len(blocks)):
            word = next(stream, None)
            if word is None:
                break
            consumed += 1
            old = blocks[index]
            new = old & word
            if new != old:
                blocks[index] = new
                self._len -= old.bit_count() - new.bit_count()

        # Words past the end of other intersect with nothing
        if consumed < len(blocks):
            self._len -= blocks.drain(consumed).count()

        self._verify("intersection_with")

    def difference_with(self, other) -> None:
        """Remove every id of ``other`` from this set."""
        stream = self._operand(other)

        blocks = self._blocks
        for index, word in zip(range(len(blocks)), stream):
            old = blocks[index]
            new = old & ~word & WORD_MASK
            if new != old:
                blocks[index] = new
                self._len -= old.bit_count() - new.bit_count()

        self._verify("difference_with")

    def symmetric_difference_with(self, other) -> None:
        """Toggle membership of every id of ``other``."""
        stream = self._operand(other)
        self._grow_to(stream)

        blocks = self._blocks
        for index, word in enumerate(stream):
            if not word:
                continue
            if index >= len(blocks):
                blocks.resize(index + 1)
            old = blocks[index]
            new = old ^ word
            blocks[index] = new
            self._len += new.bit_count() - old.bit_count()

        self._verify("symmetric_difference_with")

    # Relations

    def is_subset(self, other: "IdSet") -> bool:
        """True if every id of this set is in ``other``."""
        if self._len > len(other):
            return False
        return self.intersection(other).count() == self._len

    def is_superset(self, other: "IdSet") -> bool:
        """True if every id of ``other`` is in this set."""
        return other.is_subset(self)

    def is_disjoint(self, other: "IdSet") -> bool:
        """True if the sets share no id."""
        if not self._len or not len(other):
            return True
        return self.intersection(other).is_zero()

    # Comparison and copying

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdSet):
            return NotImplemented
        if self is other:
            return True
        if self._len != other._len:
            return False
        return all(
            lhs == rhs
            for lhs, rhs in zip_longest(self.blocks(), other.blocks(), fillvalue=0)
        )

    __hash__ = None

    def copy(self) -> "IdSet":
        """Independent deep copy."""
        return type(self)._from_store(self._blocks.copy(), self._len)

    __copy__ = copy

    def __deepcopy__(self, memo: Optional[dict] = None) -> "IdSet":
        return self.copy()

    # Export

    def to_words(self) -> list[int]:
        """Raw 32-bit words in index order."""
        return self._blocks.to_list()

    def to_bytes(self) -> bytes:
        """Little-endian bytes of every stored word, inverse of ``from_bytes``."""
        words = array(TYPECODE, self._blocks.to_list())
        if sys.byteorder == "big":
            words.byteswap()
        return words.tobytes()

    def stats(self) -> IdSetStats:
        """Summary of contents and storage."""
        return IdSetStats(
            cardinality=self._len,
            capacity=self.capacity(),
            words=len(self._blocks),
            representation=self._blocks.kind,
            min_id=self.min(),
            max_id=self.max(),
        )

    def __repr__(self) -> str:
        values = "{" + ", ".join(map(str, self)) + "}" if self._len else ""
        return f"{type(self).__name__}({values})"

    def _verify(self, operation: str) -> None:
        """Recount bits when ``verify_cardinality`` is enabled."""
        if not get_config().verify_cardinality:
            return
        actual = popcount(self._blocks)
        if actual != self._len:
            logger.error(
                f"Cardinality mismatch after {operation}: "
                f"cached {self._len}, actual {actual}"
            )
            raise CardinalityMismatchError(operation, self._len, actual)
