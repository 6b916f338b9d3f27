"""
Hybrid inline/heap word storage.

Small sets keep their words in a fixed inline buffer of ``INLINE_WORDS``
words that is allocated once and never resized. Once a set needs more words
than that, the store is promoted to a growable heap buffer. Promotion is
one-directional; only ``clear()`` and ``shrink_to_fit()`` bring a store back
inline.

The representation is never observable through the sequence interface:
length, indexing and iteration behave identically on both branches.
"""

import logging
from array import array
from enum import Enum
from typing import Iterable, Optional

from ..words import BITS, new_words
from .blocks import BlockIntoIter, BlockIter, Drain

logger = logging.getLogger(__name__)

# Words that fit in the 196-bit inline footprint
INLINE_WORDS = 196 // BITS


class StoreKind(str, Enum):
    """Which buffer currently backs a store."""

    INLINE = "inline"
    HEAP = "heap"


class BlockStore:
    """
    Growable, indexable sequence of 32-bit words.

    Inline: ``_words`` is a fixed buffer of ``INLINE_WORDS`` slots and
    ``_len`` is the number in use; slots past ``_len`` are always zero.
    Heap: ``_words`` holds exactly ``_len`` words and ``_reserved`` records
    the requested capacity.
    """

    __slots__ = ("_kind", "_words", "_len", "_reserved")

    def __init__(self):
        self._kind = StoreKind.INLINE
        self._words = new_words(INLINE_WORDS)
        self._len = 0
        self._reserved = 0

    @classmethod
    def with_capacity(cls, cap: int) -> "BlockStore":
        """
        Create an empty store sized for ``cap`` words.

        Args:
            cap: Number of words to reserve

        Returns:
            Inline store if ``cap`` is below the inline threshold, heap store otherwise
        """
        store = cls()
        if cap >= INLINE_WORDS:
            store._to_heap(cap)
        return store

    @classmethod
    def from_words(cls, words: Iterable[int]) -> "BlockStore":
        """Build a store holding ``words``, inline when they fit."""
        store = cls()
        store.extend(words)
        return store

    # Representation

    @property
    def kind(self) -> StoreKind:
        return self._kind

    @property
    def is_inline(self) -> bool:
        return self._kind is StoreKind.INLINE

    def capacity(self) -> int:
        """Number of words the store can hold without reallocating."""
        if self._kind is StoreKind.INLINE:
            return INLINE_WORDS
        return max(self._reserved, self._len)

    def _to_heap(self, cap: int) -> None:
        """Promote an inline store to the heap, keeping its words."""
        self._words = self._words[: self._len]
        self._kind = StoreKind.HEAP
        self._reserved = max(cap, self._len)
        logger.debug(f"Promoted block store to heap: {self._len} words, capacity {cap}")

    def _to_inline(self) -> None:
        """Demote a heap store whose words fit inline."""
        words = new_words(INLINE_WORDS)
        words[: self._len] = self._words
        self._words = words
        self._kind = StoreKind.INLINE
        self._reserved = 0
        logger.debug(f"Demoted block store to inline: {self._len} words")

    # Sequence interface

    def __len__(self) -> int:
        return self._len

    def _check_index(self, index: int) -> int:
        if index < 0:
            index += self._len
        if not 0 <= index < self._len:
            raise IndexError(f"block index {index} out of range for {self._len} words")
        return index

    def __getitem__(self, index: int) -> int:
        return self._words[self._check_index(index)]

    def __setitem__(self, index: int, word: int) -> None:
        self._words[self._check_index(index)] = word

    def __iter__(self) -> BlockIter:
        return BlockIter(self)

    def iter(self) -> BlockIter:
        """Borrowing iterator over the stored words."""
        return BlockIter(self)

    def blocks(self) -> BlockIter:
        return BlockIter(self)

    def into_iter(self) -> BlockIntoIter:
        """
        Take the stored words, leaving this store empty and inline.

        Returns:
            Iterator owning the words that were stored
        """
        words = self._words[: self._len]
        self._reset()
        return BlockIntoIter(words)

    def to_list(self) -> list[int]:
        return self._words[: self._len].tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlockStore):
            return NotImplemented
        return self._words[: self._len] == other._words[: other._len]

    __hash__ = None

    def __repr__(self) -> str:
        return f"BlockStore({self._kind.value}, {self.to_list()})"

    # Mutation

    def _reset(self) -> None:
        self._kind = StoreKind.INLINE
        self._words = new_words(INLINE_WORDS)
        self._len = 0
        self._reserved = 0

    def clear(self) -> None:
        """Drop every word and return to the empty inline state."""
        self._reset()

    def reserve(self, cap: int) -> None:
        """
        Make room for at least ``cap`` words.

        Args:
            cap: Total number of words the store should hold without reallocating
        """
        if cap <= INLINE_WORDS:
            return
        if self._kind is StoreKind.INLINE:
            self._to_heap(cap)
        else:
            self._reserved = max(self._reserved, cap)

    def resize(self, new_len: int) -> None:
        """
        Zero-extend or truncate to exactly ``new_len`` words.

        Args:
            new_len: Target number of words
        """
        if new_len < 0:
            raise ValueError(f"new_len must be non-negative, got {new_len}")

        if self._kind is StoreKind.INLINE:
            if new_len <= INLINE_WORDS:
                # Truncate in place; extension reuses slots that are already zero
                for i in range(new_len, self._len):
                    self._words[i] = 0
                self._len = new_len
                return
            self._to_heap(new_len)

        if new_len < self._len:
            del self._words[new_len:]
        else:
            self._words.extend(new_words(new_len - self._len))
        self._len = new_len

    def extend(self, words: Iterable[int]) -> None:
        """Append ``words``, promoting to the heap if they do not fit inline."""
        if self._kind is StoreKind.INLINE:
            tail = array(self._words.typecode, words)
            new_len = self._len + len(tail)
            if new_len <= INLINE_WORDS:
                self._words[self._len : new_len] = tail
                self._len = new_len
                return
            self._to_heap(new_len)
            self._words.extend(tail)
        else:
            self._words.extend(words)
        self._len = len(self._words)

    def drain(self, from_index: int) -> Drain:
        """
        Remove the words starting at ``from_index``.

        Inline slots are zeroed in place; heap words are deleted.

        Args:
            from_index: First word index to remove

        Returns:
            Iterator over the removed words

        Raises:
            IndexError: If ``from_index`` is past the end of the store
        """
        if not 0 <= from_index <= self._len:
            raise IndexError(
                f"drain start {from_index} out of range for {self._len} words"
            )

        tail = self._words[from_index : self._len]
        if self._kind is StoreKind.INLINE:
            for i in range(from_index, self._len):
                self._words[i] = 0
        else:
            del self._words[from_index:]
        self._len = from_index
        return Drain(tail)

    def shrink_to_fit(self) -> None:
        """Drop trailing zero words and move back inline if the rest fits."""
        new_len = self._len
        while new_len and not self._words[new_len - 1]:
            new_len -= 1
        self.drain(new_len)

        if self._kind is StoreKind.HEAP:
            if self._len <= INLINE_WORDS:
                self._to_inline()
            else:
                self._reserved = self._len

    def copy(self) -> "BlockStore":
        """Deep copy with the same representation."""
        clone = BlockStore.__new__(BlockStore)
        clone._kind = self._kind
        clone._words = array(self._words.typecode, self._words)
        clone._len = self._len
        clone._reserved = self._reserved
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo: Optional[dict] = None) -> "BlockStore":
        return self.copy()
