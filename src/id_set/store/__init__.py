"""
Word storage.

Hybrid inline/heap buffer of 32-bit words plus its borrowing and owning iterators.
"""

from .block_store import INLINE_WORDS, BlockStore, StoreKind
from .blocks import BlockIntoIter, BlockIter, Drain

__all__ = [
    "BlockStore",
    "StoreKind",
    "INLINE_WORDS",
    "BlockIter",
    "BlockIntoIter",
    "Drain",
]
