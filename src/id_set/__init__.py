"""
id_set: compact ordered sets of non-negative integers.

Bit-vector sets with O(1) membership and cardinality, hybrid inline/heap
storage, and lazily composable set algebra over 32-bit word streams.
Conversion to and from pyroaring bitmaps is provided by
``to_bitmap`` and ``from_bitmap``.
"""

from .config import IdSetConfig, get_config, reset_config
from .core import IdSet, collect_into
from .errors import CardinalityMismatchError
from .interop import from_bitmap, to_bitmap
from .models import IdSetStats
from .store import INLINE_WORDS, BlockStore, StoreKind
from .stream import (
    Complement,
    Difference,
    IdIter,
    Intersection,
    SetIdIter,
    SymmetricDifference,
    Union,
    WordIter,
    WordStream,
)
from .words import BITS, WORD_MASK

__version__ = "0.1.0"

__all__ = [
    "IdSet",
    "collect_into",
    "BlockStore",
    "StoreKind",
    "INLINE_WORDS",
    "WordStream",
    "WordIter",
    "IdIter",
    "SetIdIter",
    "Union",
    "Intersection",
    "Difference",
    "SymmetricDifference",
    "Complement",
    "IdSetStats",
    "IdSetConfig",
    "get_config",
    "reset_config",
    "CardinalityMismatchError",
    "to_bitmap",
    "from_bitmap",
    "BITS",
    "WORD_MASK",
]
