"""
Conversion between IdSet and pyroaring bitmaps.

Roaring bitmaps hold 32-bit values, so only sets whose ids are below 2**32
can be converted to a ``BitMap``.
"""

import logging

from pyroaring import BitMap

from .core import IdSet, collect_into

logger = logging.getLogger(__name__)


def to_bitmap(id_set: IdSet) -> BitMap:
    """
    Copy an IdSet into a Roaring bitmap.

    Args:
        id_set: Set to convert

    Returns:
        BitMap holding the same ids

    Raises:
        ValueError: If the set holds an id that does not fit in 32 bits
    """
    largest = id_set.max()
    if largest is not None and largest > 0xFFFFFFFF:
        raise ValueError(f"Id {largest} does not fit in a 32-bit Roaring bitmap")

    bitmap = BitMap(id_set.ids())
    logger.debug(f"Converted IdSet to BitMap: {len(bitmap)} ids")
    return bitmap


def from_bitmap(bitmap: BitMap) -> IdSet:
    """
    Copy a Roaring bitmap into an IdSet, pre-sizing storage for its largest id.

    Args:
        bitmap: Source bitmap

    Returns:
        IdSet holding the same ids
    """
    if not bitmap:
        return IdSet()

    id_set = collect_into(bitmap, lambda: IdSet.with_capacity(bitmap.max() + 1))
    logger.debug(f"Converted BitMap to IdSet: {len(id_set)} ids")
    return id_set
