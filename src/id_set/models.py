"""
Descriptive models.

Pydantic models summarizing a set's contents and storage.
"""

from pydantic import BaseModel, Field

from .store import StoreKind


class IdSetStats(BaseModel):
    """Storage summary for an IdSet."""

    cardinality: int = Field(..., description="Number of ids in the set")
    capacity: int = Field(..., description="Ids storable without reallocating")
    words: int = Field(..., description="Number of 32-bit words in use")
    representation: StoreKind = Field(..., description="Backing buffer: inline or heap")
    min_id: int | None = Field(None, description="Smallest id (null if empty)")
    max_id: int | None = Field(None, description="Largest id (null if empty)")
