"""
Exceptions raised by id_set.
"""


class CardinalityMismatchError(RuntimeError):
    """Cached cardinality disagrees with the popcount of the stored words."""

    def __init__(self, operation: str, cached: int, actual: int):
        super().__init__(
            f"Cardinality mismatch after {operation}: cached {cached}, actual {actual}"
        )
        self.operation = operation
        self.cached = cached
        self.actual = actual
