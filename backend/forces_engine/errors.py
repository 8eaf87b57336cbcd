"""Exceptions raised by the forces engine.

Only ``EmptyBatchError`` is an expected outcome of a well-formed call;
range and category problems are rejected earlier by schema validation.
"""

from __future__ import annotations


class ForcesEngineError(Exception):
    """Base class for all forces engine failures."""


class EmptyBatchError(ForcesEngineError):
    """Raised when a batch has no items or no effective weight to normalize by."""

    def __init__(self, message: str = "No items available for force calculation", *, item_count: int = 0):
        super().__init__(message)
        self.item_count = item_count


class CustomWeightingError(ForcesEngineError):
    """Raised when an injected custom weighting function returns an unusable weight."""

    def __init__(self, item_id: str, weight: object):
        super().__init__(
            f"Custom weighting returned {weight!r} for item {item_id!r}; "
            "effective weights must be positive finite numbers"
        )
        self.item_id = item_id
        self.weight = weight
