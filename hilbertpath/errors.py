"""Error taxonomy. Every error is raised before any output is built."""

from __future__ import annotations


class HilbertError(ValueError):
    """Base class for all curve errors."""


class InvalidSpec(HilbertError):
    """Dimension < 1, negative order, or N·D wider than the index type."""


class IndexOutOfRange(HilbertError, IndexError):
    """Path index outside [0, 2^(N·D)). Also an IndexError for sequence access."""


class CoordinateOutOfRange(HilbertError):
    """Coordinate component outside [0, 2^N)."""


class DimensionMismatch(HilbertError):
    """Coordinate length differs from the curve dimension."""


class DomainTooLarge(HilbertError):
    """Eager materialization requested for a domain above the configured cap."""
