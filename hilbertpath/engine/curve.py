"""CurveSpec — the immutable (dimension, order) pair that defines a curve."""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass

from hilbertpath.engine.config import CurveConfig
from hilbertpath.errors import InvalidSpec

logger = logging.getLogger(__name__)


def _as_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise InvalidSpec(f"{name} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidSpec(f"{name} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class CurveSpec:
    """D-dimensional Hilbert curve of side 2^order.

    Coordinate domain is [0, 2^order)^dimension, index domain is
    [0, 2^(order·dimension)). Order 0 collapses both to a single element.
    """

    dimension: int
    order: int
    index_bits: int = 64

    def __post_init__(self) -> None:
        dimension = _as_int("dimension", self.dimension)
        order = _as_int("order", self.order)
        index_bits = _as_int("index_bits", self.index_bits)
        if dimension < 1:
            raise InvalidSpec(f"dimension must be >= 1, got {dimension}")
        if order < 0:
            raise InvalidSpec(f"order must be >= 0, got {order}")
        if index_bits < 1:
            raise InvalidSpec(f"index_bits must be >= 1, got {index_bits}")
        if order * dimension > index_bits:
            raise InvalidSpec(
                f"order * dimension = {order * dimension} exceeds the "
                f"{index_bits}-bit index width"
            )
        # Normalize numpy ints and the like to plain ints
        object.__setattr__(self, "dimension", dimension)
        object.__setattr__(self, "order", order)
        object.__setattr__(self, "index_bits", index_bits)

    @property
    def bits(self) -> int:
        """Significant bits of a path index (N·D)."""
        return self.order * self.dimension

    @property
    def side(self) -> int:
        return 1 << self.order

    @property
    def size(self) -> int:
        """Number of cells, equal to the number of path indices."""
        return 1 << self.bits


def configure(dimension: int, order: int, config: CurveConfig | None = None) -> CurveSpec:
    """Validate (dimension, order) against the configured index width."""
    config = config or CurveConfig()
    spec = CurveSpec(dimension=dimension, order=order, index_bits=config.index_bits)
    logger.debug(
        "Configured curve D=%d N=%d (%d of %d index bits)",
        spec.dimension,
        spec.order,
        spec.bits,
        spec.index_bits,
    )
    return spec
