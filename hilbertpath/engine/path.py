"""HilbertPath — a curve with an optional precomputed coordinate table.

Usage:
    path = HilbertPath(dimension=3, order=4)
    path.initialize()                  # precompute all 4096 cells
    path.evaluate(17)                  # table lookup
    path.evaluate_inverse((1, 0, 2))   # always computed

The table is a cache only: ``evaluate`` falls back to ``encode`` when the
path has not been initialized, and ``evaluate_inverse`` never uses it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from numpy.typing import NDArray

from hilbertpath.engine.config import CurveConfig
from hilbertpath.engine.curve import CurveSpec, configure
from hilbertpath.engine.enumerator import materialize
from hilbertpath.engine.transform import Coordinate, check_index, decode, encode

logger = logging.getLogger(__name__)


class HilbertPath:
    def __init__(
        self,
        dimension: int,
        order: int = 1,
        config: CurveConfig | None = None,
    ) -> None:
        self.config = config or CurveConfig()
        self._spec = configure(dimension, order, self.config)
        self._table: NDArray | None = None

    @property
    def spec(self) -> CurveSpec:
        return self._spec

    @property
    def dimension(self) -> int:
        return self._spec.dimension

    @dimension.setter
    def dimension(self, value: int) -> None:
        self._spec = configure(value, self._spec.order, self.config)
        self.clear()

    @property
    def order(self) -> int:
        return self._spec.order

    @order.setter
    def order(self, value: int) -> None:
        self._spec = configure(self._spec.dimension, value, self.config)
        self.clear()

    @property
    def is_initialized(self) -> bool:
        return self._table is not None

    def initialize(self) -> None:
        """Rebuild the coordinate table for the current dimension and order."""
        self.clear()
        self._table = materialize(self._spec, self.config)
        logger.debug("Initialized %r with %d steps", self, self.number_of_steps)

    def clear(self) -> None:
        self._table = None

    @property
    def number_of_steps(self) -> int:
        """Rows in the precomputed table (0 until initialized)."""
        return 0 if self._table is None else len(self._table)

    @property
    def end_of_input(self) -> int:
        return self.number_of_steps

    def evaluate(self, path_index: int) -> Coordinate:
        if self._table is None:
            return encode(self._spec, path_index)
        index = check_index(self._spec, path_index)
        return tuple(int(v) for v in self._table[index])

    def evaluate_inverse(self, coordinate: Sequence[int]) -> int:
        return decode(self._spec, coordinate)

    def as_array(self) -> NDArray:
        """Read-only view of the table; initializes on first use."""
        if self._table is None:
            self.initialize()
        view = self._table.view()
        view.flags.writeable = False
        return view

    def __repr__(self) -> str:
        return (
            f"HilbertPath(dimension={self.dimension}, order={self.order}, "
            f"initialized={self.is_initialized})"
        )
