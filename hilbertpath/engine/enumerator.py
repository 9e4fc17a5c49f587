"""Path enumeration — the ordered coordinate sequence of a curve.

Two flavours over the same transform:
- lazy: ``iter_path`` / ``CurvePath`` compute one coordinate per request,
  suitable for domains far too large to hold in memory;
- eager: ``materialize`` fills a numpy array, optionally across threads.
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor

import numpy as np
from numpy.typing import NDArray

from hilbertpath.engine.config import CurveConfig
from hilbertpath.engine.curve import CurveSpec
from hilbertpath.engine.transform import Coordinate, check_coordinate, check_index, decode, encode
from hilbertpath.errors import DomainTooLarge, HilbertError, IndexOutOfRange

logger = logging.getLogger(__name__)


def iter_path(spec: CurveSpec, start: int = 0, stop: int | None = None) -> Iterator[Coordinate]:
    """Coordinates for path indices [start, stop) in curve order.

    Bounds are checked on the call, not on the first ``next()``.
    """
    stop = spec.size if stop is None else stop
    if not 0 <= start <= stop <= spec.size:
        raise IndexOutOfRange(f"range [{start}, {stop}) outside [0, {spec.size}]")
    return (encode(spec, index) for index in range(start, stop))


class CurvePath(Sequence):
    """Lazy, restartable view of the full path of a curve.

    Indexing and slicing call ``encode``; nothing is cached. ``len()`` is the
    domain size and raises DomainTooLarge above ``sys.maxsize`` (64 index
    bits); ``size`` and iteration in either direction work for every curve.
    """

    def __init__(self, spec: CurveSpec) -> None:
        self.spec = spec

    @property
    def size(self) -> int:
        return self.spec.size

    def __len__(self) -> int:
        size = self.spec.size
        if size > sys.maxsize:
            raise DomainTooLarge(
                f"curve has {size} cells, more than len() can report; use .size"
            )
        return size

    def __getitem__(self, key):
        if isinstance(key, slice):
            return [encode(self.spec, i) for i in range(*key.indices(self.spec.size))]
        index = check_index(self.spec, key + self.spec.size if key < 0 else key)
        return encode(self.spec, index)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter_path(self.spec)

    def __reversed__(self) -> Iterator[Coordinate]:
        return (encode(self.spec, i) for i in range(self.spec.size - 1, -1, -1))

    def __contains__(self, coordinate: object) -> bool:
        # Every valid coordinate lies on the curve
        try:
            check_coordinate(self.spec, coordinate)  # type: ignore[arg-type]
        except (HilbertError, TypeError):
            return False
        return True

    def index(self, coordinate, start: int = 0, stop: int | None = None) -> int:
        position = decode(self.spec, coordinate)
        stop = self.spec.size if stop is None else stop
        if not start <= position < stop:
            raise ValueError(f"{tuple(coordinate)} is not in path[{start}:{stop}]")
        return position

    def count(self, coordinate) -> int:
        return 1 if coordinate in self else 0

    def __repr__(self) -> str:
        return f"CurvePath(dimension={self.spec.dimension}, order={self.spec.order})"


def enumerate_path(spec: CurveSpec) -> CurvePath:
    """Lazy, finite, restartable sequence of every coordinate on the curve."""
    return CurvePath(spec)


def _fill(spec: CurveSpec, out: NDArray, start: int, stop: int) -> None:
    for index in range(start, stop):
        out[index] = encode(spec, index)


def materialize(spec: CurveSpec, config: CurveConfig | None = None) -> NDArray:
    """Eager (size, dimension) array where row i is the coordinate at index i."""
    config = config or CurveConfig()
    size = spec.size
    if size > config.max_materialized_cells:
        raise DomainTooLarge(
            f"curve D={spec.dimension} N={spec.order} has {size} cells, "
            f"limit is {config.max_materialized_cells}"
        )

    start = time.perf_counter()
    out = np.zeros((size, spec.dimension), dtype=np.min_scalar_type(spec.side - 1))
    chunk = max(1, config.chunk_size)
    bounds = [(lo, min(lo + chunk, size)) for lo in range(0, size, chunk)]

    if config.workers > 1 and len(bounds) > 1:
        # Disjoint row ranges: workers never touch each other's rows
        with ThreadPoolExecutor(max_workers=config.workers) as pool:
            futures = [pool.submit(_fill, spec, out, lo, hi) for lo, hi in bounds]
            for future in futures:
                future.result()
    else:
        for lo, hi in bounds:
            _fill(spec, out, lo, hi)

    elapsed = (time.perf_counter() - start) * 1000
    logger.debug(
        "Materialized D=%d N=%d: %d cells in %.1fms (%d chunks, %d workers)",
        spec.dimension,
        spec.order,
        size,
        elapsed,
        len(bounds),
        config.workers,
    )
    return out
