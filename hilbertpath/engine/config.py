"""Engine configuration — index width and materialization limits."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CurveConfig:
    """Knobs shared by curve construction and path enumeration."""

    # Width of the unsigned index type; N·D must fit
    index_bits: int = 64

    # Eager materialization refuses domains larger than this
    max_materialized_cells: int = 1 << 24

    # Parallel fill: rows per worker task, and worker count (1 = inline)
    chunk_size: int = 4096
    workers: int = 1
