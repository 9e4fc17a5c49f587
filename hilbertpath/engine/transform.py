"""Index <-> coordinate transforms for the compact Hilbert curve.

Both directions walk the order levels most-significant first. At level i the
D-bit group w of the index is the gray-code rank of the sub-cube the point
falls in; the recurrence state (entry, direction) rotates and reflects that
sub-cube so consecutive cells stay adjacent. Component j of a coordinate
always corresponds to bit j of the level's D-bit label.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence

from hilbertpath.engine.curve import CurveSpec
from hilbertpath.engine.state import RecurrenceState
from hilbertpath.errors import (
    CoordinateOutOfRange,
    DimensionMismatch,
    IndexOutOfRange,
    InvalidSpec,
)
from hilbertpath.utils.bitfield import bit_range, gray_decode, gray_encode, set_bit

Coordinate = tuple[int, ...]


def _check_spec(spec: CurveSpec) -> None:
    if not isinstance(spec, CurveSpec):
        raise InvalidSpec(f"expected a CurveSpec, got {type(spec).__name__}")


def check_index(spec: CurveSpec, index: int) -> int:
    """Validate a path index and return it as a plain int."""
    try:
        value = operator.index(index)
    except TypeError:
        raise IndexOutOfRange(f"path index must be an integer, got {index!r}") from None
    if value < 0 or value >= spec.size:
        raise IndexOutOfRange(f"path index {value} outside [0, {spec.size})")
    return value


def check_coordinate(spec: CurveSpec, coordinate: Sequence[int]) -> Coordinate:
    """Validate a coordinate and return it as a tuple of plain ints."""
    if len(coordinate) != spec.dimension:
        raise DimensionMismatch(
            f"coordinate has {len(coordinate)} components, curve dimension is {spec.dimension}"
        )
    values = []
    for axis, component in enumerate(coordinate):
        try:
            value = operator.index(component)
        except TypeError:
            raise CoordinateOutOfRange(
                f"component {axis} must be an integer, got {component!r}"
            ) from None
        if value < 0 or value >= spec.side:
            raise CoordinateOutOfRange(
                f"component {axis} = {value} outside [0, {spec.side})"
            )
        values.append(value)
    return tuple(values)


def encode(spec: CurveSpec, index: int) -> Coordinate:
    """Grid coordinate of the cell at position ``index`` along the curve."""
    _check_spec(spec)
    index = check_index(spec, index)

    dimension, order = spec.dimension, spec.order
    coordinate = [0] * dimension
    state = RecurrenceState.initial()

    for i in range(order):
        w = bit_range(index, spec.bits, i * dimension, (i + 1) * dimension)
        label = state.inverse_transform(gray_encode(w), dimension)
        for j in range(dimension):
            coordinate[j] = set_bit(coordinate[j], order - i - 1, (label >> j) & 1)
        state = state.advance(w, dimension)

    return tuple(coordinate)


def decode(spec: CurveSpec, coordinate: Sequence[int]) -> int:
    """Position along the curve of the cell at ``coordinate``."""
    _check_spec(spec)
    coordinate = check_coordinate(spec, coordinate)

    dimension, order = spec.dimension, spec.order
    index = 0
    state = RecurrenceState.initial()

    for i in range(order):
        label = 0
        for j in range(dimension):
            label |= bit_range(coordinate[j], order, i, i + 1) << j
        w = gray_decode(state.transform(label, dimension))
        state = state.advance(w, dimension)
        index = (index << dimension) | w

    return index
