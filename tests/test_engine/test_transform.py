"""Tests for index <-> coordinate transforms."""

import itertools
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from tests.conftest import CUBE_ORDER_1, PROPERTY_SPECS, SQUARE_ORDER_1, SQUARE_ORDER_2

from hilbertpath.engine.curve import configure
from hilbertpath.engine.transform import decode, encode
from hilbertpath.errors import (
    CoordinateOutOfRange,
    DimensionMismatch,
    IndexOutOfRange,
    InvalidSpec,
)


def test_order_one_square():
    spec = configure(2, 1)
    assert [encode(spec, i) for i in range(4)] == SQUARE_ORDER_1


def test_order_two_square(square):
    assert [encode(square, i) for i in range(16)] == SQUARE_ORDER_2


def test_order_one_cube():
    spec = configure(3, 1)
    assert [encode(spec, i) for i in range(8)] == CUBE_ORDER_1


def test_decode_known_cells(square):
    for index, coordinate in enumerate(SQUARE_ORDER_2):
        assert decode(square, coordinate) == index


def test_one_dimension_is_identity():
    spec = configure(1, 5)
    assert [encode(spec, i) for i in range(32)] == [(i,) for i in range(32)]
    assert decode(spec, (17,)) == 17


@pytest.mark.parametrize("dimension, order", PROPERTY_SPECS)
def test_round_trip(dimension, order):
    spec = configure(dimension, order)
    for index in range(spec.size):
        assert decode(spec, encode(spec, index)) == index


@pytest.mark.parametrize("dimension, order", PROPERTY_SPECS)
def test_covers_every_cell_once(dimension, order):
    spec = configure(dimension, order)
    cells = [encode(spec, i) for i in range(spec.size)]
    assert len(set(cells)) == spec.size
    assert set(cells) == set(itertools.product(range(spec.side), repeat=dimension))


@pytest.mark.parametrize("dimension, order", PROPERTY_SPECS)
def test_consecutive_cells_are_adjacent(dimension, order):
    spec = configure(dimension, order)
    prev = encode(spec, 0)
    for index in range(1, spec.size):
        cur = encode(spec, index)
        steps = [abs(a - b) for a, b in zip(prev, cur)]
        assert max(steps) == 1, (index, prev, cur)
        assert sum(steps) == 1, (index, prev, cur)
        prev = cur


@pytest.mark.parametrize("dimension", [1, 2, 3, 4, 7])
def test_order_zero(dimension):
    spec = configure(dimension, 0)
    assert spec.size == 1
    assert encode(spec, 0) == (0,) * dimension
    assert decode(spec, (0,) * dimension) == 0


def test_curve_starts_at_origin(cube):
    assert encode(cube, 0) == (0, 0, 0)
    assert decode(cube, (0, 0, 0)) == 0


def test_full_width_indices():
    spec = configure(2, 32)
    for index in [0, 1, 2**40 + 7, 12345678901234567890, 2**64 - 1]:
        coordinate = encode(spec, index)
        assert all(0 <= c < 2**32 for c in coordinate)
        assert decode(spec, coordinate) == index


def test_wide_dimension_round_trip():
    spec = configure(9, 7)
    for index in [0, 1, 511, 512, 2**62 + 3, spec.size - 1]:
        assert decode(spec, encode(spec, index)) == index


def test_encode_returns_plain_int_tuple(square):
    coordinate = encode(square, np.int64(5))
    assert isinstance(coordinate, tuple)
    assert all(type(c) is int for c in coordinate)


def test_decode_accepts_sequences(square):
    assert decode(square, [1, 1]) == 2
    assert decode(square, np.array([1, 1], dtype=np.uint8)) == 2


def test_encode_index_out_of_range(square):
    with pytest.raises(IndexOutOfRange):
        encode(square, square.size)
    with pytest.raises(IndexOutOfRange):
        encode(square, -1)


def test_encode_rejects_non_integer_index(square):
    with pytest.raises(IndexOutOfRange):
        encode(square, "3")
    with pytest.raises(IndexOutOfRange):
        encode(square, 1.0)


def test_encode_order_zero_rejects_index_one():
    with pytest.raises(IndexOutOfRange):
        encode(configure(3, 0), 1)


def test_decode_component_out_of_range(square):
    with pytest.raises(CoordinateOutOfRange):
        decode(square, (square.side, 0))
    with pytest.raises(CoordinateOutOfRange):
        decode(square, (0, -1))
    with pytest.raises(CoordinateOutOfRange):
        decode(square, (0, 1.5))


def test_decode_dimension_mismatch(square):
    with pytest.raises(DimensionMismatch):
        decode(square, (0, 0, 0))
    with pytest.raises(DimensionMismatch):
        decode(square, (0,))


def test_dimension_checked_before_range(square):
    with pytest.raises(DimensionMismatch):
        decode(square, (99, 99, 99))


def test_requires_curve_spec():
    with pytest.raises(InvalidSpec):
        encode((2, 2), 0)
    with pytest.raises(InvalidSpec):
        decode((2, 2), (0, 0))


def test_errors_are_value_errors():
    for exc in (IndexOutOfRange, CoordinateOutOfRange, DimensionMismatch):
        assert issubclass(exc, ValueError)
    assert issubclass(IndexOutOfRange, IndexError)


def test_concurrent_calls_match_sequential(cube):
    expected = [encode(cube, i) for i in range(cube.size)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        got = list(pool.map(lambda i: encode(cube, i), range(cube.size)))
        back = list(pool.map(lambda c: decode(cube, c), got))
    assert got == expected
    assert back == list(range(cube.size))
