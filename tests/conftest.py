"""Shared test fixtures."""

from __future__ import annotations

import itertools

import pytest

from hilbertpath.engine.config import CurveConfig
from hilbertpath.engine.curve import CurveSpec, configure

# (dimension, order) grid used by the exhaustive property tests
PROPERTY_SPECS = list(itertools.product([2, 3, 4], [0, 1, 2, 3, 4]))

# Canonical order-1 and order-2 2-D curves, in index order
SQUARE_ORDER_1 = [(0, 0), (0, 1), (1, 1), (1, 0)]
SQUARE_ORDER_2 = [
    (0, 0), (1, 0), (1, 1), (0, 1),
    (0, 2), (0, 3), (1, 3), (1, 2),
    (2, 2), (2, 3), (3, 3), (3, 2),
    (3, 1), (2, 1), (2, 0), (3, 0),
]
CUBE_ORDER_1 = [
    (0, 0, 0), (0, 1, 0), (0, 1, 1), (0, 0, 1),
    (1, 0, 1), (1, 1, 1), (1, 1, 0), (1, 0, 0),
]


@pytest.fixture
def square() -> CurveSpec:
    """4x4 grid."""
    return configure(2, 2)


@pytest.fixture
def cube() -> CurveSpec:
    """8x8x8 grid."""
    return configure(3, 3)


@pytest.fixture
def threaded_config() -> CurveConfig:
    return CurveConfig(chunk_size=7, workers=4)
