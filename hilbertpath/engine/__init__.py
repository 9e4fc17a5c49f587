"""Compact Hilbert curve engine."""

from hilbertpath.engine.config import CurveConfig
from hilbertpath.engine.curve import CurveSpec, configure
from hilbertpath.engine.enumerator import CurvePath, enumerate_path, iter_path, materialize
from hilbertpath.engine.path import HilbertPath
from hilbertpath.engine.state import RecurrenceState
from hilbertpath.engine.transform import decode, encode

__all__ = [
    "CurveConfig",
    "CurveSpec",
    "configure",
    "CurvePath",
    "enumerate_path",
    "iter_path",
    "materialize",
    "HilbertPath",
    "RecurrenceState",
    "encode",
    "decode",
]
