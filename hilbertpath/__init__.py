"""hilbertpath — compact multi-dimensional Hilbert curve."""

from hilbertpath.engine import (
    CurveConfig,
    CurvePath,
    CurveSpec,
    HilbertPath,
    configure,
    decode,
    encode,
    enumerate_path,
    iter_path,
    materialize,
)
from hilbertpath.errors import (
    CoordinateOutOfRange,
    DimensionMismatch,
    DomainTooLarge,
    HilbertError,
    IndexOutOfRange,
    InvalidSpec,
)

__version__ = "0.1.0"

__all__ = [
    "CurveConfig",
    "CurvePath",
    "CurveSpec",
    "HilbertPath",
    "configure",
    "decode",
    "encode",
    "enumerate_path",
    "iter_path",
    "materialize",
    "HilbertError",
    "InvalidSpec",
    "IndexOutOfRange",
    "CoordinateOutOfRange",
    "DimensionMismatch",
    "DomainTooLarge",
]
