"""POST /api/encode, /api/decode, /api/path — curve lookups."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from hilbertpath.config import Settings
from hilbertpath.dependencies import get_curve_config, get_settings
from hilbertpath.engine.config import CurveConfig
from hilbertpath.engine.curve import configure
from hilbertpath.engine.enumerator import iter_path
from hilbertpath.engine.transform import decode, encode
from hilbertpath.models.requests import DecodeRequest, EncodeRequest, PathRequest
from hilbertpath.models.responses import ErrorResponse, PathResponse, PointResponse

router = APIRouter(responses={400: {"model": ErrorResponse}})


@router.post("/encode", response_model=PointResponse)
async def encode_index(
    req: EncodeRequest,
    config: CurveConfig = Depends(get_curve_config),
) -> PointResponse:
    spec = configure(req.dimension, req.order, config)
    coordinate = encode(spec, req.index)
    return PointResponse(
        dimension=spec.dimension,
        order=spec.order,
        index=req.index,
        coordinate=list(coordinate),
    )


@router.post("/decode", response_model=PointResponse)
async def decode_coordinate(
    req: DecodeRequest,
    config: CurveConfig = Depends(get_curve_config),
) -> PointResponse:
    spec = configure(req.dimension, req.order, config)
    index = decode(spec, req.coordinate)
    return PointResponse(
        dimension=spec.dimension,
        order=spec.order,
        index=index,
        coordinate=req.coordinate,
    )


@router.post("/path", response_model=PathResponse)
async def path_page(
    req: PathRequest,
    config: CurveConfig = Depends(get_curve_config),
    settings: Settings = Depends(get_settings),
) -> PathResponse:
    spec = configure(req.dimension, req.order, config)
    limit = min(req.limit, settings.hilbertpath_max_page_size)
    stop = min(req.start + limit, spec.size)
    # A start beyond the end raises IndexOutOfRange from iter_path
    coordinates = [list(c) for c in iter_path(spec, req.start, max(stop, req.start))]
    return PathResponse(
        dimension=spec.dimension,
        order=spec.order,
        start=req.start,
        total=spec.size,
        coordinates=coordinates,
    )
