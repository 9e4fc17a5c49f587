"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends

from hilbertpath.config import Settings, settings
from hilbertpath.engine.config import CurveConfig


def get_settings() -> Settings:
    return settings


def get_curve_config(settings: Settings = Depends(get_settings)) -> CurveConfig:
    return CurveConfig(index_bits=settings.hilbertpath_index_bits)
