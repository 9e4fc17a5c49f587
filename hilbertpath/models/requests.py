"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CurveRequest(BaseModel):
    dimension: int = Field(..., description="Number of coordinate axes (D >= 1)")
    order: int = Field(..., description="Subdivision levels; grid side is 2^order")


class EncodeRequest(CurveRequest):
    index: int = Field(..., description="Position along the curve")


class DecodeRequest(CurveRequest):
    coordinate: list[int] = Field(..., description="Grid cell, one component per axis")


class PathRequest(CurveRequest):
    start: int = Field(default=0, description="First path index of the page")
    limit: int = Field(default=256, ge=1, description="Maximum coordinates to return")
