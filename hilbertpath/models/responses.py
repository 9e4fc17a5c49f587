"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class PointResponse(BaseModel):
    dimension: int
    order: int
    index: int
    coordinate: list[int]


class PathResponse(BaseModel):
    dimension: int
    order: int
    start: int
    total: int
    coordinates: list[list[int]] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    detail: str
