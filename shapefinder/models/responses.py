"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    binarizers: list[str] = Field(default_factory=list)


class GroupingModel(BaseModel):
    x1: int
    y1: int
    x2: int
    y2: int


class GroupingsResponse(BaseModel):
    width: int
    height: int
    tree_count: int = 0
    groupings: list[GroupingModel] = Field(default_factory=list)


class AnalyzeResponse(BaseModel):
    width: int
    height: int
    foreground_pixels: int = 0
    groupings: list[GroupingModel] = Field(default_factory=list)
    image: str = Field(default="", description="Outlined image as base64 PNG")
    processing_time_ms: float = 0.0
    timings_ms: dict[str, float] = Field(default_factory=dict)
