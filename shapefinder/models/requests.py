"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class GroupingsRequest(BaseModel):
    rows: list[str] = Field(
        ...,
        description='Binary grid, one string per row ("#" foreground, "." background)',
    )
    noise_reduction: int = Field(default=1, description="Minimum tree size is noise_reduction + 1")


class AnalyzeRequest(BaseModel):
    image: str = Field(..., description="Base64-encoded image (PNG, JPEG, ...) or data URL")
    binarizer: Literal["grayscale", "otsu"] = Field(default="grayscale")
    threshold: int | None = Field(
        default=None,
        ge=0,
        le=255,
        description="Luminance cut for the grayscale binarizer",
    )
    noise_reduction: int | None = Field(default=None)
    outline_color: str | None = Field(default=None, description="Pillow color, e.g. '#ff0000'")
    resize: tuple[int, int] | None = Field(
        default=None,
        description="(width, height) to scale to before analysis",
    )
