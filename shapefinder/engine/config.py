"""Analyzer configuration — one immutable record per ImageAnalyzer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shapefinder.engine.extractor import clamp_noise_reduction
from shapefinder.imaging.binarize import Binarizer, GrayscaleBinarizer, get_binarizer
from shapefinder.imaging.render import Color, check_color

if TYPE_CHECKING:
    from shapefinder.config import Settings


@dataclass(frozen=True)
class AnalyzerConfig:
    """Controls how an image is reduced to groupings and outlined."""

    binarizer: Binarizer = field(default_factory=GrayscaleBinarizer)
    outline_color: Color = "#0000ff"

    # Trees must be strictly larger than this; values below 1 become 1
    noise_reduction: int = 1

    # (width, height); None keeps the input size
    resize: tuple[int, int] | None = None

    def __post_init__(self) -> None:
        check_color(self.outline_color)
        object.__setattr__(self, "noise_reduction", clamp_noise_reduction(self.noise_reduction))

    @classmethod
    def from_settings(cls, settings: Settings) -> AnalyzerConfig:
        return cls(
            binarizer=get_binarizer("grayscale", settings.default_threshold),
            outline_color=settings.default_outline_color,
            noise_reduction=settings.default_noise_reduction,
        )
