"""Analyzer pipeline — resize, binarize, label components, outline groupings."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from PIL import Image

from shapefinder.engine.config import AnalyzerConfig
from shapefinder.engine.disjoint_set import DisjointSet
from shapefinder.engine.extractor import Grouping, clamp_noise_reduction, extract
from shapefinder.engine.grid import BinaryGrid
from shapefinder.engine.scanner import scan
from shapefinder.imaging.loader import scale_image
from shapefinder.imaging.render import outline_all

logger = logging.getLogger(__name__)


def find_groupings(grid: BinaryGrid, noise_reduction: int = 1) -> list[Grouping]:
    """Scan ``grid`` into a fresh DisjointSet and extract its groupings."""
    ds = scan(grid, DisjointSet(grid.width * grid.height))
    return extract(ds, grid.width, clamp_noise_reduction(noise_reduction))


@dataclass
class AnalysisResult:
    """Outlined image plus everything that went into it."""

    image: Image.Image
    groupings: list[Grouping] = field(default_factory=list)
    width: int = 0
    height: int = 0
    foreground_pixels: int = 0
    timings_ms: dict[str, float] = field(default_factory=dict)


class ImageAnalyzer:
    """Finds distinct objects in an image and outlines them."""

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        self.config = config or AnalyzerConfig()

    def analyze(self, image: Image.Image) -> AnalysisResult:
        start = time.perf_counter()
        timings: dict[str, float] = {}

        t0 = time.perf_counter()
        if self.config.resize is not None:
            image = scale_image(image, self.config.resize)
        timings["resize"] = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        binary = self.config.binarizer.binarize(image)
        timings["binarize"] = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        groupings = find_groupings(binary, self.config.noise_reduction)
        timings["label"] = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        outlined = outline_all(image, groupings, self.config.outline_color)
        timings["render"] = (time.perf_counter() - t0) * 1000

        for stage, ms in timings.items():
            logger.debug("  %s completed in %.1fms", stage, ms)
        logger.info(
            "Analysis complete: %d groupings from %dx%d image (%s) in %.0fms",
            len(groupings),
            binary.width,
            binary.height,
            self.config.binarizer.name,
            (time.perf_counter() - start) * 1000,
        )

        return AnalysisResult(
            image=outlined,
            groupings=groupings,
            width=binary.width,
            height=binary.height,
            foreground_pixels=binary.foreground_count,
            timings_ms=timings,
        )

    def outline_distinct_objects(self, image: Image.Image) -> Image.Image:
        """Copy of ``image`` (resized if configured) with every grouping outlined."""
        return self.analyze(image).image
