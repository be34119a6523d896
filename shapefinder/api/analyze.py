"""POST /api/analyze — full image pipeline."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends

from shapefinder.config import Settings
from shapefinder.dependencies import get_settings
from shapefinder.engine.config import AnalyzerConfig
from shapefinder.engine.pipeline import ImageAnalyzer
from shapefinder.errors import InvalidArgumentError
from shapefinder.imaging.binarize import get_binarizer
from shapefinder.imaging.loader import decode_base64_image, encode_png_base64
from shapefinder.models.requests import AnalyzeRequest
from shapefinder.models.responses import AnalyzeResponse, GroupingModel

logger = logging.getLogger(__name__)

router = APIRouter()


def _build_config(req: AnalyzeRequest, settings: Settings) -> AnalyzerConfig:
    threshold = req.threshold if req.threshold is not None else settings.default_threshold
    return AnalyzerConfig(
        binarizer=get_binarizer(req.binarizer, threshold),
        outline_color=req.outline_color or settings.default_outline_color,
        noise_reduction=(
            req.noise_reduction
            if req.noise_reduction is not None
            else settings.default_noise_reduction
        ),
        resize=req.resize,
    )


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(req: AnalyzeRequest, settings: Settings = Depends(get_settings)) -> AnalyzeResponse:
    start = time.perf_counter()

    image = decode_base64_image(req.image)
    config = _build_config(req, settings)

    width, height = config.resize or image.size
    if width * height > settings.max_image_pixels:
        raise InvalidArgumentError(
            f"Image of {width}x{height} exceeds the {settings.max_image_pixels} pixel limit"
        )

    result = ImageAnalyzer(config).analyze(image)
    elapsed = (time.perf_counter() - start) * 1000

    return AnalyzeResponse(
        width=result.width,
        height=result.height,
        foreground_pixels=result.foreground_pixels,
        groupings=[
            GroupingModel(x1=g.x1, y1=g.y1, x2=g.x2, y2=g.y2) for g in result.groupings
        ],
        image=encode_png_base64(result.image),
        processing_time_ms=round(elapsed, 1),
        timings_ms={k: round(v, 1) for k, v in result.timings_ms.items()},
    )
