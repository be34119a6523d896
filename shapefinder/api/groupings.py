"""POST /api/groupings — label an already-binary grid."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from shapefinder.config import Settings
from shapefinder.dependencies import get_settings
from shapefinder.engine.extractor import clamp_noise_reduction, extract
from shapefinder.engine.scanner import scan
from shapefinder.errors import InvalidArgumentError
from shapefinder.imaging.binarize import BinaryImage
from shapefinder.models.requests import GroupingsRequest
from shapefinder.models.responses import GroupingModel, GroupingsResponse

router = APIRouter()


@router.post("/groupings", response_model=GroupingsResponse)
def groupings(req: GroupingsRequest, settings: Settings = Depends(get_settings)) -> GroupingsResponse:
    height = len(req.rows)
    width = max((len(r) for r in req.rows), default=0)
    if width * height > settings.max_image_pixels:
        raise InvalidArgumentError(
            f"Grid of {width}x{height} exceeds the {settings.max_image_pixels} pixel limit"
        )

    grid = BinaryImage.from_rows(req.rows)
    noise_reduction = clamp_noise_reduction(req.noise_reduction)

    ds = scan(grid)
    found = extract(ds, grid.width, noise_reduction)

    return GroupingsResponse(
        width=grid.width,
        height=grid.height,
        tree_count=ds.tree_count(noise_reduction),
        groupings=[GroupingModel(x1=g.x1, y1=g.y1, x2=g.x2, y2=g.y2) for g in found],
    )
