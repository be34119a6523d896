"""Turn surviving DisjointSet trees into first/last-member groupings.

The box spans the first and last member of a tree in ascending pixel id
order. Ids run row-major, so this is a rough box rather than the tight
min/max extent: the last member's column can sit left of the first's, and
pixels of the shape can fall outside it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shapefinder.engine.disjoint_set import DisjointSet
from shapefinder.engine.grid import id_to_coord
from shapefinder.errors import InvalidArgumentError
from shapefinder.imaging.render import draw_outline

if TYPE_CHECKING:
    from PIL import Image

logger = logging.getLogger(__name__)

MIN_NOISE_REDUCTION = 1


@dataclass(frozen=True)
class Grouping:
    """Corners of the first (x1, y1) and last (x2, y2) pixel of a shape."""

    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def corners(self) -> tuple[tuple[int, int], tuple[int, int]]:
        return (self.x1, self.y1), (self.x2, self.y2)

    def apply_to_image(self, image: Image.Image, color: str | tuple[int, int, int]) -> None:
        """Draw this grouping's outline onto ``image`` in place."""
        draw_outline(image, self.corners, color)


def clamp_noise_reduction(value: int) -> int:
    return value if value > MIN_NOISE_REDUCTION else MIN_NOISE_REDUCTION


def extract(disjoint_set: DisjointSet, width: int, threshold: int = MIN_NOISE_REDUCTION) -> list[Grouping]:
    """One grouping per tree that passes ``roots_above(threshold)``, by ascending root id."""
    if width <= 0:
        if len(disjoint_set) == 0:
            return []
        raise InvalidArgumentError(f"Grid width must be > 0, got {width}")
    if len(disjoint_set) % width:
        raise InvalidArgumentError(
            f"DisjointSet of {len(disjoint_set)} elements is not a grid of width {width}"
        )

    threshold = clamp_noise_reduction(threshold)
    roots = sorted(disjoint_set.roots_above(threshold))

    groupings: list[Grouping] = []
    for root in roots:
        members = disjoint_set.members(root)
        first = id_to_coord(members[0], width)
        last = id_to_coord(members[-1], width)
        groupings.append(Grouping(x1=first.col, y1=first.row, x2=last.col, y2=last.row))

    logger.debug("Extracted %d groupings (noise reduction %d)", len(groupings), threshold)
    return groupings
