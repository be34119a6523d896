"""Binarization policies: RGB image -> two-color foreground mask.

Foreground is always the dark side of the threshold (ink on paper).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

import numpy as np
from numpy.typing import NDArray
from PIL import Image
from skimage.filters import threshold_otsu

from shapefinder.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 130

# Characters read as foreground by BinaryImage.from_rows
_FOREGROUND_CHARS = frozenset("#1Xx*@")


class BinaryImage:
    """A 2-D boolean mask; ``mask[row, col]`` is True for foreground."""

    def __init__(self, mask: NDArray[np.bool_]) -> None:
        mask = np.array(mask, dtype=bool)
        if mask.ndim != 2:
            raise InvalidArgumentError(f"Binary mask must be 2-D, got shape {mask.shape}")
        mask.setflags(write=False)
        self.mask = mask
        # Nested lists for per-pixel reads during the scan
        self._rows: list[list[bool]] = mask.tolist()

    @classmethod
    def from_rows(cls, rows: Sequence[str] | Sequence[Sequence[bool]]) -> BinaryImage:
        """Build from strings (``"#"``/``"1"``/``"x"`` = foreground) or nested bools."""
        if not rows:
            return cls(np.zeros((0, 0), dtype=bool))
        widths = {len(r) for r in rows}
        if len(widths) != 1:
            raise InvalidArgumentError(f"Rows have differing widths: {sorted(widths)}")
        if isinstance(rows[0], str):
            data = [[ch in _FOREGROUND_CHARS for ch in r] for r in rows]
        else:
            data = [[bool(v) for v in r] for r in rows]
        return cls(np.array(data, dtype=bool).reshape(len(rows), widths.pop()))

    @property
    def width(self) -> int:
        return int(self.mask.shape[1])

    @property
    def height(self) -> int:
        return int(self.mask.shape[0])

    def is_foreground(self, row: int, col: int) -> bool:
        return self._rows[row][col]

    @property
    def foreground_count(self) -> int:
        return int(self.mask.sum())

    def to_rows(self) -> list[str]:
        return ["".join("#" if v else "." for v in r) for r in self.mask]


class Binarizer(Protocol):
    name: str

    def binarize(self, image: Image.Image) -> BinaryImage: ...


def _luminance(image: Image.Image) -> NDArray[np.uint8]:
    return np.asarray(image.convert("L"), dtype=np.uint8)


class GrayscaleBinarizer:
    """Fixed luminance cut: pixels darker than ``threshold`` are foreground."""

    name = "grayscale"

    def __init__(self, threshold: int = DEFAULT_THRESHOLD) -> None:
        if not 0 <= threshold <= 255:
            raise InvalidArgumentError(f"Threshold must be in [0, 255], got {threshold}")
        self.threshold = threshold

    def binarize(self, image: Image.Image) -> BinaryImage:
        return BinaryImage(_luminance(image) < self.threshold)


class OtsuBinarizer:
    """Data-derived cut from Otsu's method on the luminance histogram."""

    name = "otsu"

    def binarize(self, image: Image.Image) -> BinaryImage:
        gray = _luminance(image)
        if gray.size == 0 or gray.min() == gray.max():
            # Uniform image: no contrast, nothing to separate
            return BinaryImage(np.zeros(gray.shape, dtype=bool))
        cut = threshold_otsu(gray)
        logger.debug("Otsu threshold %.1f", cut)
        return BinaryImage(gray <= cut)


BINARIZERS: tuple[str, ...] = (GrayscaleBinarizer.name, OtsuBinarizer.name)


def get_binarizer(name: str = GrayscaleBinarizer.name, threshold: int | None = None) -> Binarizer:
    if name == GrayscaleBinarizer.name:
        return GrayscaleBinarizer(DEFAULT_THRESHOLD if threshold is None else threshold)
    if name == OtsuBinarizer.name:
        return OtsuBinarizer()
    raise InvalidArgumentError(f"Unknown binarizer {name!r}; expected one of {BINARIZERS}")
