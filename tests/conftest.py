"""Shared test fixtures."""

from __future__ import annotations

import pytest
from PIL import Image, ImageDraw

from shapefinder.imaging.loader import encode_png_base64


# Binary grids as row strings ("#" foreground)

FULL_3X3 = ["###", "###", "###"]
DIAGONAL_2X2 = ["#.", ".#"]
EMPTY_2X2 = ["..", ".."]
SEPARATED = ["#.#"]
RING_3X3 = ["###", "#.#", "###"]
CORNERS_3X3 = ["#.#", "...", "#.#"]


def make_sample_image() -> Image.Image:
    """White 10x10 canvas with a black 3x3 square at (2,2)-(4,4) and a lone dot at (8,8)."""
    img = Image.new("RGB", (10, 10), "white")
    draw = ImageDraw.Draw(img)
    draw.rectangle([2, 2, 4, 4], fill="black")
    img.putpixel((8, 8), (0, 0, 0))
    return img


@pytest.fixture
def sample_image() -> Image.Image:
    return make_sample_image()


@pytest.fixture
def sample_image_b64() -> str:
    return encode_png_base64(make_sample_image())


@pytest.fixture
def blank_image() -> Image.Image:
    return Image.new("RGB", (6, 4), "white")
