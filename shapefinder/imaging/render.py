"""Outline drawing onto Pillow images."""

from __future__ import annotations

from PIL import Image, ImageColor, ImageDraw

from shapefinder.errors import InvalidArgumentError

Color = str | tuple[int, int, int]


def check_color(color: Color) -> Color:
    """Return ``color`` unchanged if Pillow can draw with it."""
    if isinstance(color, str):
        try:
            ImageColor.getrgb(color)
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown outline color {color!r}") from e
    elif len(color) != 3 or not all(0 <= c <= 255 for c in color):
        raise InvalidArgumentError(f"Outline color must be an RGB triple, got {color!r}")
    return color


def draw_outline(
    image: Image.Image,
    corners: tuple[tuple[int, int], tuple[int, int]],
    color: Color,
    width: int = 1,
) -> None:
    """Draw a rectangle outline between two (x, y) corners, in place.

    Corners may come in any order; Pillow needs top-left first.
    """
    (x1, y1), (x2, y2) = corners
    box = [min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2)]
    ImageDraw.Draw(image).rectangle(box, outline=color, width=width)


def outline_all(image: Image.Image, groupings, color: Color) -> Image.Image:
    """Copy ``image`` and outline every grouping on the copy."""
    out = image.copy()
    for grouping in groupings:
        grouping.apply_to_image(out, color)
    return out
