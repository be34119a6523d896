"""Image decoding, encoding and scaling."""

from __future__ import annotations

import base64
import binascii
import io

from PIL import Image, UnidentifiedImageError

from shapefinder.errors import ImageDecodeError, InvalidArgumentError


def load_image(data: bytes) -> Image.Image:
    """Decode raw image bytes into an RGB image."""
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageDecodeError(f"Cannot decode image: {e}") from e
    return img.convert("RGB")


def decode_base64_image(payload: str) -> Image.Image:
    # Accept data URLs as sent by browsers
    if payload.startswith("data:"):
        payload = payload.partition(",")[2]
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageDecodeError(f"Invalid base64 image payload: {e}") from e
    return load_image(raw)


def encode_png_base64(image: Image.Image) -> str:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return base64.b64encode(buf.getvalue()).decode("ascii")


def scale_image(image: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Resize to exactly ``(width, height)``."""
    width, height = size
    if width <= 0 or height <= 0:
        raise InvalidArgumentError(f"Resize target must be positive, got {width}x{height}")
    return image.resize((width, height), Image.Resampling.BILINEAR)
