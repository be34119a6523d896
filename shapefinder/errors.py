"""Exception hierarchy shared by the engine, imaging helpers and API."""

from __future__ import annotations


class ShapefinderError(Exception):
    """Base class for all errors raised by shapefinder."""


class InvalidArgumentError(ShapefinderError, ValueError):
    """A size or dimension that makes no sense (negative, mismatched, ...)."""


class OutOfRangeError(ShapefinderError, IndexError):
    """An element id outside ``[0, n)``."""


class ImageDecodeError(ShapefinderError, ValueError):
    """Image bytes or base64 payload that Pillow cannot read."""
