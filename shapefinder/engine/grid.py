"""Binary grid interface and pixel id <-> coordinate mapping."""

from __future__ import annotations

from typing import NamedTuple, Protocol, runtime_checkable


@runtime_checkable
class BinaryGrid(Protocol):
    """Read-only two-color pixel source."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def is_foreground(self, row: int, col: int) -> bool: ...


class Coord(NamedTuple):
    row: int
    col: int


def pixel_id(row: int, col: int, n_cols: int) -> int:
    """Linear id of ``(row, col)`` in a grid ``n_cols`` wide."""
    return row * n_cols + col


def id_to_coord(pid: int, n_cols: int) -> Coord:
    return Coord(row=pid // n_cols, col=pid % n_cols)
