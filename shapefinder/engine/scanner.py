"""Row-major 8-connectivity scan that fills a DisjointSet from a binary grid."""

from __future__ import annotations

import logging

from shapefinder.engine.disjoint_set import DisjointSet
from shapefinder.engine.grid import BinaryGrid, pixel_id
from shapefinder.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

# (d_row, d_col) for left, right, up, down, then the four diagonals
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)


def scan(grid: BinaryGrid, disjoint_set: DisjointSet | None = None) -> DisjointSet:
    """Union every foreground pixel with its in-bounds foreground neighbours.

    Background pixels are skipped and stay singletons. A fresh DisjointSet of
    ``width * height`` elements is created when none is passed.
    """
    n_rows, n_cols = grid.height, grid.width
    if n_rows < 0 or n_cols < 0:
        raise InvalidArgumentError(f"Grid dimensions must be >= 0, got {n_cols}x{n_rows}")

    n = n_rows * n_cols
    if disjoint_set is None:
        disjoint_set = DisjointSet(n)
    elif len(disjoint_set) != n:
        raise InvalidArgumentError(
            f"DisjointSet has {len(disjoint_set)} elements, grid needs {n}"
        )

    n_foreground = 0
    for row in range(n_rows):
        for col in range(n_cols):
            if not grid.is_foreground(row, col):
                continue
            n_foreground += 1
            pid = pixel_id(row, col, n_cols)
            for d_row, d_col in NEIGHBOR_OFFSETS:
                r, c = row + d_row, col + d_col
                if 0 <= r < n_rows and 0 <= c < n_cols and grid.is_foreground(r, c):
                    disjoint_set.union(pid, pixel_id(r, c, n_cols))

    logger.debug("Scanned %dx%d grid: %d foreground pixels", n_cols, n_rows, n_foreground)
    return disjoint_set
