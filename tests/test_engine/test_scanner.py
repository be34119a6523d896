"""Tests for the 8-connectivity scan."""

from __future__ import annotations

import pytest

from shapefinder.engine.disjoint_set import DisjointSet
from shapefinder.engine.scanner import scan
from shapefinder.errors import InvalidArgumentError
from shapefinder.imaging.binarize import BinaryImage
from tests.conftest import CORNERS_3X3, DIAGONAL_2X2, EMPTY_2X2, FULL_3X3, RING_3X3, SEPARATED


def _scan(rows: list[str]) -> DisjointSet:
    return scan(BinaryImage.from_rows(rows))


class _CallableGrid:
    """Minimal BinaryGrid backed by a predicate."""

    def __init__(self, width, height, predicate):
        self.width = width
        self.height = height
        self._predicate = predicate

    def is_foreground(self, row: int, col: int) -> bool:
        return self._predicate(row, col)


def test_full_grid_is_one_tree():
    ds = _scan(FULL_3X3)
    assert len(ds) == 9
    assert ds.size_of(0) == 9
    assert ds.tree_count(1) == 1
    assert ds.roots_above(1) == {ds.root(4)}


def test_diagonal_pixels_connect():
    ds = _scan(DIAGONAL_2X2)
    assert ds.connected(0, 3)
    assert ds.size_of(0) == 2
    assert ds.size_of(1) == 1
    assert ds.size_of(2) == 1


def test_anti_diagonal_connects():
    ds = _scan(["..#", ".#.", "#.."])
    assert ds.connected(2, 6)
    assert ds.size_of(4) == 3


def test_background_stays_singletons():
    ds = _scan(EMPTY_2X2)
    assert ds.roots_above(1) == set()
    assert all(ds.members(i) == [i] for i in range(4))


def test_gap_keeps_pixels_apart():
    ds = _scan(SEPARATED)
    assert not ds.connected(0, 2)
    assert ds.size_of(0) == 1
    assert ds.size_of(2) == 1


def test_corners_are_bounds_safe():
    ds = _scan(CORNERS_3X3)
    corners = [0, 2, 6, 8]
    for a in corners:
        assert ds.size_of(a) == 1
        for b in corners:
            if a != b:
                assert not ds.connected(a, b)


def test_ring_around_hole():
    ds = _scan(RING_3X3)
    assert ds.size_of(0) == 8
    assert ds.members(0) == [0, 1, 2, 3, 5, 6, 7, 8]
    assert ds.members(4) == [4]


def test_uses_given_disjoint_set():
    ds = DisjointSet(9)
    out = scan(BinaryImage.from_rows(FULL_3X3), ds)
    assert out is ds
    assert ds.size_of(8) == 9


def test_mismatched_disjoint_set_rejected():
    with pytest.raises(InvalidArgumentError):
        scan(BinaryImage.from_rows(FULL_3X3), DisjointSet(8))


def test_accepts_any_binary_grid():
    # Checkerboard: every foreground cell touches another diagonally
    grid = _CallableGrid(4, 4, lambda r, c: (r + c) % 2 == 0)
    ds = scan(grid)
    assert ds.size_of(0) == 8
    assert ds.members(0) == [0, 2, 5, 7, 8, 10, 13, 15]


def test_empty_grid():
    ds = scan(BinaryImage.from_rows([]))
    assert len(ds) == 0
