"""
Grid value type and cell/row/column/block accessors.

A grid is a read-only N x N numpy array of ints (0 = blank) where N is a
perfect square. Nothing in this module mutates a grid; `with_value` returns
a fresh copy.
"""

from math import isqrt

import numpy as np


Grid = np.ndarray
Coord = tuple[int, int]


class GridIndexError(IndexError):
    """Raised when a coordinate falls outside the grid."""


class MalformedGridError(ValueError):
    """Raised when rows or text do not describe a well-formed grid."""


def _freeze(board: np.ndarray) -> Grid:
    board.setflags(write=False)
    return board


def from_rows(rows) -> Grid:
    """
    Build a grid from a sequence of rows, validating its shape and values.

    Args:
        rows: N sequences of N ints, 0 for blanks

    Returns:
        Read-only N x N integer array

    Raises:
        MalformedGridError: if the grid is not square, N is not a perfect
            square, or a value lies outside [0, N]
    """
    try:
        board = np.array(rows, dtype=int)
    except (TypeError, ValueError) as e:
        raise MalformedGridError(f"Grid rows must be equal-length integer sequences: {e}") from e

    if board.ndim != 2 or board.shape[0] != board.shape[1] or board.shape[0] == 0:
        raise MalformedGridError(f"Grid must be square and non-empty, got shape {board.shape}")

    n = board.shape[0]
    s = isqrt(n)
    if s * s != n:
        raise MalformedGridError(f"Grid size must be a perfect square (got N={n})")

    if board.min() < 0 or board.max() > n:
        raise MalformedGridError(f"Grid values must lie in [0, {n}]")

    return _freeze(board)


def block_size(grid: Grid) -> int:
    return isqrt(grid.shape[0])


def _check_index(grid: Grid, index: int, label: str) -> None:
    n = grid.shape[0]
    if not 0 <= index < n:
        raise GridIndexError(f"{label} {index} outside [0, {n})")


def _check_coord(grid: Grid, coord: Coord) -> None:
    r, c = coord
    _check_index(grid, r, "Row")
    _check_index(grid, c, "Column")


def value_at(grid: Grid, coord: Coord) -> int:
    """Return the value stored at (row, col)."""
    _check_coord(grid, coord)
    return int(grid[coord])


def with_value(grid: Grid, coord: Coord, value: int) -> Grid:
    """Return a copy of the grid with one cell overwritten."""
    _check_coord(grid, coord)
    updated = grid.copy()
    updated[coord] = value
    return _freeze(updated)


def row(grid: Grid, r: int) -> tuple[int, ...]:
    _check_index(grid, r, "Row")
    return tuple(int(v) for v in grid[r, :])


def column(grid: Grid, c: int) -> tuple[int, ...]:
    _check_index(grid, c, "Column")
    return tuple(int(v) for v in grid[:, c])


def block(grid: Grid, coord: Coord) -> tuple[int, ...]:
    """
    Return the values of the block containing coord, row-major.

    Every coordinate inside the same block yields the same sequence.
    """
    _check_coord(grid, coord)
    s = block_size(grid)
    r0 = (coord[0] // s) * s
    c0 = (coord[1] // s) * s
    return tuple(int(v) for v in grid[r0:r0 + s, c0:c0 + s].ravel())


def block_anchors(grid: Grid) -> list[Coord]:
    """Top-left coordinate of every block, row-major."""
    n = grid.shape[0]
    s = block_size(grid)
    return [(br, bc) for br in range(0, n, s) for bc in range(0, n, s)]


def blank_count(grid: Grid) -> int:
    return int(np.count_nonzero(grid == 0))
