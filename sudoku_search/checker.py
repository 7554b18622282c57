"""
Consistency checks over whole grids.
"""

from .grid import Grid, block, block_anchors, block_size, column, row


def _has_all_numbers(values, expected: set[int]) -> bool:
    return not (expected - set(values))


def is_solved(grid: Grid) -> Grid | None:
    """
    Return the grid itself if it is a valid solution, otherwise None.

    A solution has every row, column and block equal to {1..N}. Each unit
    holds exactly N values, so an empty set difference rules out both
    repeats and blanks.
    """
    n = grid.shape[0]
    expected = set(range(1, n + 1))

    for i in range(n):
        if not _has_all_numbers(row(grid, i), expected):
            return None
        if not _has_all_numbers(column(grid, i), expected):
            return None

    for anchor in block_anchors(grid):
        if not _has_all_numbers(block(grid, anchor), expected):
            return None

    return grid


def _duplicates(values) -> list[int]:
    seen = set()
    dups = []
    for v in values:
        if v == 0:
            continue
        if v in seen and v not in dups:
            dups.append(v)
        seen.add(v)
    return dups


def find_duplicate_givens(grid: Grid) -> list[str]:
    """
    Report every row, column and block holding a repeated non-zero value.

    Returns:
        list of notes such as "Row 1 has duplicate given digit 3"; empty
        when the givens are mutually consistent
    """
    n = grid.shape[0]
    s = block_size(grid)
    notes: list[str] = []

    for i in range(n):
        for v in _duplicates(row(grid, i)):
            notes.append(f"Row {i+1} has duplicate given digit {v}")
    for i in range(n):
        for v in _duplicates(column(grid, i)):
            notes.append(f"Column {i+1} has duplicate given digit {v}")
    for r0, c0 in block_anchors(grid):
        for v in _duplicates(block(grid, (r0, c0))):
            notes.append(f"{s}x{s} block ({r0 // s + 1},{c0 // s + 1}) has duplicate given digit {v}")

    return notes
