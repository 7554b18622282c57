"""
Legal-value analysis for the blank cells of a grid.

Presence of a value v in a row, column or block is tracked as bit v of an
integer mask, so the exclusion set of a cell is the OR of three masks.
"""

from typing import NamedTuple

from .grid import Coord, Grid, block, block_anchors, block_size, column, row


class CandidateEntry(NamedTuple):
    coord: Coord
    values: frozenset


def _mask(values) -> int:
    mask = 0
    for v in values:
        mask |= 1 << v
    return mask


def _values_from_mask(mask: int, n: int) -> frozenset:
    return frozenset(v for v in range(1, n + 1) if mask >> v & 1)


def candidates(grid: Grid) -> list[CandidateEntry]:
    """
    List the legal values of every blank cell, in row-major order.

    A cell whose legal set is empty is still listed; it marks a dead end.
    A grid without blanks yields an empty list.
    """
    n = grid.shape[0]
    s = block_size(grid)
    full = (1 << (n + 1)) - 2  # bits 1..n

    row_masks = [_mask(row(grid, r)) for r in range(n)]
    col_masks = [_mask(column(grid, c)) for c in range(n)]
    block_masks = {anchor: _mask(block(grid, anchor)) for anchor in block_anchors(grid)}

    entries = []
    for r in range(n):
        for c in range(n):
            if grid[r, c] != 0:
                continue
            used = row_masks[r] | col_masks[c] | block_masks[((r // s) * s, (c // s) * s)]
            entries.append(CandidateEntry((r, c), _values_from_mask(full & ~used, n)))

    return entries
