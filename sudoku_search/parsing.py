"""
Conversion between flat puzzle strings, grids, and printable boards.
"""

from math import isqrt

from .grid import Grid, MalformedGridError, block_size, from_rows


BLANK_CHARS = {"0", "."}
DIGITS = set("0123456789")


def parse_grid(text: str) -> Grid:
    """
    Parse a row-major string of N*N single digits into a grid.

    Whitespace (including line breaks) is ignored, and '.' is accepted as a
    blank alongside '0'.

    Raises:
        MalformedGridError: on non-digit characters or a length that is not
            the square of a perfect square
    """
    chars = [ch for ch in text if not ch.isspace()]

    bad = sorted({ch for ch in chars if ch not in BLANK_CHARS and ch not in DIGITS})
    if bad:
        raise MalformedGridError(f"Unexpected characters in puzzle: {''.join(bad)!r}")

    n = isqrt(len(chars))
    if n == 0 or n * n != len(chars):
        raise MalformedGridError(f"Puzzle length {len(chars)} is not N*N for a square grid")

    values = [0 if ch in BLANK_CHARS else int(ch) for ch in chars]
    return from_rows([values[i:i + n] for i in range(0, len(values), n)])


def grid_to_string(grid: Grid) -> str:
    """Flatten a grid back into the row-major digit string parse_grid reads."""
    return "".join(str(int(v)) for v in grid.ravel())


def format_board(grid: Grid) -> str:
    """Render the board as a human-friendly string."""
    n = grid.shape[0]
    s = block_size(grid)
    width = max(1, len(str(n)))
    lines = []
    for r, row in enumerate(grid):
        parts = []
        for c, val in enumerate(row):
            parts.append((str(val) if val != 0 else ".").rjust(width))
            if (c + 1) % s == 0 and c + 1 < n:
                parts.append("|")
        line = " ".join(parts)
        lines.append(line)
        if (r + 1) % s == 0 and r + 1 < n:
            lines.append("-" * len(line))
    return "\n".join(lines)
