"""
Single-step depth-first expansion of the search frontier.

The frontier is a stack of pending grids. Expanding it replaces the head
with one child per legal value of the head's most constrained blank cell,
so newer branches are always explored before their older siblings.
"""

from typing import Iterable, Iterator

from .candidates import CandidateEntry, candidates
from .grid import Grid, with_value


class Frontier:
    """
    Ordered collection of outstanding search branches, head first.

    Stored as a list with the head at the end, so pushing and popping the
    head never shifts the remaining branches.
    """

    def __init__(self, grids: Iterable[Grid] = ()):
        self._stack = list(grids)[::-1]

    @property
    def head(self) -> Grid:
        if not self._stack:
            raise IndexError("head of an empty frontier")
        return self._stack[-1]

    def pop(self) -> Grid:
        if not self._stack:
            raise IndexError("pop from an empty frontier")
        return self._stack.pop()

    def push_branch(self, grids: Iterable[Grid]) -> None:
        """Place grids in front of the frontier, keeping their order."""
        self._stack.extend(reversed(list(grids)))

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)

    def __iter__(self) -> Iterator[Grid]:
        return reversed(self._stack)


def select_entry(grid: Grid) -> CandidateEntry | None:
    """
    Pick the blank cell with the fewest legal values.

    Ties go to the first cell in row-major order. Returns None when the grid
    has no blanks.
    """
    entries = candidates(grid)
    if not entries:
        return None
    return min(entries, key=lambda entry: len(entry.values))


def branch(grid: Grid, entry: CandidateEntry) -> Iterator[Grid]:
    """Yield one child grid per legal value of entry, smallest value first."""
    for value in sorted(entry.values):
        yield with_value(grid, entry.coord, value)


def expand(frontier: Frontier) -> Frontier:
    """
    Replace the head of the frontier with its children, in place.

    A head without blanks, or whose chosen cell has no legal value, is a
    dead end: it is dropped and nothing takes its place.

    Returns:
        The same frontier, for chaining
    """
    current = frontier.pop()
    entry = select_entry(current)
    if entry is None or not entry.values:
        return frontier

    frontier.push_branch(branch(current, entry))
    return frontier
