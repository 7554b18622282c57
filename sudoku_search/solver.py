"""
Backtracking Sudoku solver driven by most-constrained-cell expansion.
"""

from typing import Iterator

from .checker import find_duplicate_givens, is_solved
from .grid import Grid, blank_count
from .search import Frontier, expand


def search_steps(grid: Grid) -> Iterator[Grid]:
    """
    Lazily yield every frontier head the search examines, in order.

    Heads without blanks are yielded but never expanded. The generator ends
    when the frontier is exhausted; callers stop it early to bound the search.
    """
    frontier = Frontier([grid])
    while frontier:
        head = frontier.head
        yield head
        if blank_count(head) == 0:
            frontier.pop()
        else:
            expand(frontier)


def solve(grid: Grid) -> Grid | None:
    """Return the first solution found, or None if the search is exhausted."""
    for head in search_steps(grid):
        if is_solved(head) is not None:
            return head
    return None


def solve_puzzle(grid: Grid, max_steps: int = 200000) -> tuple[Grid | None, str]:
    """
    Return (solution, message), or (None, reason) if unsolvable or invalid.

    Duplicate givens are reported before any search. The search is limited
    to max_steps examined grids to avoid runaway loops.
    """
    notes = find_duplicate_givens(grid)
    if notes:
        return None, notes[0]

    steps = 0
    for head in search_steps(grid):
        if is_solved(head) is not None:
            return head, f"Solved in {steps} steps"
        steps += 1
        if steps >= max_steps:
            return None, f"Stopped after {steps} steps (limit {max_steps})"
    return None, "No solution found"
