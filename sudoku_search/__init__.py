"""
Sudoku Search - Backtracking Sudoku Solver

This package contains modules for:
- Grid access and construction
- Solution and candidate analysis
- Most-constrained-cell search expansion
- Puzzle parsing and the command-line solver
"""

from .grid import GridIndexError, MalformedGridError, from_rows
from .parsing import parse_grid
from .solver import solve, solve_puzzle

__version__ = "1.0.0"
__author__ = "Sudoku Search Project Team"
