"""
Sudoku Search - Main Application Module
"""

import argparse
import os
import sys

import numpy as np

from .checker import find_duplicate_givens
from .grid import MalformedGridError
from .parsing import format_board, grid_to_string, parse_grid
from .solver import solve_puzzle


class SudokuSolver:
    """
    Main class for the Sudoku Search application.

    This class wraps the parse, check and search stages for a single puzzle
    and reports progress on the console.
    """

    def __init__(self, max_steps=200000, verbose=True):
        """
        Initialize the Sudoku Solver.

        Args:
            max_steps (int): Maximum number of grids the search may examine
            verbose (bool): Whether to print progress while solving
        """
        self.max_steps = max_steps
        self.verbose = verbose

    def _log(self, message=""):
        if self.verbose:
            print(message)

    def process_puzzle(self, text):
        """
        Solve a puzzle given as a flat digit string.

        Pipeline steps:
        1. Parse the string into a grid
        2. Check the givens for duplicates
        3. Run the bounded backtracking search

        Args:
            text (str): Row-major puzzle, '0' or '.' for blanks

        Returns:
            dict: puzzle grid, solution grid (or None), solver message and
            the number of givens

        Raises:
            MalformedGridError: if the text does not describe a grid
        """
        self._log(f"\n{'='*60}")
        self._log("Solving puzzle")
        self._log(f"{'='*60}")

        self._log("\n[1/3] Parsing puzzle...")
        puzzle = parse_grid(text)
        n = puzzle.shape[0]
        givens = int(np.count_nonzero(puzzle))
        self._log(f"      Grid size: {n}x{n}, {givens} givens")
        self._log(format_board(puzzle))

        self._log("\n[2/3] Checking givens...")
        notes = find_duplicate_givens(puzzle)
        if notes:
            self._log("      ✗ Givens are inconsistent:")
            for note in notes:
                self._log(f"        - {note}")
        else:
            self._log("      ✓ No duplicate givens")

        self._log(f"\n[3/3] Searching (limit {self.max_steps} steps)...")
        solution, message = solve_puzzle(puzzle, max_steps=self.max_steps)
        if solution is None:
            self._log(f"      ✗ Could not solve: {message}")
        else:
            self._log(f"      ✓ Solved puzzle ({message}):")
            self._log(format_board(solution))

        self._log(f"\n{'='*60}\n")

        return {
            'puzzle': puzzle,
            'solution': solution,
            'message': message,
            'givens': givens,
        }


def main(argv=None):
    """
    Main entry point for the Sudoku Search application.

    Handles command-line arguments and solves one puzzle.
    """
    parser = argparse.ArgumentParser(
        description='Sudoku Search - backtracking solver with most-constrained-cell ordering',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Solve a puzzle given inline:
    python -m sudoku_search --puzzle 005002000200000007010400300060010409800000001103070050004005080900000003000600900

  Solve a puzzle stored in a file:
    python -m sudoku_search --file puzzle.txt

  Print only the solved grid as one line:
    python -m sudoku_search --file puzzle.txt --compact --quiet
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--puzzle', '-p',
                        help='Puzzle as a row-major digit string (0 or . for blanks)')
    source.add_argument('--file', '-f',
                        help='Path to a text file holding the puzzle')
    parser.add_argument('--max-steps', '-m', type=int, default=200000,
                        help='Search step limit (default: 200000)')
    parser.add_argument('--compact', action='store_true',
                        help='Print the solution as a single digit string')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Do not print progress')

    args = parser.parse_args(argv)

    if args.file is not None:
        # Check if puzzle file exists
        if not os.path.exists(args.file):
            print(f"Error: Puzzle file not found: {args.file}")
            sys.exit(1)
        with open(args.file, encoding='utf-8') as fh:
            text = fh.read()
    else:
        text = args.puzzle

    solver = SudokuSolver(max_steps=args.max_steps, verbose=not args.quiet)

    try:
        result = solver.process_puzzle(text)
    except MalformedGridError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if result['solution'] is None:
        print(f"No solution: {result['message']}")
        sys.exit(1)

    if args.compact:
        print(grid_to_string(result['solution']))
    elif args.quiet:
        print(format_board(result['solution']))


if __name__ == '__main__':
    main()
