"""
Entry point for running the sudoku_search package as a module.

Usage:
    python -m sudoku_search --puzzle 005002000200000007...
"""

from .sudoku_solver import main

if __name__ == '__main__':
    main()
