# tests/conftest.py
import pytest

from sudoku_search.grid import from_rows

CANONICAL_PUZZLE = "005002000200000007010400300060010409800000001103070050004005080900000003000600900"


@pytest.fixture
def sample_board():
    return from_rows([
        [3, 0, 0, 2, 0, 0, 0, 0, 0],
        [0, 0, 0, 1, 0, 7, 0, 0, 0],
        [7, 0, 6, 0, 3, 0, 5, 0, 0],
        [0, 7, 0, 0, 0, 9, 0, 8, 0],
        [9, 0, 0, 0, 2, 0, 0, 0, 4],
        [0, 1, 0, 8, 0, 0, 0, 5, 0],
        [0, 0, 9, 0, 4, 0, 3, 0, 1],
        [0, 0, 0, 7, 0, 2, 0, 0, 0],
        [0, 0, 0, 0, 0, 8, 0, 0, 6],
    ])


@pytest.fixture
def solved_board():
    return from_rows([
        [8, 1, 2, 7, 5, 3, 6, 4, 9],
        [9, 4, 3, 6, 8, 2, 1, 7, 5],
        [6, 7, 5, 4, 9, 1, 2, 8, 3],
        [1, 5, 4, 2, 3, 7, 8, 9, 6],
        [3, 6, 9, 8, 4, 5, 7, 2, 1],
        [2, 8, 7, 1, 6, 9, 5, 3, 4],
        [5, 2, 1, 9, 7, 4, 3, 6, 8],
        [4, 3, 8, 5, 2, 6, 9, 1, 7],
        [7, 9, 6, 3, 1, 8, 4, 5, 2],
    ])


@pytest.fixture
def solved_4x4():
    return from_rows([
        [1, 2, 3, 4],
        [3, 4, 1, 2],
        [2, 1, 4, 3],
        [4, 3, 2, 1],
    ])


@pytest.fixture
def canonical_puzzle():
    return CANONICAL_PUZZLE
