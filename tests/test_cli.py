# tests/test_cli.py
import pytest

from sudoku_search.checker import is_solved
from sudoku_search.parsing import parse_grid
from sudoku_search.sudoku_solver import SudokuSolver, main


def test_process_puzzle_result(canonical_puzzle, capsys):
    result = SudokuSolver().process_puzzle(canonical_puzzle)
    assert result['givens'] == 81 - canonical_puzzle.count("0")
    assert is_solved(result['solution']) is not None
    assert result['message'].startswith("Solved in ")

    out = capsys.readouterr().out
    assert "[1/3] Parsing puzzle..." in out
    assert "✓ Solved puzzle" in out


def test_process_puzzle_quiet(canonical_puzzle, capsys):
    SudokuSolver(verbose=False).process_puzzle(canonical_puzzle)
    assert capsys.readouterr().out == ""


def test_main_compact(canonical_puzzle, capsys):
    main(["--puzzle", canonical_puzzle, "--compact", "--quiet"])
    out = capsys.readouterr().out.strip()
    assert is_solved(parse_grid(out)) is not None


def test_main_reads_file(tmp_path, canonical_puzzle, capsys):
    path = tmp_path / "puzzle.txt"
    path.write_text(canonical_puzzle[:45] + "\n" + canonical_puzzle[45:] + "\n", encoding="utf-8")
    main(["--file", str(path), "-q", "--compact"])
    out = capsys.readouterr().out.strip()
    assert len(out) == 81


def test_main_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--file", str(tmp_path / "missing.txt")])
    assert exc.value.code == 1
    assert "Puzzle file not found" in capsys.readouterr().out


def test_main_malformed(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--puzzle", "12x4"])
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().out


def test_main_unsolvable(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-p", "1100" + "0" * 12, "-q"])
    assert exc.value.code == 1
    assert "No solution: Row 1 has duplicate given digit 1" in capsys.readouterr().out


def test_main_requires_a_source():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
