"""Tests for running the solver end to end."""

import io

import pytest

from letterboxed import main
from letterboxed.puzzle_config import PuzzleConfig
from letterboxed.solver import solver
from letterboxed.solver.config import config as solver_config


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("adgj\njbekcfhli\nja\nbad\nAdgj\nib's\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    path = tmp_path / "logs"
    monkeypatch.setattr(solver_config, "log_dir", str(path))
    return path


@pytest.fixture
def puzzle():
    return PuzzleConfig.from_letters("abc def ghi jkl")


class TestSolveOne:
    """Solving into in-memory streams."""

    def test_reports_solutions_and_stats(self, puzzle, word_file):
        logf, out = io.StringIO(), io.StringIO()
        n = solver.solve_one(
            puzzle,
            logf=logf,
            out=out,
            number_of_words=2,
            dictionary_path=word_file,
            parallel=False,
        )
        assert n == 1
        lines = out.getvalue().splitlines()
        assert lines[0].startswith("Found 3 valid words in ")
        assert lines[1] == "adgj - jbekcfhli"
        assert lines[2].startswith("Examined 6 permutations in ")
        assert lines[-1].startswith("letterboxed -- ")

        log = logf.getvalue()
        assert "Puzzle: abc def ghi jkl (4x3)" in log
        assert "adgj - jbekcfhli" in log
        assert "1 solutions found." in log

    def test_no_solution(self, puzzle, word_file):
        logf, out = io.StringIO(), io.StringIO()
        n = solver.solve_one(
            puzzle, logf=logf, out=out, number_of_words=1, dictionary_path=word_file
        )
        assert n == 0
        assert "No solution found." in logf.getvalue()

    def test_parallel(self, puzzle, word_file):
        logf, out = io.StringIO(), io.StringIO()
        n = solver.solve_one(
            puzzle,
            logf=logf,
            out=out,
            number_of_words=2,
            dictionary_path=word_file,
            parallel=True,
            n_workers=1,
        )
        assert n == 1
        assert "adgj - jbekcfhli" in out.getvalue().splitlines()
        assert "Using parallel solver..." in logf.getvalue()

    def test_format_chain(self, puzzle):
        board = puzzle.board()
        chain = (board.encode_word("adgj"), board.encode_word("ja"))
        assert solver.format_chain(chain) == "adgj - ja"


class TestRun:
    """Running with a log file."""

    def test_writes_log_file(self, puzzle, word_file, log_dir, capsys):
        n = solver.run(puzzle, number_of_words=2, dictionary_path=word_file)
        assert n == 1
        assert "adgj - jbekcfhli" in capsys.readouterr().out
        logfile = log_dir / "abc_def_ghi_jkl-2w.log"
        assert logfile.is_file()
        assert "1 solutions found." in logfile.read_text(encoding="utf-8")


class TestMain:
    """Command-line interface."""

    def test_solves(self, word_file, capsys):
        main(["abc def ghi jkl", "-n", "2", "-d", str(word_file)])
        assert "adgj - jbekcfhli" in capsys.readouterr().out

    def test_bad_letters(self, word_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["abc def ghi", "-d", str(word_file)])
        assert exc_info.value.code == 2
        assert "Expected 4 sides" in capsys.readouterr().err

    def test_missing_dictionary(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["abc def ghi jkl", "-d", str(tmp_path / "missing.txt")])
        assert exc_info.value.code == 2
