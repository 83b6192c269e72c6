"""Tests for word list loading and encoding."""

import pytest
from sortedcontainers import SortedSet

from letterboxed.board import build_board
from letterboxed.solver.config import config as solver_config
from letterboxed.wordlist import encode_words, is_candidate, load_word_list


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text(
        "bead\nApple\ndog's\n  cat  \n\nbead\napple\nJapan\n",
        encoding="utf-8",
    )
    return path


class TestLoadWordList:
    """Loading and filtering the dictionary."""

    def test_filters_dedupes_and_sorts(self, word_file):
        words = load_word_list(word_file)
        assert isinstance(words, SortedSet)
        assert list(words) == ["apple", "bead", "cat"]

    def test_default_path_from_config(self, word_file, monkeypatch):
        monkeypatch.setattr(solver_config, "dictionary_path", str(word_file))
        assert list(load_word_list()) == ["apple", "bead", "cat"]

    def test_unsorted_when_not_deterministic(self, word_file, monkeypatch):
        monkeypatch.setattr(solver_config, "deterministic", False)
        words = load_word_list(word_file)
        assert isinstance(words, set)
        assert words == {"apple", "bead", "cat"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_word_list(tmp_path / "missing.txt")

    @pytest.mark.parametrize(
        "word, expected",
        [("bead", True), ("Bead", False), ("NASA", False), ("bead's", False), ("it's", False)],
    )
    def test_is_candidate(self, word, expected):
        assert is_candidate(word) is expected


class TestEncodeWords:
    """Encoding a batch of words against a board."""

    def test_keeps_valid_words_in_order(self):
        board = build_board(["abc", "def", "ghi", "jkl"])
        encoded = encode_words(board, ["gal", "bad", "bead", "xyz", "ja"])
        assert [w.word for w in encoded] == ["gal", "bead", "ja"]

    def test_empty(self):
        board = build_board(["abc", "def", "ghi", "jkl"])
        assert encode_words(board, []) == []
