"""Module for word list management in Letter Boxed."""

from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from sortedcontainers import SortedSet

from letterboxed.board import Board, EncodedWord
from letterboxed.solver.config import config as solver_config


def is_candidate(word: str) -> bool:
    """Returns whether a dictionary entry should be tried on the board.

    Proper nouns (anything with an uppercase letter) and possessives are skipped.
    """
    return not any(ch.isupper() for ch in word) and not word.endswith("'s")


def load_word_list(path: str | PathLike | None = None) -> SortedSet | set[str]:
    """Load the word list, one word per line.

    Args:
        path: Path to the word list.  Defaults to `config.dictionary_path`.

    Returns:
        The deduplicated candidate words.  Sorted if `config.deterministic` is set.
    """
    word_list_path = Path(solver_config.dictionary_path if path is None else path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        words = {word for line in f if (word := line.strip()) and is_candidate(word)}
    return SortedSet(words) if solver_config.deterministic else words


def encode_words(board: Board, words: Iterable[str]) -> list[EncodedWord]:
    """Encode every word against the board, dropping those that cannot be played."""
    encoded: list[EncodedWord] = []
    for word in words:
        encoded_word = board.encode_word(word)
        if encoded_word is not None:
            encoded.append(encoded_word)
    return encoded
