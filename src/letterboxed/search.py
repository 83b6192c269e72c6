"""Enumeration of word chains that cover the whole board."""

from collections.abc import Iterable, Iterator, Sequence
from itertools import pairwise, permutations
from typing import TypeAlias

from letterboxed.board import MAX_MASK, EncodedWord
from letterboxed.solver.utils import count_permutations

Chain: TypeAlias = tuple[EncodedWord, ...]


def is_chain(words: Sequence[EncodedWord]) -> bool:
    """Returns whether each word starts where the previous one ends."""
    return all(first.end == second.start for first, second in pairwise(words))


def board_mask(words: Sequence[EncodedWord]) -> int:
    """Returns the coverage mask of the board the words were encoded on.

    Words built by hand, without a board, fall back to a full 4x4 board.
    """
    return words[0].board_mask if words else MAX_MASK


def covers(words: Iterable[EncodedWord], full_mask: int) -> bool:
    """Returns whether the words together visit every position in `full_mask`."""
    spots = 0
    for word in words:
        spots |= word.spots_filled
    return spots == full_mask


class ChainSearch:
    """Lazy sequence of valid chains of `max_words` words.

    Nothing is materialized: iterating walks the permutations of `words` in input order
    and yields those that chain and cover the board.  Each call to `iter()` starts over.
    """

    def __init__(self, words: Sequence[EncodedWord], max_words: int, full_mask: int) -> None:
        self.words: tuple[EncodedWord, ...] = tuple(words)
        self.max_words = max_words
        self.full_mask = full_mask

    @property
    def n_candidates(self) -> int:
        """Number of permutations examined by a full pass."""
        if self.max_words < 1:
            return 0
        return count_permutations(len(self.words), self.max_words)

    def __iter__(self) -> Iterator[Chain]:
        if self.max_words < 1:
            return
        full_mask = self.full_mask
        for candidate in permutations(self.words, self.max_words):
            # Chaining is cheaper and rejects far more candidates, so check it first
            if is_chain(candidate) and covers(candidate, full_mask):
                yield candidate


def search(
    encoded_words: Sequence[EncodedWord],
    max_words: int,
    *,
    full_mask: int | None = None,
) -> ChainSearch:
    """Find all ordered chains of `max_words` distinct words that cover the board.

    Args:
        encoded_words: Words already encoded against the board.
        max_words: Number of words in each chain.
        full_mask: Coverage mask of the board.  Defaults to the `board_mask` the words
            were encoded with.

    Returns:
        A lazy, restartable iterable of chains.  Empty if there are fewer than
        `max_words` words.
    """
    if full_mask is None:
        full_mask = board_mask(encoded_words)
    return ChainSearch(encoded_words, max_words, full_mask)
