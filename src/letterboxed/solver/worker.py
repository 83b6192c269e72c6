"""Main module for worker tasks in the parallel solver."""

from dataclasses import dataclass
from itertools import permutations

from letterboxed.board import EncodedWord
from letterboxed.search import covers, is_chain


@dataclass(kw_only=True)
class WorkerState:
    """Global state maintained by each worker process."""

    words: tuple[EncodedWord, ...]
    """All encoded words, in the same order as in the parent process."""

    max_words: int
    """Number of words per chain."""

    full_mask: int
    """Coverage mask of the board."""


worker_state: WorkerState | None = None
"""Global state for each worker process."""


def init_worker_globals(
    words: tuple[EncodedWord, ...],
    max_words: int,
    full_mask: int,
) -> None:
    """Initialize global variables for worker processes.

    Args:
        words (tuple[EncodedWord, ...]): The encoded words to search.
        max_words (int): Number of words per chain.
        full_mask (int): Coverage mask of the board.
    """
    global worker_state  # noqa: PLW0603
    worker_state = WorkerState(
        words=words,
        max_words=max_words,
        full_mask=full_mask,
    )


def worker_task(first_idx: int) -> list[tuple[int, ...]]:
    """Find all valid chains whose first word is `words[first_idx]`.

    Tails are enumerated in the same order as `itertools.permutations` over the whole
    word list, so concatenating the shards in index order reproduces the sequential search.

    Args:
        first_idx (int): Index of the first word of every chain in this shard.

    Returns:
        A list of chains, each a tuple of word indices.
    """
    if worker_state is None:
        raise RuntimeError("Worker state not initialized; use init_worker_globals.")
    words = worker_state.words
    full_mask = worker_state.full_mask

    rest = [idx for idx in range(len(words)) if idx != first_idx]
    chains: list[tuple[int, ...]] = []
    for tail in permutations(rest, worker_state.max_words - 1):
        chain = (first_idx, *tail)
        candidate = [words[idx] for idx in chain]
        if is_chain(candidate) and covers(candidate, full_mask):
            chains.append(chain)
    return chains
