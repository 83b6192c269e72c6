"""Implementation of the parallel solver: task distribution and worker management."""

import os
from collections.abc import Iterator, Sequence
from concurrent.futures import ProcessPoolExecutor

from letterboxed.board import EncodedWord
from letterboxed.search import Chain, board_mask
from letterboxed.solver.config import config as solver_config
from letterboxed.solver.worker import init_worker_globals, worker_task


def get_executor(
    *,
    n_workers: int | None = None,
    words: tuple[EncodedWord, ...],
    max_words: int,
    full_mask: int,
) -> ProcessPoolExecutor:
    """Get a ProcessPoolExecutor whose workers hold the word list.

    Args:
        n_workers (int | None): Number of worker processes to create.  If None,
            defaults to number of CPU cores minus one.
        words (tuple[EncodedWord, ...]): Encoded words to pass to workers.
        max_words (int): Number of words per chain.
        full_mask (int): Coverage mask of the board.

    Returns:
        A ProcessPoolExecutor instance for worker processes.
    """
    cpus = os.cpu_count() or 1  # Fallback to 1 if os.cpu_count() is None
    if n_workers is None:
        n_workers = max(1, cpus - 1)  # Leave one core free
    if n_workers > cpus:
        raise ValueError(
            f"Requested number of workers ({n_workers}) exceeds CPU count ({cpus})",
        )
    return ProcessPoolExecutor(
        max_workers=n_workers,
        initializer=init_worker_globals,
        initargs=(words, max_words, full_mask),
    )


def search_parallel(
    encoded_words: Sequence[EncodedWord],
    max_words: int,
    *,
    full_mask: int | None = None,
    n_workers: int | None = None,
    chunksize: int | None = None,
) -> Iterator[Chain]:
    """Find all covering chains, sharding the search by first word across processes.

    Yields the same chains, in the same order, as `letterboxed.search.search`.  The
    worker pool is started on first iteration and shut down when the generator is
    exhausted or closed.

    Args:
        encoded_words: Words already encoded against the board.
        max_words: Number of words in each chain.
        full_mask: Coverage mask of the board.  Defaults to the `board_mask` the words
            were encoded with.
        n_workers: Number of worker processes (see `get_executor`).
        chunksize: Shards per task submission.  Defaults to `config.chunksize`.
    """
    words = tuple(encoded_words)
    if max_words < 1 or max_words > len(words):
        return
    if full_mask is None:
        full_mask = board_mask(words)
    if chunksize is None:
        chunksize = solver_config.chunksize

    with get_executor(
        n_workers=n_workers,
        words=words,
        max_words=max_words,
        full_mask=full_mask,
    ) as executor:
        try:
            # `map` preserves submission order, so shards come back in first-word order
            for shard in executor.map(worker_task, range(len(words)), chunksize=chunksize):
                for chain in shard:
                    yield tuple(words[idx] for idx in chain)
        except (GeneratorExit, KeyboardInterrupt, Exception) as e:
            executor.shutdown(wait=False, cancel_futures=True)
            raise e
