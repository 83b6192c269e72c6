"""Main solver module for Letter Boxed puzzles."""

import sys
from collections.abc import Iterable
from datetime import datetime
from os import PathLike
from pathlib import Path
from pprint import pprint
from time import perf_counter, time
from typing import TextIO

from letterboxed.puzzle_config import PuzzleConfig
from letterboxed.search import Chain, search
from letterboxed.solver.config import config as solver_config
from letterboxed.solver.parallel import search_parallel
from letterboxed.solver.utils import TIMESTAMP_FMT, count_permutations, int_comma, time_str
from letterboxed.wordlist import encode_words, load_word_list


def format_chain(chain: Chain) -> str:
    """Render a chain as "word - word - ..."."""
    return " - ".join(encoded_word.word for encoded_word in chain)


def log_path(puzzle_config: PuzzleConfig, number_of_words: int) -> Path:
    """Get the log file path for a run."""
    letters = "_".join(puzzle_config.groups)
    return Path(solver_config.log_dir) / f"{letters}-{number_of_words}w.log"


def run(
    puzzle_config: PuzzleConfig,
    *,
    number_of_words: int | None = None,
    dictionary_path: str | PathLike | None = None,
    parallel: bool | None = None,
    n_workers: int | None = None,
) -> int:
    """Run the solver on the given configuration, writing a log file alongside stdout.

    Args:
        puzzle_config (PuzzleConfig): The puzzle to solve.
        number_of_words (int | None): Words per solution.  Defaults to `config.number_of_words`.
        dictionary_path: Word list to use.  Defaults to `config.dictionary_path`.
        parallel (bool | None): Whether to use worker processes.  Defaults to `config.parallel`.
        n_workers (int | None): Number of worker processes.  Defaults to `config.max_workers`.

    Returns:
        The number of solutions found.
    """
    logfile = log_path(
        puzzle_config,
        solver_config.number_of_words if number_of_words is None else number_of_words,
    )
    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            return solve_one(
                puzzle_config,
                logf=logf,
                number_of_words=number_of_words,
                dictionary_path=dictionary_path,
                parallel=parallel,
                n_workers=n_workers,
            )
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)


def solve_one(
    puzzle_config: PuzzleConfig,
    *,
    logf: TextIO,
    out: TextIO | None = None,
    number_of_words: int | None = None,
    dictionary_path: str | PathLike | None = None,
    parallel: bool | None = None,
    n_workers: int | None = None,
) -> int:
    """Solve a Letter Boxed puzzle, printing every solution.

    Args:
        puzzle_config (PuzzleConfig): The puzzle to solve.
        logf: File object to log the solving process.
        out: Stream for solutions and timing.  Defaults to stdout.
        number_of_words (int | None): Words per solution.  Defaults to `config.number_of_words`.
        dictionary_path: Word list to use.  Defaults to `config.dictionary_path`.
        parallel (bool | None): Whether to use worker processes.  Defaults to `config.parallel`.
        n_workers (int | None): Number of worker processes.  Defaults to `config.max_workers`.

    Returns:
        The number of solutions found.
    """
    if out is None:
        out = sys.stdout
    if number_of_words is None:
        number_of_words = solver_config.number_of_words
    if parallel is None:
        parallel = solver_config.parallel
    if n_workers is None:
        n_workers = solver_config.max_workers

    start_time = time()
    start_counter = perf_counter()
    start_time_str = datetime.fromtimestamp(start_time).astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=logf, flush=True)
    print(f"Puzzle: {puzzle_config}", file=logf, flush=True)
    print("Solver config:", file=logf, flush=True)
    pprint(solver_config.model_dump(), stream=logf, width=120)
    pprint(puzzle_config.to_dict(), stream=logf, width=120)
    print(f"Words per solution: {number_of_words}", file=logf, flush=True)
    print("", file=logf, flush=True)

    board = puzzle_config.board()

    valid_check_start = perf_counter()
    candidates = load_word_list(dictionary_path)
    valid_words = encode_words(board, candidates)
    valid_check_time = perf_counter() - valid_check_start
    print(f"Loaded {len(candidates)} candidate words.", file=logf, flush=True)
    print(
        f"Found {len(valid_words)} valid words in {valid_check_time:.3f} seconds",
        file=out,
        flush=True,
    )
    print(f"Found {len(valid_words)} valid words.", file=logf, flush=True)

    if parallel:
        print("Using parallel solver...", file=logf, flush=True)
        chains: Iterable[Chain] = search_parallel(
            valid_words,
            number_of_words,
            full_mask=board.full_mask,
            n_workers=n_workers,
        )
    else:
        chains = search(valid_words, number_of_words, full_mask=board.full_mask)

    permutation_start = perf_counter()
    n_solutions = 0
    for chain in chains:
        line = format_chain(chain)
        print(line, file=out, flush=True)
        print(line, file=logf, flush=True)
        n_solutions += 1
    perm_run_time = perf_counter() - permutation_start

    n_perms = count_permutations(len(valid_words), number_of_words)
    perms_per_second = int(n_perms / perm_run_time) if perm_run_time > 0 else n_perms
    stats = (
        f"Examined {n_perms} permutations in {perm_run_time:.3f} seconds "
        f"({int_comma(perms_per_second)} permutations/second)"
    )
    print(stats, file=out)
    print("", file=out)
    print(f"letterboxed -- {perf_counter() - start_counter:.3f} seconds", file=out, flush=True)

    print("", file=logf, flush=True)
    print(stats, file=logf, flush=True)
    if n_solutions:
        print(f"{n_solutions} solutions found.", file=logf, flush=True)
    else:
        print("No solution found.", file=logf, flush=True)
    print(f"Time taken: {time_str(time() - start_time)}", file=logf, flush=True)
    return n_solutions
