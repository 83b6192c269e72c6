"""Letter Boxed Puzzle Solver.

Finds chains of dictionary words that use every letter on the sides of the box, where
each word starts with the last letter of the previous word and consecutive letters in a
word never come from the same side.
"""

import argparse

from .board import BoardConstructionError, EncodedWord, build_board, encode_word
from .puzzle_config import PuzzleConfig
from .search import search
from .solver.config import config as solver_config
from .solver.parallel import search_parallel
from .solver.solver import run

__version__ = "0.6.0"

__all__ = [
    "BoardConstructionError",
    "EncodedWord",
    "build_board",
    "encode_word",
    "main",
    "search",
    "search_parallel",
]


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="letterboxed",
        description="Gives you solutions to the letter boxed puzzle",
    )
    parser.add_argument(
        "letters",
        help=(
            'The letters on each side of the box, in quotes and space separated, e.g. '
            '"abc def ghi jkl".  Order of sides and of letters on sides does not matter.'
        ),
    )
    parser.add_argument(
        "-n",
        "--number-of-words",
        type=int,
        default=solver_config.number_of_words,
        help="How many words in your solutions. More than 2 could take a while to run.",
    )
    parser.add_argument(
        "-d",
        "--dictionary-file",
        default=solver_config.dictionary_path,
        help="Path to file of words that should be used",
    )
    parser.add_argument(
        "--parallel",
        action=argparse.BooleanOptionalAction,
        default=solver_config.parallel,
        help="Split the search across worker processes",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=solver_config.max_workers,
        help="Number of worker processes (default: CPU count minus one)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the Letter Boxed solver."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        puzzle_config = PuzzleConfig.from_letters(args.letters)
        run(
            puzzle_config,
            number_of_words=args.number_of_words,
            dictionary_path=args.dictionary_file,
            parallel=args.parallel,
            n_workers=args.workers,
        )
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))
