"""Classes and functions for representing the game board and encoding words against it."""

from collections.abc import Sequence
from typing import NamedTuple

N_GROUPS = 4
"""Number of letter groups (sides of the box) on a board."""

SUPPORTED_GROUP_SIZES = (3, 4)
"""Allowed number of letters per side."""

MAX_POSITIONS = 16
"""Hard ceiling on the number of board positions (one bit per position in a 16-bit mask)."""

MAX_MASK = (1 << MAX_POSITIONS) - 1
"""Coverage mask of a full 4x4 board."""


class BoardConstructionError(ValueError):
    """Raised when the letters supplied do not form a valid board."""


class EncodedWord(NamedTuple):
    """A word realized on a board.

    Pickleable, so that it can be passed to worker processes.
    """

    start: int
    """Board position of the first letter."""

    end: int
    """Board position of the last letter."""

    spots_filled: int
    """Bitmask of visited board positions (bit `i` set if position `i` is used)."""

    word: str = ""
    """The original word, kept for reporting."""

    board_mask: int = MAX_MASK
    """Coverage mask of the board the word was encoded on (`Board.full_mask`)."""


class Board:
    """Store the sides of a Letter Boxed puzzle as a flat sequence of positions.

    Position `p` is letter `p % group_size` of group `p // group_size`.
    """

    def __init__(self, groups: Sequence[Sequence[str]], group_size: int | None = None) -> None:
        if len(groups) != N_GROUPS:
            raise BoardConstructionError(f"Expected {N_GROUPS} groups, got {len(groups)}.")
        if group_size is None:
            group_size = len(groups[0])
        if group_size not in SUPPORTED_GROUP_SIZES:
            raise BoardConstructionError(
                f"Unsupported group size {group_size}; expected one of {SUPPORTED_GROUP_SIZES}."
            )
        for idx, group in enumerate(groups):
            if len(group) != group_size:
                raise BoardConstructionError(
                    f"Group {idx} has {len(group)} letters, expected {group_size}."
                )

        self.groups: tuple[tuple[str, ...], ...] = tuple(tuple(group) for group in groups)
        self.group_size = group_size
        self.letters: tuple[str, ...] = tuple(ch for group in self.groups for ch in group)

        n_letters = len(self.letters)
        self.n_positions: int = n_letters
        """Number of positions on the board."""

        self.full_mask: int = (1 << n_letters) - 1
        """Coverage mask with every board position set."""

        # Lookup from letter to (group, position).  A letter present on several sides
        # resolves to its first occurrence, scanning groups in order.
        self._lookup: dict[str, tuple[int, int]] = {}
        for position, ch in enumerate(self.letters):
            self._lookup.setdefault(ch, (position // group_size, position))

    def __str__(self) -> str:
        """Returns the sides separated by spaces."""
        return " ".join("".join(group) for group in self.groups)

    def __repr__(self) -> str:
        return f"Board({str(self)!r})"

    def letter_at(self, position: int) -> str:
        """Get the letter at a board position."""
        return self.letters[position]

    def group_of(self, position: int) -> int:
        """Get the group (side) that a board position belongs to."""
        return position // self.group_size

    def locate(self, ch: str) -> tuple[int, int] | None:
        """Return `(group, position)` for the first occurrence of `ch`, or None."""
        return self._lookup.get(ch)

    def walk(self, word: str) -> list[int] | None:
        """Get the board positions visited when spelling `word`.

        Returns None if a letter is not on the board, or if two consecutive letters
        come from the same side.
        """
        positions: list[int] = []
        prev_group = -1
        for ch in word:
            found = self._lookup.get(ch)
            if found is None:
                return None
            group, position = found
            if group == prev_group:
                return None
            positions.append(position)
            prev_group = group
        return positions

    def encode_word(self, word: str) -> EncodedWord | None:
        """Encode a word as (start, end, spots_filled), or None if it cannot be played."""
        positions = self.walk(word)
        if not positions:
            return None
        spots_filled = 0
        for position in positions:
            spots_filled |= 1 << position
        return EncodedWord(positions[0], positions[-1], spots_filled, word, self.full_mask)


def build_board(groups: Sequence[Sequence[str]], group_size: int | None = None) -> Board:
    """Build a board from its sides.

    Args:
        groups: The four sides of the box, in order.  Each side is a string (or sequence of
            single characters).  Letters are stored as given.
        group_size: Expected letters per side.  Defaults to the length of the first side.

    Raises:
        BoardConstructionError: If the sides do not add up to a board.
    """
    return Board(groups, group_size)


def encode_word(board: Board, word: str) -> EncodedWord | None:
    """Encode `word` against `board`.  See `Board.encode_word`."""
    return board.encode_word(word)
