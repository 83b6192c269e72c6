"""Parsing of puzzle letters into a board configuration."""

from dataclasses import dataclass

from letterboxed.board import N_GROUPS, Board, build_board


@dataclass
class PuzzleConfig:
    """A puzzle configuration."""

    groups: tuple[str, ...]
    """The letters on each side of the box, in order."""

    def __post_init__(self) -> None:
        """Validate the sides."""
        if len(self.groups) != N_GROUPS:
            raise ValueError(
                f"Expected {N_GROUPS} sides separated by spaces, got {len(self.groups)}."
            )

        lengths = {len(group) for group in self.groups}
        if len(lengths) != 1:
            raise ValueError(f"All sides must have the same number of letters: {self.letters!r}")

        letters = "".join(self.groups)
        if not letters.isalpha():
            raise ValueError(f"Sides contain invalid characters: {self.letters!r}")

        # Each letter may only appear once on the box
        repeated = sorted({ch for ch in letters if letters.count(ch) > 1})
        if repeated:
            raise ValueError(f"Letters appear more than once: {', '.join(repeated)}")

    def __str__(self) -> str:
        """Return a string representation of the Config."""
        return f"{self.letters} ({N_GROUPS}x{self.group_size})"

    @property
    def letters(self) -> str:
        """The sides as a single space-separated string."""
        return " ".join(self.groups)

    @property
    def group_size(self) -> int:
        """Number of letters on each side."""
        return len(self.groups[0])

    def board(self) -> Board:
        """Build the board for this puzzle."""
        return build_board(self.groups, self.group_size)

    def to_dict(self) -> dict:
        """Return a dictionary representation of the Config for logging."""
        return {
            "letters": self.letters,
            "groups": list(self.groups),
            "group_size": self.group_size,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PuzzleConfig":
        """Create a Config instance from a dictionary representation."""
        return cls(groups=tuple(data["groups"]))

    @classmethod
    def from_letters(cls, letters: str) -> "PuzzleConfig":
        """Create a Config from a string such as "abc def ghi jkl".

        The order of the sides, and of the letters on each side, does not matter for the
        set of solutions.
        """
        return cls(groups=tuple(clean(letters).split(" ")))


def clean(letters: str) -> str:
    """Clean the letters string by collapsing whitespace and converting to lowercase."""
    return " ".join(letters.split()).lower()
