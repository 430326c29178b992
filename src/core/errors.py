"""
Error types raised while reading and solving puzzle inputs.
"""


class PuzzleInputError(ValueError):
    """Raised when a puzzle input line or record is malformed."""


class InvalidTileError(PuzzleInputError):
    """Raised when a map contains a character that is neither tree nor open."""

    def __init__(self, row: int, col: int, char: str):
        self.row = row
        self.col = col
        self.char = char
        super().__init__(f"Invalid tile {char!r} at row {row}, column {col}")


class NoSolutionError(LookupError):
    """Raised when no combination of inputs satisfies the puzzle."""


class UnknownPuzzleError(KeyError):
    """Raised when asking for a day that has no registered solution."""


class ConfigError(ValueError):
    """Raised when a solver config file holds malformed values."""
