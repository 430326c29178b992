"""
Core data types for puzzle inputs.

Defines the records parsed out of the line-oriented puzzle files.
"""

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class PasswordRecord:
    """
    A password and the policy it was stored under.

    The two numbers mean min/max occurrences under the count policy and
    1-based positions under the position policy.
    """
    first: int
    second: int
    letter: str
    password: str

    def __post_init__(self):
        """Validate password record."""
        if len(self.letter) != 1:
            raise ValueError("letter must be a single character")
        if self.first < 1 or self.second < 1:
            raise ValueError("policy numbers must be positive")


class Slope(NamedTuple):
    """Steps taken right and down on each move across a map."""
    right: int
    down: int
