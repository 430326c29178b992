"""
Day 2: Password Philosophy.

Each line holds a policy and a password, e.g. ``1-3 a: abcde``. Part 1 reads
the numbers as a min/max count of the letter, part 2 as two 1-based
positions of which exactly one must hold the letter.
"""

from typing import Callable, Iterable, List
import logging
import re

from src.core.data.types import PasswordRecord
from src.core.errors import PuzzleInputError

logger = logging.getLogger(__name__)

RECORD_PATTERN = re.compile(r"^([0-9]+)-([0-9]+) (\S): (\S*)$")

Policy = Callable[[PasswordRecord], bool]


def parse_record(line: str) -> PasswordRecord:
    """Parse a ``first-second letter: password`` line."""
    match = RECORD_PATTERN.match(line.strip())
    if not match:
        raise PuzzleInputError(f"Malformed password line: {line!r}")

    first, second, letter, password = match.groups()
    try:
        return PasswordRecord(int(first), int(second), letter, password)
    except ValueError as e:
        raise PuzzleInputError(f"Malformed password line: {line!r} ({e})") from e


def parse_records(lines: Iterable[str]) -> List[PasswordRecord]:
    return [parse_record(line) for line in lines]


def is_valid_by_count(record: PasswordRecord) -> bool:
    """The letter occurs between ``first`` and ``second`` times, inclusive."""
    return record.first <= record.password.count(record.letter) <= record.second


def is_valid_by_position(record: PasswordRecord) -> bool:
    """Exactly one of the two 1-based positions holds the letter."""

    def holds(position: int) -> bool:
        return position <= len(record.password) and record.password[position - 1] == record.letter

    return holds(record.first) != holds(record.second)


def count_valid(records: Iterable[PasswordRecord], policy: Policy) -> int:
    return sum(1 for record in records if policy(record))


def solve_part1(records: List[PasswordRecord]) -> int:
    valid = count_valid(records, is_valid_by_count)
    logger.debug(f"{valid}/{len(records)} passwords valid by count")
    return valid


def solve_part2(records: List[PasswordRecord]) -> int:
    valid = count_valid(records, is_valid_by_position)
    logger.debug(f"{valid}/{len(records)} passwords valid by position")
    return valid
