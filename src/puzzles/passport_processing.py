"""
Day 4: Passport Processing.

Passports are blank-line-separated groups of ``key:value`` fields. Part 1
only checks that every required field is present; part 2 also checks each
value against the rule table below.
"""

from typing import Callable, Dict, Iterable, List
import logging
import re

from src.core.errors import PuzzleInputError
from .input_reader import split_records

logger = logging.getLogger(__name__)

Passport = Dict[str, str]

REQUIRED_FIELDS = frozenset({"byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid"})
OPTIONAL_FIELDS = frozenset({"cid"})

EYE_COLORS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})
HEIGHT_RANGES = {"cm": (150, 193), "in": (59, 76)}


def _year_between(low: int, high: int) -> Callable[[str], bool]:
    def check(value: str) -> bool:
        return bool(re.fullmatch(r"[0-9]{4}", value)) and low <= int(value) <= high

    return check


def _valid_height(value: str) -> bool:
    match = re.fullmatch(r"([0-9]+)(cm|in)", value)
    if not match:
        return False
    low, high = HEIGHT_RANGES[match.group(2)]
    return low <= int(match.group(1)) <= high


FIELD_RULES: Dict[str, Callable[[str], bool]] = {
    "byr": _year_between(1920, 2002),
    "iyr": _year_between(2010, 2020),
    "eyr": _year_between(2020, 2030),
    "hgt": _valid_height,
    "hcl": lambda value: bool(re.fullmatch(r"#[0-9a-f]{6}", value)),
    "ecl": lambda value: value in EYE_COLORS,
    "pid": lambda value: bool(re.fullmatch(r"[0-9]{9}", value)),
    "cid": lambda value: True,
}


def parse_passport(block: Iterable[str]) -> Passport:
    """
    Parse one passport record.

    Args:
        block: Lines of the record; fields are separated by any whitespace

    Returns:
        Mapping of field name to value
    """
    passport: Passport = {}
    for line in block:
        for token in line.split():
            key, sep, value = token.partition(":")
            if not sep or not key:
                raise PuzzleInputError(f"Malformed passport field: {token!r}")
            passport[key] = value
    return passport


def parse_passports(text: str) -> List[Passport]:
    """Parse every passport in a batch file's contents."""
    passports = [parse_passport(block) for block in split_records(text)]
    logger.debug(f"Parsed {len(passports)} passports")
    return passports


def has_required_fields(passport: Passport) -> bool:
    return REQUIRED_FIELDS <= passport.keys()


def is_valid_field(name: str, value: str) -> bool:
    """Check a value against its rule. Fields without a rule pass."""
    rule = FIELD_RULES.get(name)
    return rule is None or rule(value)


def invalid_fields(passport: Passport) -> List[str]:
    """Names of fields that are missing or hold a bad value, sorted."""
    missing = REQUIRED_FIELDS - passport.keys()
    bad = {
        name for name, value in passport.items()
        if not is_valid_field(name, value)
    }
    return sorted(missing | bad)


def has_valid_fields(passport: Passport) -> bool:
    return not invalid_fields(passport)


def solve_part1(passports: List[Passport]) -> int:
    return sum(1 for passport in passports if has_required_fields(passport))


def solve_part2(passports: List[Passport]) -> int:
    valid = 0
    for index, passport in enumerate(passports):
        problems = invalid_fields(passport)
        if problems:
            logger.debug(f"Passport {index} rejected: {', '.join(problems)}")
        else:
            valid += 1
    return valid
