"""
Input readers shared by the puzzles.

Puzzle inputs come in two shapes: one record per line, or records made of
several lines separated by a blank line.
"""

from pathlib import Path
from typing import List, Union
import logging
import re

from src.core.errors import PuzzleInputError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def read_text(path: PathLike) -> str:
    """Read a whole input file."""
    input_path = Path(path)
    if not input_path.exists():
        raise FileNotFoundError(f"Puzzle input not found: {input_path}")
    return input_path.read_text(encoding="utf-8")


def read_lines(path: PathLike) -> List[str]:
    """Read non-empty lines, right-stripped."""
    lines = [line.rstrip() for line in read_text(path).splitlines()]
    lines = [line for line in lines if line]
    logger.debug(f"Read {len(lines)} lines from {path}")
    return lines


def read_ints(path: PathLike) -> List[int]:
    """Read one integer per line."""
    numbers = []
    for line in read_lines(path):
        value = line.strip()
        if not INTEGER_PATTERN.fullmatch(value):
            raise PuzzleInputError(f"Expected an integer, got {line!r}")
        numbers.append(int(value))
    return numbers


def split_records(text: str) -> List[List[str]]:
    """
    Split text into blank-line-delimited records.

    Args:
        text: Raw file contents

    Returns:
        List of records, each a list of its stripped lines
    """
    records = []
    current: List[str] = []

    for line in text.splitlines():
        stripped = line.strip()
        if stripped:
            current.append(stripped)
        elif current:
            records.append(current)
            current = []

    if current:
        records.append(current)

    return records


def read_records(path: PathLike) -> List[List[str]]:
    """Read blank-line-delimited records from a file."""
    records = split_records(read_text(path))
    logger.debug(f"Read {len(records)} records from {path}")
    return records
