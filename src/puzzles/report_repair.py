"""
Day 1: Report Repair.

Find the expense report entries that sum to a target and multiply them.
Part 1 looks for a pair, part 2 for a triplet.
"""

from typing import Iterable, List, Optional, Sequence, Tuple
import logging
import math

from src.core.errors import NoSolutionError

logger = logging.getLogger(__name__)

EXPENSE_TARGET = 2020


def find_pair_that_adds_to(
    numbers: Iterable[int],
    target: int,
) -> Optional[Tuple[int, int]]:
    """
    Find two entries that sum to ``target``.

    Sorts largest first, then walks one pointer down from the largest value
    and one up from the smallest until they meet.

    Args:
        numbers: Entries to search
        target: Sum to look for

    Returns:
        ``(larger, smaller)`` or None if no pair exists
    """
    values = sorted(numbers, reverse=True)
    high, low = 0, len(values) - 1

    while high < low:
        total = values[high] + values[low]
        if total == target:
            return values[high], values[low]
        if total > target:
            high += 1
        else:
            low -= 1

    return None


def find_triplet_that_adds_to(
    numbers: Sequence[int],
    target: int,
) -> Optional[Tuple[int, int, int]]:
    """Find three entries summing to ``target`` by repeated pair search."""
    for i, first in enumerate(numbers):
        pair = find_pair_that_adds_to(numbers[i + 1:], target - first)
        if pair is not None:
            return (first, *pair)
    return None


def find_triplet_with_set(
    numbers: Sequence[int],
    target: int,
) -> Optional[Tuple[int, int, int]]:
    """Find three entries summing to ``target`` using set membership."""
    for i, first in enumerate(numbers):
        seen = set()
        for third in numbers[i + 1:]:
            second = target - first - third
            if second in seen:
                return first, second, third
            seen.add(third)
    return None


def solve_part1(numbers: List[int], target: int = EXPENSE_TARGET) -> int:
    """Multiply the two entries that sum to ``target``."""
    pair = find_pair_that_adds_to(numbers, target)
    if pair is None:
        raise NoSolutionError(f"No two entries sum to {target}")
    logger.debug(f"Pair summing to {target}: {pair}")
    return math.prod(pair)


def solve_part2(numbers: List[int], target: int = EXPENSE_TARGET) -> int:
    """Multiply the three entries that sum to ``target``."""
    triplet = find_triplet_that_adds_to(numbers, target)
    if triplet is None:
        raise NoSolutionError(f"No three entries sum to {target}")
    logger.debug(f"Triplet summing to {target}: {triplet}")
    return math.prod(triplet)
