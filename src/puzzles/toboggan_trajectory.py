"""
Day 3: Toboggan Trajectory.

The map is a grid of open squares (``.``) and trees (``#``) that repeats to
the right forever. Count the trees hit on a fixed slope from the top-left.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence
import logging
import math

import numpy as np

from src.core.config.solver import DEFAULT_SLOPES
from src.core.data.types import Slope
from src.core.errors import InvalidTileError, PuzzleInputError

logger = logging.getLogger(__name__)

TREE = "#"
OPEN = "."


@dataclass
class TreeMap:
    """Boolean grid where True marks a tree."""

    grid: np.ndarray

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])

    def is_tree(self, row: int, col: int) -> bool:
        """Whether (row, col) holds a tree; columns wrap around."""
        return bool(self.grid[row, col % self.width])


def parse_map(lines: Sequence[str]) -> TreeMap:
    """
    Parse map rows into a TreeMap.

    Args:
        lines: Rows of ``#`` and ``.`` characters, all the same width

    Returns:
        TreeMap for the rows

    Raises:
        InvalidTileError: On the first character that is not a tile
        PuzzleInputError: If the map is empty or rows differ in width
    """
    rows: List[List[bool]] = []
    width = None

    for row_index, line in enumerate(lines):
        row = []
        for col_index, char in enumerate(line):
            if char == TREE:
                row.append(True)
            elif char == OPEN:
                row.append(False)
            else:
                raise InvalidTileError(row_index, col_index, char)

        if width is None:
            width = len(row)
        elif len(row) != width:
            raise PuzzleInputError(
                f"Row {row_index} has width {len(row)}, expected {width}"
            )
        rows.append(row)

    if not rows or not width:
        raise PuzzleInputError("Map has no tiles")

    logger.debug(f"Parsed {len(rows)}x{width} map")
    return TreeMap(grid=np.array(rows, dtype=bool))


def count_trees(tree_map: TreeMap, right: int, down: int) -> int:
    """
    Count trees hit moving ``right`` and ``down`` each step.

    The starting square is not counted; the run ends once the row index
    goes past the bottom of the map.
    """
    if right <= 0 or down <= 0:
        raise ValueError(f"Slope steps must be positive, got right={right}, down={down}")

    rows = np.arange(down, tree_map.height, down)
    cols = (rows // down * right) % tree_map.width
    return int(tree_map.grid[rows, cols].sum())


def multiply_tree_counts(tree_map: TreeMap, slopes: Iterable[Slope]) -> int:
    """Product of the tree counts over every slope."""
    counts = []
    for right, down in slopes:
        trees = count_trees(tree_map, right, down)
        logger.debug(f"Slope right {right}, down {down}: {trees} trees")
        counts.append(trees)
    return math.prod(counts)


def solve_part1(tree_map: TreeMap, slope: Slope = Slope(3, 1)) -> int:
    return count_trees(tree_map, slope.right, slope.down)


def solve_part2(tree_map: TreeMap, slopes: Iterable[Slope] = tuple(DEFAULT_SLOPES)) -> int:
    return multiply_tree_counts(tree_map, slopes)
