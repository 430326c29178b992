"""Running puzzle solutions and reporting their answers."""

from .runner import (
    SOLUTIONS,
    PuzzleSolution,
    PuzzleRunner,
    PartResult,
    DayResult,
    RunReport,
    get_solution,
)
from .reporting import ReportGenerator

__all__ = [
    "SOLUTIONS",
    "PuzzleSolution",
    "PuzzleRunner",
    "PartResult",
    "DayResult",
    "RunReport",
    "get_solution",
    "ReportGenerator",
]
