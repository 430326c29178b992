"""
PuzzleRunner - Load a day's input and run its solution parts.

Each day registers how to load its input and how to solve each part. The
runner resolves input paths from the solver config, times every part, and
collects the answers into a report.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence
import logging
import time

from src.core.config.solver import SolverConfig
from src.core.errors import UnknownPuzzleError
from src.puzzles import (
    passport_processing,
    password_philosophy,
    report_repair,
    toboggan_trajectory,
)
from src.puzzles.input_reader import read_ints, read_lines, read_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PuzzleSolution:
    """How to load and solve one day."""

    day: int
    title: str
    load: Callable[[Path], Any]
    part1: Callable[[Any, SolverConfig], Any]
    part2: Callable[[Any, SolverConfig], Any]

    def solve(self, part: int, data: Any, config: SolverConfig) -> Any:
        if part == 1:
            return self.part1(data, config)
        if part == 2:
            return self.part2(data, config)
        raise ValueError(f"Part must be 1 or 2, got {part}")


SOLUTIONS: Dict[int, PuzzleSolution] = {
    solution.day: solution
    for solution in [
        PuzzleSolution(
            day=1,
            title="Report Repair",
            load=read_ints,
            part1=lambda numbers, config: report_repair.solve_part1(numbers, config.expense_target),
            part2=lambda numbers, config: report_repair.solve_part2(numbers, config.expense_target),
        ),
        PuzzleSolution(
            day=2,
            title="Password Philosophy",
            load=lambda path: password_philosophy.parse_records(read_lines(path)),
            part1=lambda records, config: password_philosophy.solve_part1(records),
            part2=lambda records, config: password_philosophy.solve_part2(records),
        ),
        PuzzleSolution(
            day=3,
            title="Toboggan Trajectory",
            load=lambda path: toboggan_trajectory.parse_map(read_lines(path)),
            part1=lambda tree_map, config: toboggan_trajectory.solve_part1(
                tree_map, config.trajectory_slope
            ),
            part2=lambda tree_map, config: toboggan_trajectory.solve_part2(tree_map, config.slopes),
        ),
        PuzzleSolution(
            day=4,
            title="Passport Processing",
            load=lambda path: passport_processing.parse_passports(read_text(path)),
            part1=lambda passports, config: passport_processing.solve_part1(passports),
            part2=lambda passports, config: passport_processing.solve_part2(passports),
        ),
    ]
}


def get_solution(day: int) -> PuzzleSolution:
    """Look up the registered solution for a day."""
    if day not in SOLUTIONS:
        raise UnknownPuzzleError(f"No solution registered for day {day}")
    return SOLUTIONS[day]


@dataclass
class PartResult:
    """Answer for one part of a day."""

    part: int
    answer: Any
    elapsed_ms: float

    def to_dict(self) -> Dict:
        return {
            "part": self.part,
            "answer": self.answer,
            "elapsed_ms": round(self.elapsed_ms, 3),
        }


@dataclass
class DayResult:
    """Answers for every requested part of a day."""

    day: int
    title: str
    input_path: str
    parts: List[PartResult] = field(default_factory=list)

    def answer(self, part: int) -> Any:
        for result in self.parts:
            if result.part == part:
                return result.answer
        raise KeyError(f"Day {self.day} has no result for part {part}")

    def to_dict(self) -> Dict:
        return {
            "day": self.day,
            "title": self.title,
            "input_path": self.input_path,
            "parts": [p.to_dict() for p in self.parts],
        }


@dataclass
class RunReport:
    """Results of one run over one or more days."""

    timestamp: str
    days: List[DayResult] = field(default_factory=list)

    @property
    def total_elapsed_ms(self) -> float:
        return sum(p.elapsed_ms for d in self.days for p in d.parts)

    def to_dict(self) -> Dict:
        return {
            "timestamp": self.timestamp,
            "total_elapsed_ms": round(self.total_elapsed_ms, 3),
            "days": [d.to_dict() for d in self.days],
        }


class PuzzleRunner:
    """Run registered puzzle solutions against their inputs."""

    def __init__(self, config: Optional[SolverConfig] = None):
        """
        Initialize the runner.

        Args:
            config: Solver configuration (defaults if None)
        """
        self.config = config or SolverConfig()

    def run_day(
        self,
        day: int,
        input_path: Optional[str] = None,
        parts: Sequence[int] = (1, 2),
    ) -> DayResult:
        """
        Solve the requested parts of one day.

        Args:
            day: Puzzle day
            input_path: Input file (defaults to the config's dayNN.txt)
            parts: Which parts to solve

        Returns:
            DayResult with one PartResult per part
        """
        solution = get_solution(day)
        path = Path(input_path) if input_path else self.config.input_path(day)

        logger.info(f"Day {day} ({solution.title}): loading {path}")
        data = solution.load(path)

        result = DayResult(day=day, title=solution.title, input_path=str(path))
        for part in parts:
            start = time.perf_counter()
            answer = solution.solve(part, data, self.config)
            elapsed_ms = (time.perf_counter() - start) * 1000

            logger.info(f"Day {day} part {part}: {answer} ({elapsed_ms:.2f} ms)")
            result.parts.append(PartResult(part=part, answer=answer, elapsed_ms=elapsed_ms))

        return result

    def run_all(
        self,
        days: Optional[Iterable[int]] = None,
        parts: Sequence[int] = (1, 2),
    ) -> RunReport:
        """Solve several days, all registered days if ``days`` is None."""
        report = RunReport(timestamp=datetime.now().isoformat())
        for day in sorted(days) if days is not None else sorted(SOLUTIONS):
            report.days.append(self.run_day(day, parts=parts))
        return report
