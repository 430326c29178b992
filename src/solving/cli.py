"""
Puzzle CLI - Command-line interface for running the puzzle solutions.
"""

import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional

from src.core.config.solver import load_solver_config
from src.core.errors import (
    ConfigError,
    NoSolutionError,
    PuzzleInputError,
    UnknownPuzzleError,
)
from src.infrastructure.logging import setup_logging
from .reporting import ReportGenerator
from .runner import SOLUTIONS, PuzzleRunner, RunReport

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Advent of Code 2020 solutions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve every day from inputs/dayNN.txt
  python -m src.solving.cli

  # Solve day 3 part 1 from a specific file
  python -m src.solving.cli --day 3 --part 1 --input ./day03.txt

  # Write JSON and Markdown reports
  python -m src.solving.cli --config configs/solver.yaml --output ./reports
""",
    )

    parser.add_argument(
        "--day",
        type=int,
        action="append",
        choices=sorted(SOLUTIONS),
        help="Day to solve (repeatable, default: all)",
    )
    parser.add_argument(
        "--part",
        type=int,
        choices=[1, 2],
        help="Only solve this part (default: both)",
    )
    parser.add_argument(
        "--input",
        help="Input file (only with a single --day)",
    )
    parser.add_argument(
        "--config",
        help="Path to solver YAML config",
    )
    parser.add_argument(
        "--output",
        help="Directory for JSON and Markdown reports (optional)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from config)",
    )

    args = parser.parse_args(argv)

    if args.input and (not args.day or len(args.day) != 1):
        parser.error("--input requires exactly one --day")

    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the puzzle CLI."""
    args = parse_args(argv)

    try:
        config = load_solver_config(args.config)
    except (FileNotFoundError, ConfigError) as e:
        setup_logging(args.log_level or "INFO")
        logger.error(str(e))
        return 1

    setup_logging(args.log_level or config.log_level)

    parts = (args.part,) if args.part else (1, 2)
    runner = PuzzleRunner(config)

    try:
        if args.input:
            report = RunReport(timestamp=datetime.now().isoformat())
            report.days.append(runner.run_day(args.day[0], args.input, parts))
        else:
            report = runner.run_all(args.day, parts)
    except (FileNotFoundError, PuzzleInputError, NoSolutionError, UnknownPuzzleError) as e:
        logger.error(f"Failed to solve: {e}")
        return 1

    for day in report.days:
        for part in day.parts:
            print(f"Day {day.day} part {part.part}: {part.answer}")

    if args.output:
        paths = ReportGenerator(args.output).generate_all(report)
        logger.info(f"Reports saved to: {', '.join(str(p) for p in paths.values())}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
