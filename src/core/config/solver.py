"""
Solver configuration.

Where puzzle inputs live and the per-day parameters the puzzles ask for.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import logging

import yaml

from ..data.types import Slope
from ..errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_SLOPES = [
    Slope(1, 1),
    Slope(3, 1),
    Slope(5, 1),
    Slope(7, 1),
    Slope(1, 2),
]


@dataclass
class SolverConfig:
    """Settings shared by the runner and the CLI."""
    input_dir: str = "inputs"
    expense_target: int = 2020
    trajectory_slope: Slope = Slope(3, 1)
    slopes: List[Slope] = field(default_factory=lambda: list(DEFAULT_SLOPES))
    log_level: str = "INFO"

    def input_path(self, day: int) -> Path:
        """Default input file for a day, e.g. inputs/day01.txt."""
        return Path(self.input_dir) / f"day{day:02d}.txt"

    def validate(self) -> None:
        """Validate configuration."""
        assert self.expense_target > 0, "expense_target must be positive"
        assert len(self.slopes) > 0, "must define at least one slope"
        for slope in [self.trajectory_slope, *self.slopes]:
            assert slope.right > 0 and slope.down > 0, f"slope steps must be positive: {slope}"
        assert str(self.log_level).upper() in ("DEBUG", "INFO", "WARNING", "ERROR"), (
            f"unknown log level: {self.log_level}"
        )


def _parse_slope(value) -> Slope:
    """Accept [right, down] lists or {right: .., down: ..} mappings."""
    try:
        if isinstance(value, dict):
            return Slope(int(value["right"]), int(value["down"]))
        right, down = value
        return Slope(int(right), int(down))
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigError(f"Invalid slope {value!r}: expected [right, down]") from e


def load_solver_config(config_path: Optional[str] = None) -> SolverConfig:
    """
    Load solver configuration from a YAML file.

    Args:
        config_path: Path to YAML configuration file (defaults if None)

    Returns:
        SolverConfig instance

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file is not valid YAML or holds bad values
    """
    if config_path is None:
        return SolverConfig()

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path} must hold a mapping, got {type(data).__name__}")

    defaults = SolverConfig()
    slopes = data.get("slopes")
    if slopes is not None and not isinstance(slopes, list):
        raise ConfigError(f"slopes must be a list, got {slopes!r}")

    try:
        expense_target = int(data.get("expense_target", defaults.expense_target))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"expense_target must be an integer: {e}") from e

    config = SolverConfig(
        input_dir=str(data.get("input_dir", defaults.input_dir)),
        expense_target=expense_target,
        trajectory_slope=(
            _parse_slope(data["trajectory_slope"])
            if "trajectory_slope" in data
            else defaults.trajectory_slope
        ),
        slopes=[_parse_slope(s) for s in slopes] if slopes else defaults.slopes,
        log_level=data.get("log_level", defaults.log_level),
    )

    try:
        config.validate()
    except AssertionError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e

    logger.debug(f"Loaded solver config from {path}")
    return config
