"""
Configuration management.

Dataclass configuration loaded from YAML.
"""

from .solver import SolverConfig, load_solver_config, DEFAULT_SLOPES

__all__ = ["SolverConfig", "load_solver_config", "DEFAULT_SLOPES"]
