"""
Data structures for parsed puzzle inputs.
"""

from .types import PasswordRecord, Slope

__all__ = [
    "PasswordRecord",
    "Slope",
]
