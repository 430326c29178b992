"""
Core domain types - no external dependencies.

Record types, configuration, and errors shared by every puzzle.
"""

__version__ = "0.1.0"
