"""Advent of Code 2020 puzzle solutions, one module per day."""

from . import report_repair, password_philosophy, toboggan_trajectory, passport_processing
from .input_reader import read_text, read_lines, read_ints, read_records, split_records

__all__ = [
    "report_repair",
    "password_philosophy",
    "toboggan_trajectory",
    "passport_processing",
    "read_text",
    "read_lines",
    "read_ints",
    "read_records",
    "split_records",
]
