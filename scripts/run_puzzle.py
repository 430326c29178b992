#!/usr/bin/env python3
"""
Run the Advent of Code 2020 solutions.

Solves each requested day from its input file and prints one answer per
part. See ``--help`` for options.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.solving.cli import main

if __name__ == "__main__":
    sys.exit(main())
