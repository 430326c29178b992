"""
Structured logging setup.

Answers go to stdout, so log records default to stderr.
"""

import logging
import sys
from typing import Optional, TextIO


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Setup structured logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string (uses default if None)
        stream: Stream for the handler (stderr if None)
    """
    if format_string is None:
        format_string = (
            "%(asctime)s - %(name)s - %(levelname)s - "
            "%(message)s"
        )

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        handlers=[logging.StreamHandler(stream or sys.stderr)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get logger for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
