"""ANSI styling for diagnostics.

Completion lines on stdout are never styled, only log records on stderr and
the `validate` report when printed to a terminal.
"""

import os
import sys
from typing import TextIO

__all__ = [
    "BOLD",
    "DIM",
    "GREEN",
    "RED",
    "RESET",
    "YELLOW",
    "LogStyles",
    "colorize",
    "make_style",
    "should_colorize",
]

_CSI = "\x1b["

RESET = _CSI + "0m"
BOLD = "1"
DIM = "2"
RED = "31"
GREEN = "32"
YELLOW = "33"


def should_colorize(stream: TextIO | None = None) -> bool:
    """Tell if `stream` (stderr by default) should receive escape codes.

    NO_COLOR wins over FORCE_COLOR, otherwise only terminals get colors.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    target = sys.stderr if stream is None else stream
    isatty = getattr(target, "isatty", None)
    return bool(isatty and isatty())


def make_style(*codes: str) -> tuple[str, str]:
    """Return the (prefix, suffix) pair applying `codes`."""
    prefix = f"{_CSI}{';'.join(codes)}m" if codes else ""
    return (prefix, RESET)


def colorize(text: str, *codes: str) -> str:
    """Wrap `text` in the escape codes for `codes`, unchanged without codes."""
    if not codes:
        return text
    prefix, suffix = make_style(*codes)
    return prefix + text + suffix


class LogStyles:
    """Styles of the log levels worth highlighting."""

    WARNING = (YELLOW, DIM)
    ERROR = (RED, DIM)
    CRITICAL = (RED, BOLD)
