"""Completion resolution for the yarn command line.

This package provides:
- input: Splitting the raw line into typed words and the word under the cursor
- matcher: Subcommand and option lookups in the command table
- emitter: Prefix filtering and colon handling
- engine: The Completer tying them together
"""

from __future__ import annotations

from .emitter import emit, emit_all
from .engine import Completer, resolve
from .input import TypedInput, parse_input

__all__ = [
    "Completer",
    "TypedInput",
    "emit",
    "emit_all",
    "parse_input",
    "resolve",
]
