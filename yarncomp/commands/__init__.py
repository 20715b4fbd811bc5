"""Command table handling for yarncomp.

This package provides:
- parsing: Command path splitting and joining
- models: The immutable CommandTable
- data: The built-in yarn command/option table
"""

from .data import PACKAGE_COMMANDS, YARN_COMMANDS, YARN_TABLE
from .models import CommandTable
from .parsing import join_path, split_path

__all__ = [
    "PACKAGE_COMMANDS",
    "YARN_COMMANDS",
    "YARN_TABLE",
    "CommandTable",
    "join_path",
    "split_path",
]
