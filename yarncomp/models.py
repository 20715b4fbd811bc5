"""Shared types: errors, exit codes and the aliases used by the command table."""

from enum import IntEnum

__all__ = [
    "CommandPath",
    "CompletionError",
    "ExitCode",
    "OptionSet",
]

CommandPath = tuple[str, ...]
OptionSet = tuple[str, ...]


class CompletionError(Exception):
    """Raised for invalid configuration or a broken table invariant.

    Never escapes the CLI in completion mode: the boundary logs it and
    prints no completion at all.
    """


class ExitCode(IntEnum):
    """Standard exit codes for the yarncomp CLI."""

    SUCCESS = 0
    USAGE_ERROR = 1  # Unknown command, invalid arguments or invalid config
    ENV_ERROR = 2  # Requested config file not found
