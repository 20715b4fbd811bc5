"""Matching typed words against the command table.

Two independent lookups run on every completion:

- subcommand names: remainders of the commands extending the words typed so far
- options: options of the deepest command already typed in full, plus the
  script or dependency names it accepts
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ..commands.parsing import is_path_prefix, join_path
from ..models import CommandPath, CompletionError

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..commands.models import CommandTable
    from ..manifest import Manifest
    from .input import TypedInput

__all__ = [
    "command_candidates",
    "in_script_arguments",
    "qualifying_commands",
    "select_current_command",
    "subcommand_candidates",
]

_COMPLETED_WORD = re.compile(r"(\S+)\s")


def subcommand_candidates(table: CommandTable, typed: TypedInput) -> list[str]:
    """Return the remaining words of every command extending the typed words.

    Only fully typed words are compared here, the word in progress is left to
    the emitter prefix filter. "config " gives "get", "set", "unset", while
    "confi" gives "config", "config get", ...

    Args:
        table: Known commands
        typed: Parsed command line

    Returns:
        Candidates in table order
    """
    completed = typed.completed_words
    return [
        join_path(path[len(completed) :])
        for path in table.paths()
        if len(path) > len(completed) and is_path_prefix(completed, path)
    ]


def qualifying_commands(table: CommandTable, command_portion: str) -> list[CommandPath]:
    """Return the commands typed in full, followed by a space, in table order."""
    return [path for path in table.paths() if command_portion.startswith(join_path(path) + " ")]


def select_current_command(table: CommandTable, command_portion: str) -> CommandPath | None:
    """Pick the most specific command typed in full.

    "config set --home" qualifies both `config` and `config set`, the longer one wins.

    Raises:
        CompletionError: if qualifying commands do not extend one another
    """
    qualifying = sorted(qualifying_commands(table, command_portion), key=len, reverse=True)
    if not qualifying:
        return None
    current = qualifying[0]
    for other in qualifying[1:]:
        if not is_path_prefix(other, current):
            msg = f"Ambiguous commands for {command_portion!r}: {join_path(current)!r} and {join_path(other)!r}"
            raise CompletionError(msg)
    return current


def in_script_arguments(table: CommandTable, current: CommandPath, command_portion: str) -> bool:
    """Tell if the user already picked a script and is typing its arguments.

    True for "run build " or "run --inspect build x", False for "run " or "run --inspect ".
    """
    if not table.is_run_command(current):
        return False
    rest = command_portion[len(join_path(current)) + 1 :]
    return any(not word.startswith("-") for word in _COMPLETED_WORD.findall(rest))


def command_candidates(table: CommandTable, current: CommandPath, manifest: Callable[[], Manifest]) -> list[str]:
    """Return the options of `current`, then the names it accepts as argument.

    Args:
        table: Known commands
        current: Command typed in full
        manifest: Returns the local manifest, only called when names are needed

    Returns:
        Candidates: options first, then script names or dependency names
    """
    candidates = list(table.lookup(current) or ())
    if table.is_run_command(current):
        candidates.extend(manifest().script_names())
    if table.takes_package_names(current):
        candidates.extend(manifest().package_names())
    return candidates
