"""Command path parsing utilities."""

from __future__ import annotations

from ..models import CommandPath

__all__ = ["is_path_prefix", "join_path", "split_path"]


def split_path(cmd: str) -> CommandPath:
    """Split a space-separated command into its path words.

    Extra whitespace is ignored: "config  set" -> ("config", "set")

    Args:
        cmd: Command as written in the table or in the config file

    Returns:
        The command path
    """
    return tuple(cmd.split())


def join_path(path: CommandPath) -> str:
    """Join path words back with single spaces."""
    return " ".join(path)


def is_path_prefix(prefix: CommandPath, path: CommandPath) -> bool:
    """Tell if `prefix` equals the first words of `path` (or all of it)."""
    return path[: len(prefix)] == prefix
