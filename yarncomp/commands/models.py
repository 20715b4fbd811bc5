"""The immutable command table."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from ..constants import DEFAULT_RUN_COMMAND
from ..models import CommandPath, CompletionError, OptionSet
from .parsing import join_path, split_path

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

__all__ = ["CommandTable"]


def _compile(mapping: Mapping[str, Iterable[str]]) -> dict[CommandPath, OptionSet]:
    """Turn `{"config set": ["--home"]}` style data into path keyed entries.

    Raises:
        CompletionError: if a key is blank or two keys split to the same path
    """
    entries: dict[CommandPath, OptionSet] = {}
    for name, options in mapping.items():
        path = split_path(name)
        if not path:
            msg = f"Empty command name in table: {name!r}"
            raise CompletionError(msg)
        if path in entries:
            msg = f"Duplicate command in table: {join_path(path)!r}"
            raise CompletionError(msg)
        entries[path] = tuple(options)
    return entries


@dataclass(frozen=True)
class CommandTable:
    """Mapping from command paths to the options valid for that exact path.

    Also knows which path runs package scripts and which paths take
    dependency names as arguments.
    """

    entries: Mapping[CommandPath, OptionSet]
    run_command: CommandPath = (DEFAULT_RUN_COMMAND,)
    package_commands: frozenset[CommandPath] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # freeze the mapping so a shared table cannot be mutated by callers
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Iterable[str]],
        run_command: str = DEFAULT_RUN_COMMAND,
        package_commands: Iterable[str] = (),
    ) -> CommandTable:
        """Build a table from space-joined command names.

        Args:
            mapping: Command name -> options, in the order they should be offered
            run_command: Command running package scripts
            package_commands: Commands taking dependency names as arguments

        Returns:
            The new table
        """
        return cls(
            entries=_compile(mapping),
            run_command=split_path(run_command),
            package_commands=frozenset(split_path(cmd) for cmd in package_commands),
        )

    def lookup(self, path: CommandPath) -> OptionSet | None:
        """Return the options of `path`, exact match only."""
        return self.entries.get(tuple(path))

    def all_paths(self) -> frozenset[CommandPath]:
        """Return every known command path."""
        return frozenset(self.entries)

    def paths(self) -> tuple[CommandPath, ...]:
        """Return every known command path in table order."""
        return tuple(self.entries)

    def is_run_command(self, path: CommandPath) -> bool:
        """Tell if `path` is the command running package scripts."""
        return tuple(path) == self.run_command

    def takes_package_names(self, path: CommandPath) -> bool:
        """Tell if `path` accepts dependency names as arguments."""
        return tuple(path) in self.package_commands

    def extended(
        self,
        extra: Mapping[str, Iterable[str]],
        package_commands: Iterable[str] = (),
        run_command: str | None = None,
    ) -> CommandTable:
        """Return a new table with `extra` entries merged in.

        Options of an existing path are replaced, new paths come after the
        existing ones.
        """
        entries = dict(self.entries)
        entries.update(_compile(extra))
        return CommandTable(
            entries=entries,
            run_command=split_path(run_command) if run_command else self.run_command,
            package_commands=self.package_commands | {split_path(cmd) for cmd in package_commands},
        )

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, path: object) -> bool:
        return path in self.entries
