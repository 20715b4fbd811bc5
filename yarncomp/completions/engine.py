"""Completion resolution: from the raw command line to the lines to print."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..commands.data import YARN_TABLE
from ..commands.parsing import join_path
from ..constants import DEFAULT_INVOCATION_NAMES
from ..logging_setup import get_logger
from ..manifest import ManifestReader
from .emitter import emit_all
from .input import parse_input
from .matcher import command_candidates, in_script_arguments, select_current_command, subcommand_candidates

if TYPE_CHECKING:
    from ..commands.models import CommandTable
    from ..settings import Settings

__all__ = ["Completer", "resolve"]


class Completer:
    """Resolves completions against a command table and the local manifest."""

    def __init__(
        self,
        table: CommandTable = YARN_TABLE,
        manifest_reader: ManifestReader | None = None,
        invocation_names: tuple[str, ...] = DEFAULT_INVOCATION_NAMES,
    ) -> None:
        """Initialize the completer.

        Args:
            table: Known commands and options
            manifest_reader: Source of script and dependency names, package.json of the working directory if not set
            invocation_names: Program names stripped from the start of the line
        """
        self.table = table
        self.manifest_reader = manifest_reader if manifest_reader is not None else ManifestReader()
        self.invocation_names = tuple(invocation_names)
        self.log = get_logger("completer")

    @classmethod
    def from_settings(cls, settings: Settings) -> Completer:
        """Build a completer from loaded settings."""
        return cls(
            table=settings.table,
            manifest_reader=ManifestReader(
                filename=settings.manifest,
                search_parents=settings.search_parents,
                dependency_fields=settings.dependency_fields,
            ),
            invocation_names=settings.invocation_names,
        )

    def complete(self, full_line: str, cursor_offset: int) -> list[str]:
        """Return the completion lines for the word under the cursor.

        Subcommand names come first, then the options of the current command
        followed by the script or dependency names it accepts.

        Args:
            full_line: The whole command line, program name included
            cursor_offset: Cursor position in `full_line`

        Returns:
            Lines to print, in order

        Raises:
            CompletionError: if the command table is inconsistent
        """
        typed = parse_input(full_line, cursor_offset, self.invocation_names)
        lines = list(emit_all(subcommand_candidates(self.table, typed), typed.word_fragment))

        current = select_current_command(self.table, typed.command_portion)
        if current is None:
            return lines
        if in_script_arguments(self.table, current, typed.command_portion):
            self.log.debug("Completing arguments of a script, nothing to offer")
            return lines

        self.log.debug("Current command: %s", join_path(current))
        candidates = command_candidates(self.table, current, self.manifest_reader.read)
        lines.extend(emit_all(candidates, typed.word_fragment))
        return lines


def resolve(
    full_line: str,
    cursor_offset: int,
    table: CommandTable = YARN_TABLE,
    manifest_reader: ManifestReader | None = None,
    invocation_names: tuple[str, ...] = DEFAULT_INVOCATION_NAMES,
) -> list[str]:
    """Return the completion lines for `full_line` with the cursor at `cursor_offset`."""
    return Completer(table, manifest_reader, invocation_names).complete(full_line, cursor_offset)
