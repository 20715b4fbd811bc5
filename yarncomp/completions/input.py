"""Command line parsing: what was typed before the cursor, and the word being completed."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from ..constants import DEFAULT_INVOCATION_NAMES
from ..models import CommandPath

__all__ = ["TypedInput", "parse_input"]


@dataclass(frozen=True)
class TypedInput:
    """The command line split the way completion needs it.

    Attributes:
        full_line: Complete line being edited, program name included
        cursor_offset: Cursor position in `full_line`, already clamped
        command_portion: `full_line` without the leading program name
        preceding_text: `command_portion` up to the cursor
        word_fragment: Partially typed word right before the cursor
    """

    full_line: str
    cursor_offset: int
    command_portion: str
    preceding_text: str
    word_fragment: str

    @property
    def completed_words(self) -> CommandPath:
        """Words typed before the cursor, excluding the one in progress."""
        return tuple(self.preceding_text[: len(self.preceding_text) - len(self.word_fragment)].split())


@lru_cache(maxsize=8)
def _invocation_pattern(invocation_names: tuple[str, ...]) -> re.Pattern[str] | None:
    if not invocation_names:
        return None
    # longest first, so "yarnpkg" is not shadowed by "yarn"
    names = sorted(invocation_names, key=len, reverse=True)
    return re.compile(r"^(?:" + "|".join(re.escape(name) for name in names) + r")\s+")


def _strip_invocation(text: str, pattern: re.Pattern[str] | None) -> str:
    if pattern is None:
        return text
    return pattern.sub("", text, count=1)


def parse_input(
    full_line: str,
    cursor_offset: int,
    invocation_names: tuple[str, ...] = DEFAULT_INVOCATION_NAMES,
) -> TypedInput:
    """Derive the completion input from the raw line and cursor offset.

    The cursor offset is measured on the original line, so the line is cut at
    the cursor before the program name is stripped.
    Never fails: out of range offsets are clamped.

    Args:
        full_line: The line as supplied by the shell
        cursor_offset: Character offset of the cursor in `full_line`
        invocation_names: Program names to strip from the start of the line

    Returns:
        The parsed input
    """
    offset = max(0, min(cursor_offset, len(full_line)))
    pattern = _invocation_pattern(tuple(invocation_names))
    preceding_text = _strip_invocation(full_line[:offset], pattern)
    return TypedInput(
        full_line=full_line,
        cursor_offset=offset,
        command_portion=_strip_invocation(full_line, pattern),
        preceding_text=preceding_text,
        word_fragment=preceding_text[preceding_text.rfind(" ") + 1 :],
    )
