"""Completion candidate filtering and shell word-boundary handling."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

__all__ = ["emit", "emit_all"]


def emit(candidate: str, word_fragment: str) -> str | None:
    """Return the line to print for `candidate`, None if it does not apply.

    Bash treats ':' as a word separator when replacing the current word, so
    only the part after the last colon of the fragment gets replaced.

    Args:
        candidate: Full completion candidate
        word_fragment: Partially typed word under the cursor

    Returns:
        The output line, or None when `candidate` does not start with the fragment
    """
    if not candidate.startswith(word_fragment):
        return None
    colon = word_fragment.rfind(":")
    if colon == -1:
        return candidate
    return candidate[colon + 1 :]


def emit_all(candidates: Iterable[str], word_fragment: str) -> Iterator[str]:
    """Yield output lines for the matching candidates, keeping their order."""
    for candidate in candidates:
        if not candidate:
            continue
        line = emit(candidate, word_fragment)
        if line is not None:
            yield line
