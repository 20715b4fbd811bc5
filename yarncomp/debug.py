"""Debug mode flag, set by YARNCOMP_DEBUG or the --debug option."""

import os

__all__ = ["is_debug", "set_debug"]


class _DebugState:
    value: bool = bool(os.environ.get("YARNCOMP_DEBUG"))


_state = _DebugState()


def is_debug() -> bool:
    """Tell if debug logging is on."""
    return _state.value


def set_debug(value: bool) -> None:
    _state.value = value
