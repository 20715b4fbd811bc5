"""Typed access to a configuration section."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import logging

    from .validation import ConfigItems

__all__ = ["BOOL_FALSE_STRINGS", "BOOL_STRINGS", "BOOL_TRUE_STRINGS", "Configuration", "coerce_to_bool"]

BOOL_TRUE_STRINGS = frozenset({"true", "yes", "on", "1", "enabled"})
BOOL_FALSE_STRINGS = frozenset({"false", "no", "off", "0", "disabled"})
BOOL_STRINGS = BOOL_TRUE_STRINGS | BOOL_FALSE_STRINGS


def coerce_to_bool(value: Any, default: bool = False) -> bool:  # noqa: ANN401
    """Read a loosely typed boolean.

    None gives `default`, strings are false when blank or one of
    BOOL_FALSE_STRINGS (case insensitive), anything else uses `bool()`.
    """
    if value is None:
        return default
    if isinstance(value, str):
        text = value.strip().lower()
        return bool(text) and text not in BOOL_FALSE_STRINGS
    return bool(value)


class Configuration(dict):
    """A configuration section, falling back to the schema defaults for missing keys."""

    def __init__(
        self,
        *args: Any,  # noqa: ANN401
        logger: logging.Logger,
        schema: ConfigItems | None = None,
        **kwargs: Any,  # noqa: ANN401
    ):
        """Initialize the section.

        Args:
            *args: Arguments for dict
            logger: Receives warnings about invalid values
            schema: Provides the default values
            **kwargs: Keyword arguments for dict
        """
        super().__init__(*args, **kwargs)
        self.log = logger
        self._defaults = {item.name: item.default for item in schema or () if item.default is not None}

    def get(self, name: str, default: Any = None) -> Any:  # type: ignore[override]  # noqa: ANN401
        """Return the value of `name`, else its schema default, else `default`."""
        if name in self:
            return self[name]
        return self._defaults.get(name, default)

    def get_bool(self, name: str, default: bool = False) -> bool:
        """Return a boolean, see `coerce_to_bool`."""
        return coerce_to_bool(self.get(name), default)

    def get_str(self, name: str, default: str = "") -> str:
        """Return a string, other values are logged and replaced by `default`."""
        value = self.get(name)
        if isinstance(value, str):
            return value
        if value is not None:
            self.log.warning("Invalid string value for %s: %s", name, value)
        return default

    def get_list(self, name: str, default: list[str] | None = None) -> list[str]:
        """Return a list of strings.

        A single string reads as a one item list. Other values are logged and
        replaced by `default` (or an empty list).
        """
        value = self.get(name)
        if isinstance(value, str):
            return [value]
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return list(value)
        if value is not None:
            self.log.warning("Invalid list value for %s: %s", name, value)
        return list(default or [])
