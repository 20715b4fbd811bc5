"""Declarative checks for the configuration file.

A section schema is a `ConfigItems` list of `ConfigField`. `ConfigValidator`
checks a loaded section against it and returns readable messages, with a
"did you mean" hint for misspelled keys.
"""

import difflib
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .config import BOOL_STRINGS

__all__ = [
    "ConfigField",
    "ConfigItems",
    "ConfigValidator",
    "format_config_error",
]

# How to write a value of each type, shown after a type error
_TYPE_HINTS: dict[type, str] = {
    bool: "Use true/false (without quotes)",
    str: 'Use {name} = "value"',
    list: 'Use {name} = ["item1", "item2"]',
}


@dataclass
class ConfigField:
    """One expected key of a section.

    Attributes:
        name: Key name
        field_type: Expected type, a tuple of types accepts any of them
        required: Report the key when missing
        default: Value used when the key is missing
        description: Short help text
        choices: Accepted values, any value when None
        validator: Extra check returning error messages
    """

    name: str
    field_type: type | tuple[type, ...] = str
    required: bool = False
    default: Any = None
    description: str = ""
    choices: list | None = None
    validator: Callable[[Any], list[str]] | None = None

    @property
    def types(self) -> tuple[type, ...]:
        """Accepted types, as a tuple."""
        return self.field_type if isinstance(self.field_type, tuple) else (self.field_type,)

    @property
    def type_name(self) -> str:
        """Accepted types for messages, eg: 'list or str'."""
        return " or ".join(typ.__name__ for typ in self.types)


class ConfigItems(list):
    """Schema of a section: `ConfigField` items, looked up by name."""

    def __init__(self, *fields: ConfigField) -> None:
        super().__init__(fields)
        self._by_name = {item.name: item for item in fields}

    def get(self, name: str) -> ConfigField | None:
        """Return the field called `name`, None if unknown."""
        return self._by_name.get(name)

    def names(self) -> list[str]:
        """Return the field names, sorted."""
        return sorted(self._by_name)


def _find_similar_key(unknown_key: str, known_keys: list[str]) -> str | None:
    """Return the known key closest to `unknown_key`, None if nothing is close."""
    matches = difflib.get_close_matches(unknown_key, known_keys, n=1)
    return matches[0] if matches else None


def _has_type(value: Any, expected: type) -> bool:  # noqa: ANN401
    if expected is bool:
        return isinstance(value, bool) or (isinstance(value, str) and value.lower() in BOOL_STRINGS)
    return isinstance(value, expected)


def format_config_error(section: str, field: str, message: str, suggestion: str = "") -> str:
    """Format an error about `field` of `section`, eg: "[yarncomp] Config error for 'manifest': ..."."""
    msg = f"[{section}] Config error for '{field}': {message}"
    if suggestion:
        msg += f" -> {suggestion}"
    return msg


class ConfigValidator:
    """Checks a configuration section against a schema."""

    def __init__(self, config: dict, section: str, logger: logging.Logger) -> None:
        """Initialize the validator.

        Args:
            config: Section content
            section: Section name, prefixed to every message
            logger: Receives a warning for each unknown key
        """
        self.config = config
        self.section = section
        self.log = logger

    def _error(self, field_def: ConfigField, message: str, suggestion: str = "") -> str:
        return format_config_error(self.section, field_def.name, message, suggestion)

    def _type_error(self, field_def: ConfigField, value: Any) -> str | None:  # noqa: ANN401
        if any(_has_type(value, typ) for typ in field_def.types):
            return None
        if dict in field_def.types:
            return self._error(field_def, f"Expected dict/section, got {type(value).__name__}")
        hint = _TYPE_HINTS.get(field_def.field_type, "") if len(field_def.types) == 1 else ""
        return self._error(field_def, f"Expected {field_def.type_name}, got {type(value).__name__}", hint.format(name=field_def.name))

    def _check(self, field_def: ConfigField, value: Any) -> list[str]:  # noqa: ANN401
        type_error = self._type_error(field_def, value)
        if type_error:
            return [type_error]
        errors = []
        if field_def.choices is not None and value not in field_def.choices:
            options = ", ".join(repr(choice) for choice in field_def.choices)
            errors.append(self._error(field_def, f"Invalid value {value!r}", f"Valid options: {options}"))
        if field_def.validator:
            errors.extend(self._error(field_def, message) for message in field_def.validator(value))
        return errors

    def validate(self, schema: ConfigItems) -> list[str]:
        """Return the errors of the section, in schema order (empty when valid)."""
        errors = []
        for field_def in schema:
            value = self.config.get(field_def.name)
            if value is None:
                if field_def.required:
                    errors.append(self._error(field_def, "Missing required field"))
                continue
            errors.extend(self._check(field_def, value))
        return errors

    def warn_unknown_keys(self, schema: ConfigItems) -> list[str]:
        """Log and return a warning for each key the schema does not know."""
        known = schema.names()
        warnings = []
        for key in self.config:
            if schema.get(key) is not None:
                continue
            similar = _find_similar_key(key, known)
            if similar:
                msg = f"[{self.section}] Unknown option '{key}' (did you mean '{similar}'?)"
            else:
                msg = f"[{self.section}] Unknown option '{key}' - will be ignored"
            self.log.warning(msg)
            warnings.append(msg)
        return warnings
