"""Schema of the configuration file."""

from typing import Any

from .constants import DEFAULT_DEPENDENCY_FIELDS, DEFAULT_INVOCATION_NAMES, DEFAULT_RUN_COMMAND, MANIFEST_FILE
from .validation import ConfigField, ConfigItems

__all__ = ["SETTINGS_SCHEMA", "validate_commands_section"]


def _strings(value: Any) -> list[str]:  # noqa: ANN401
    """Check a list only holds non-blank strings."""
    items = [value] if isinstance(value, str) else value
    return [f"Invalid item {item!r}, expected a non-empty string" for item in items if not isinstance(item, str) or not item.strip()]


def _non_empty_strings(value: Any) -> list[str]:  # noqa: ANN401
    if not value:
        return ["At least one name is required"]
    return _strings(value)


def _file_name(value: str) -> list[str]:
    if not value.strip():
        return ["Must not be empty"]
    if "/" in value:
        return ["Must be a file name, not a path"]
    return []


SETTINGS_SCHEMA = ConfigItems(
    ConfigField(
        "invocation_names",
        (list, str),
        default=list(DEFAULT_INVOCATION_NAMES),
        description="Program names stripped from the start of the command line",
        validator=_non_empty_strings,
    ),
    ConfigField(
        "manifest",
        str,
        default=MANIFEST_FILE,
        description="Name of the package manifest file",
        validator=_file_name,
    ),
    ConfigField(
        "search_parents",
        bool,
        default=False,
        description="Look for the manifest in parent directories too",
    ),
    ConfigField(
        "dependency_fields",
        list,
        default=list(DEFAULT_DEPENDENCY_FIELDS),
        description="Manifest sections listing dependency names",
        validator=_strings,
    ),
    ConfigField(
        "run_command",
        str,
        default=DEFAULT_RUN_COMMAND,
        description="Command running package scripts",
        validator=lambda value: [] if value.strip() else ["Must not be empty"],
    ),
    ConfigField(
        "package_commands",
        list,
        default=[],
        description="Extra commands taking dependency names as arguments",
        validator=_strings,
    ),
)


def validate_commands_section(commands: Any) -> list[str]:  # noqa: ANN401
    """Check the user defined commands.

    Args:
        commands: The `[commands]` section, mapping command names to option lists

    Returns:
        List of error messages (empty if valid)
    """
    if not isinstance(commands, dict):
        return [f"[commands] Expected dict/section, got {type(commands).__name__}"]
    errors = []
    for name, options in commands.items():
        if not name.strip():
            errors.append("[commands] Command names must not be empty")
        elif not isinstance(options, list) or not all(isinstance(option, str) for option in options):
            errors.append(f'[commands] Options of "{name}" must be a list of strings')
    return errors
