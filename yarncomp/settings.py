"""Effective settings: built-in defaults overridden by the configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .commands.data import YARN_TABLE
from .config import Configuration
from .config_loader import ConfigLoader
from .constants import COMMANDS_SECTION, CONFIG_SECTION, DEFAULT_DEPENDENCY_FIELDS, DEFAULT_INVOCATION_NAMES, DEFAULT_RUN_COMMAND, MANIFEST_FILE
from .logging_setup import get_logger
from .schema import SETTINGS_SCHEMA, validate_commands_section

if TYPE_CHECKING:
    import logging
    from pathlib import Path

    from .commands.models import CommandTable

__all__ = ["Settings", "load_settings", "settings_from_config"]


@dataclass(frozen=True)
class Settings:
    """Everything a completion run depends on."""

    table: CommandTable = YARN_TABLE
    invocation_names: tuple[str, ...] = DEFAULT_INVOCATION_NAMES
    manifest: str = MANIFEST_FILE
    search_parents: bool = False
    dependency_fields: tuple[str, ...] = DEFAULT_DEPENDENCY_FIELDS


def _section(config: dict[str, Any], name: str, log: logging.Logger) -> dict[str, Any]:
    value = config.get(name, {})
    if isinstance(value, dict):
        return value
    log.warning("Ignoring [%s]: expected a section, got %s", name, type(value).__name__)
    return {}


def _valid_commands(commands: dict[str, Any], log: logging.Logger) -> dict[str, list[str]]:
    """Keep the user defined commands which are well formed."""
    valid: dict[str, list[str]] = {}
    for name, options in commands.items():
        errors = validate_commands_section({name: options})
        if errors:
            for error in errors:
                log.warning(error)
            continue
        valid[name] = options
    return valid


def _string_setting(section: Configuration, name: str, default: str, log: logging.Logger) -> str:
    """Return the stripped string value of `name`, `default` when it is blank or not a string."""
    value = section.get_str(name, default).strip()
    if value:
        return value
    log.warning("Empty %s, using %s", name, default)
    return default


def settings_from_config(config: dict[str, Any], log: logging.Logger | None = None) -> Settings:
    """Build settings from a loaded configuration dictionary.

    Invalid values are logged and replaced by their defaults.

    Args:
        config: Content of the configuration file
        log: Logger for warnings

    Returns:
        The effective settings
    """
    if log is None:
        log = get_logger("config")
    section = Configuration(_section(config, CONFIG_SECTION, log), logger=log, schema=SETTINGS_SCHEMA)

    invocation_names = tuple(name for name in section.get_list("invocation_names", list(DEFAULT_INVOCATION_NAMES)) if name.strip())
    manifest = _string_setting(section, "manifest", MANIFEST_FILE, log)
    if "/" in manifest:
        log.warning("Invalid manifest file name %r, using %s", manifest, MANIFEST_FILE)
        manifest = MANIFEST_FILE

    table = YARN_TABLE.extended(
        _valid_commands(_section(config, COMMANDS_SECTION, log), log),
        package_commands=[cmd for cmd in section.get_list("package_commands") if cmd.strip()],
        run_command=_string_setting(section, "run_command", DEFAULT_RUN_COMMAND, log),
    )
    return Settings(
        table=table,
        invocation_names=invocation_names or DEFAULT_INVOCATION_NAMES,
        manifest=manifest,
        search_parents=section.get_bool("search_parents"),
        dependency_fields=tuple(section.get_list("dependency_fields", list(DEFAULT_DEPENDENCY_FIELDS))),
    )


def load_settings(config_filename: str | Path = "", log: logging.Logger | None = None) -> Settings:
    """Load the configuration file and build the settings from it.

    Raises:
        CompletionError: If the file cannot be loaded
    """
    if log is None:
        log = get_logger("config")
    return settings_from_config(ConfigLoader(log).load(config_filename), log)
