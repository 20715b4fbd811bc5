"""CLI validation entry point for the yarncomp configuration."""

import logging
import sys
from pathlib import Path

from .ansi import GREEN, colorize, should_colorize
from .commands.data import YARN_TABLE
from .config_loader import ConfigLoader, resolve_config_path
from .constants import COMMANDS_SECTION, CONFIG_SECTION
from .logging_setup import get_logger
from .models import CompletionError, ExitCode
from .schema import SETTINGS_SCHEMA, validate_commands_section
from .validation import ConfigField, ConfigItems, ConfigValidator

__all__ = ["run_validate"]

TOP_LEVEL_SCHEMA = ConfigItems(
    ConfigField(CONFIG_SECTION, dict, description="General settings"),
    ConfigField(COMMANDS_SECTION, dict, description="Extra commands and their options"),
)


def _silent_logger(name: str) -> logging.Logger:
    """Return a logger which does not print, warnings are reported by the caller."""
    logger = logging.getLogger(f"yarncomp.validate.{name}")
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger


def _report(section: str, errors: list[str], warnings: list[str]) -> None:
    if errors or warnings:
        print(f"  [{section}]")
        for error in errors:
            print(f"  ERROR: {error}")
        for warning in warnings:
            print(f"  WARNING: {warning}")
    else:
        mark = colorize("OK", GREEN) if should_colorize(sys.stdout) else "OK"
        print(f"{mark} [{section}]")


def _validate_settings(config: dict) -> tuple[list[str], list[str]]:
    section = config.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        return ([], [])  # already reported by the top level check
    validator = ConfigValidator(section, CONFIG_SECTION, _silent_logger(CONFIG_SECTION))
    return (validator.validate(SETTINGS_SCHEMA), validator.warn_unknown_keys(SETTINGS_SCHEMA))


def _validate_commands(config: dict) -> list[str]:
    commands = config.get(COMMANDS_SECTION, {})
    if not isinstance(commands, dict):
        return []  # already reported by the top level check
    errors = validate_commands_section(commands)
    if not errors:
        try:
            YARN_TABLE.extended(commands)
        except CompletionError as e:
            errors.append(f"[{COMMANDS_SECTION}] {e}")
    return errors


def run_validate(config_filename: str | Path = "") -> ExitCode:
    """Validate the configuration file and print a report.

    Args:
        config_filename: Config file to check, the default location if empty

    Returns:
        The exit code: USAGE_ERROR if errors were found, ENV_ERROR if an explicit file is missing
    """
    log = get_logger("validate")
    path = resolve_config_path(config_filename)

    if not path.exists():
        if config_filename:
            log.error("Config file not found at %s", path)
            return ExitCode.ENV_ERROR
        print(f"No config file at {path}, built-in defaults are used.")
        return ExitCode.SUCCESS

    try:
        config = ConfigLoader(log).load(path)
    except CompletionError:
        return ExitCode.USAGE_ERROR

    print(f"Validating {path}...\n")
    top_level = ConfigValidator(config, "config", _silent_logger("config"))
    top_errors = top_level.validate(TOP_LEVEL_SCHEMA)
    top_warnings = top_level.warn_unknown_keys(TOP_LEVEL_SCHEMA)
    settings_errors, settings_warnings = _validate_settings(config)
    command_errors = _validate_commands(config)

    _report("config", top_errors, top_warnings)
    _report(CONFIG_SECTION, settings_errors, settings_warnings)
    _report(COMMANDS_SECTION, command_errors, [])

    total_errors = len(top_errors) + len(settings_errors) + len(command_errors)
    total_warnings = len(top_warnings) + len(settings_warnings)
    print()
    if total_errors == 0 and total_warnings == 0:
        print("Configuration is valid!")
        return ExitCode.SUCCESS
    if total_errors > 0:
        print(f"Found {total_errors} error(s) and {total_warnings} warning(s)")
        return ExitCode.USAGE_ERROR
    print(f"Found {total_warnings} warning(s)")
    return ExitCode.SUCCESS
