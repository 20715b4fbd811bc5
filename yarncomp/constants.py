"""Shared constants for yarncomp."""

import os
from pathlib import Path

__all__ = [
    "COMP_LINE_VAR",
    "COMP_POINT_VAR",
    "CONFIG_ENV_VAR",
    "CONFIG_FILE",
    "CONFIG_SECTION",
    "COMMANDS_SECTION",
    "DEFAULT_DEPENDENCY_FIELDS",
    "DEFAULT_INVOCATION_NAMES",
    "DEFAULT_RUN_COMMAND",
    "LOG_ENV_VAR",
    "MANIFEST_FILE",
]

# bash `complete -C` protocol
COMP_LINE_VAR = "COMP_LINE"
COMP_POINT_VAR = "COMP_POINT"

CONFIG_ENV_VAR = "YARNCOMP_CONFIG"
LOG_ENV_VAR = "YARNCOMP_LOG"

# Config file path - use XDG_CONFIG_HOME with fallback to ~/.config
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "yarncomp" / "config.toml"

CONFIG_SECTION = "yarncomp"
COMMANDS_SECTION = "commands"

MANIFEST_FILE = "package.json"

DEFAULT_INVOCATION_NAMES = ("yarn",)
DEFAULT_RUN_COMMAND = "run"
DEFAULT_DEPENDENCY_FIELDS = ("dependencies", "devDependencies")
