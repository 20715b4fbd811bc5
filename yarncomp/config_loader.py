"""Configuration file loading."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import CONFIG_FILE
from .models import CompletionError

if TYPE_CHECKING:
    import logging

__all__ = ["ConfigLoader", "resolve_config_path"]


def resolve_config_path(config_filename: str | Path = "") -> Path:
    """Return the config file to use: the given one, expanded, or the default location."""
    if config_filename:
        return Path(os.path.expandvars(str(config_filename))).expanduser()
    return CONFIG_FILE


class ConfigLoader:
    """Loads the TOML configuration file.

    The default file is optional, a file given explicitly must exist.
    """

    def __init__(self, log: logging.Logger) -> None:
        """Initialize the config loader.

        Args:
            log: Logger instance for status and error messages
        """
        self.log = log

    def load(self, config_filename: str | Path = "") -> dict[str, Any]:
        """Load the configuration.

        Args:
            config_filename: Optional path to the config file.
                           If empty, uses the default CONFIG_FILE location.

        Returns:
            The configuration dictionary, empty when the default file does not exist

        Raises:
            CompletionError: If an explicit file is not found or the file has syntax errors.
        """
        fname = resolve_config_path(config_filename)
        if not fname.exists():
            if config_filename:
                self.log.error("Config file not found: %s", fname)
                raise CompletionError(f"Config file not found: {fname}")
            self.log.debug("No config file at %s, using defaults", fname)
            return {}
        return self._load_config_file(fname)

    def _load_config_file(self, fname: Path) -> dict[str, Any]:
        """Load a single TOML file.

        Raises:
            CompletionError: If the file cannot be read or has syntax errors
        """
        self.log.info("Loading %s", fname)
        try:
            with fname.open("rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            self.log.error("Problem reading %s: %s", fname, e)
            raise CompletionError(f"Invalid TOML in {fname}: {e}") from e
        except OSError as e:
            self.log.error("Cannot read %s: %s", fname, e)
            raise CompletionError(f"Cannot read {fname}: {e}") from e
