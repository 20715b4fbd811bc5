"""Local package.json reading.

A missing, unreadable or malformed manifest is never an error: it reads as an
empty manifest, so completion falls back to the static options.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .constants import DEFAULT_DEPENDENCY_FIELDS, MANIFEST_FILE
from .logging_setup import get_logger

__all__ = ["Manifest", "ManifestReader", "find_manifest"]


def _string_keys(section: Any) -> dict[str, str]:  # noqa: ANN401
    """Keep a manifest section only if it is an object, stringifying its values."""
    if not isinstance(section, dict):
        return {}
    return {str(key): str(value) for key, value in section.items()}


@dataclass(frozen=True)
class Manifest:
    """Script and dependency names declared by a package."""

    scripts: dict[str, str] = field(default_factory=dict)
    dependencies: dict[str, dict[str, str]] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Manifest:
        """Return the manifest used when no package.json is available."""
        return cls()

    @classmethod
    def from_json(cls, data: Any, dependency_fields: tuple[str, ...] = DEFAULT_DEPENDENCY_FIELDS) -> Manifest:  # noqa: ANN401
        """Build a manifest from decoded package.json content.

        Args:
            data: Decoded JSON document, anything else than an object gives an empty manifest
            dependency_fields: Sections listing dependencies, in lookup order

        Returns:
            The manifest
        """
        if not isinstance(data, dict):
            return cls.empty()
        return cls(
            scripts=_string_keys(data.get("scripts")),
            dependencies={key: _string_keys(data.get(key)) for key in dependency_fields},
        )

    def script_names(self) -> list[str]:
        """Return script names in declaration order."""
        return list(self.scripts)

    def package_names(self) -> list[str]:
        """Return dependency names, section by section in declaration order.

        A package listed in several sections is repeated, once per section.
        """
        return [name for section in self.dependencies.values() for name in section]


def find_manifest(start: Path, filename: str = MANIFEST_FILE, search_parents: bool = False) -> Path | None:
    """Locate the manifest file.

    Args:
        start: Directory to look in first
        filename: Manifest file name
        search_parents: Also look in the ancestors of `start`, nearest first

    Returns:
        The manifest path, None if not found
    """
    directories = [start, *start.parents] if search_parents else [start]
    for directory in directories:
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None


class ManifestReader:
    """Reads the manifest at most once, on first use."""

    def __init__(
        self,
        directory: Path | str | None = None,
        filename: str = MANIFEST_FILE,
        search_parents: bool = False,
        dependency_fields: tuple[str, ...] = DEFAULT_DEPENDENCY_FIELDS,
    ) -> None:
        """Initialize the reader.

        Args:
            directory: Directory of the package, current working directory if not set
            filename: Manifest file name
            search_parents: Look for the manifest in parent directories too
            dependency_fields: Sections listing dependencies
        """
        self.directory = Path(directory) if directory is not None else None
        self.filename = filename
        self.search_parents = search_parents
        self.dependency_fields = tuple(dependency_fields)
        self.log = get_logger("manifest")
        self._manifest: Manifest | None = None

    def read(self) -> Manifest:
        """Return the manifest, reading it on the first call."""
        if self._manifest is None:
            self._manifest = self._load()
        return self._manifest

    def _load(self) -> Manifest:
        try:
            start = self.directory if self.directory is not None else Path.cwd()
            path = find_manifest(start, self.filename, self.search_parents)
        except OSError as e:
            self.log.debug("Cannot look for %s: %s", self.filename, e)
            return Manifest.empty()
        if path is None:
            self.log.debug("No %s found from %s", self.filename, start)
            return Manifest.empty()
        try:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            # ValueError covers bad encoding, bad JSON and oversized integers
            self.log.debug("Ignoring unreadable manifest %s: %s", path, e)
            return Manifest.empty()
        self.log.debug("Loaded %s", path)
        return Manifest.from_json(data, self.dependency_fields)
