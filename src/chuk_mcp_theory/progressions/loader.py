"""
Progression loader - built-in progressions plus project YAML files.

Progressions can come from:
1. The built-in catalog (shipped with the package, read-only)
2. Project progressions (one YAML file per progression in the user's
   project/progressions directory, keyed by file stem)

Project files add progressions or shadow built-ins of the same key.
The built-in catalog itself is never modified.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_mcp_theory.constants import FILE_KEY_PATTERN, ErrorMessages
from chuk_mcp_theory.core.catalog import PROGRESSIONS, ProgressionDef, resolve_progression
from chuk_mcp_theory.errors import UnknownProgressionError
from chuk_mcp_theory.models.progression import ProgressionDefinition
from chuk_mcp_theory.models.theory import CatalogEntry

logger = logging.getLogger(__name__)


class ProgressionLoader:
    """
    Discovers and loads progression definitions.

    Project progressions take precedence over built-ins with the same key.
    Parsed project files are cached until clear_cache() is called.
    """

    def __init__(self, project_path: Path | None = None):
        """
        Initialize the progression loader.

        Args:
            project_path: Directory holding project progression YAML files
        """
        self.project_path = project_path
        self._cache: dict[str, ProgressionDef] = {}

    def list_progressions(self) -> list[CatalogEntry]:
        """
        List all available progressions.

        Built-ins come first in catalog order; project progressions
        replace same-key built-ins in place and otherwise follow, sorted.
        """
        entries: dict[str, CatalogEntry] = {
            key: self._entry(key, progression) for key, progression in PROGRESSIONS.items()
        }

        for key, progression in self._project_progressions():
            entries[key] = self._entry(key, progression)

        return list(entries.values())

    def get_progression(self, name: str) -> ProgressionDef:
        """
        Get a progression by key.

        Args:
            name: Progression key (project file stem or built-in key)

        Returns:
            The progression

        Raises:
            UnknownProgressionError: If neither the project nor the
                catalog has it
        """
        if name in self._cache:
            return self._cache[name]

        # Only plain file stems reach the project directory
        if self.project_path and FILE_KEY_PATTERN.match(name):
            project_file = self.project_path / f"{name}.yaml"
            if project_file.exists():
                progression = self._load_progression_file(project_file)
                if progression is not None:
                    self._cache[name] = progression
                    return progression

        try:
            return PROGRESSIONS[resolve_progression(name)]
        except UnknownProgressionError:
            logger.debug("Progression not found: %s", name)
            raise

    def save_to_project(self, name: str, definition: ProgressionDefinition) -> Path:
        """
        Write a progression to the project directory.

        Args:
            name: Progression key (becomes the file stem)
            definition: Validated progression

        Returns:
            Path to the written file

        Raises:
            ValueError: If no project path is configured or the key is not
                a plain file stem
        """
        if not self.project_path:
            raise ValueError("No project path configured")
        if not FILE_KEY_PATTERN.match(name):
            raise ValueError(ErrorMessages.INVALID_FILE_KEY.format(name=name))

        self.project_path.mkdir(parents=True, exist_ok=True)
        dest_file = self.project_path / f"{name}.yaml"
        dest_file.write_text(yaml.safe_dump(definition.model_dump(mode="json"), sort_keys=False))

        # Invalidate cache
        self._cache.pop(name, None)

        logger.info("Saved progression '%s' to %s", name, dest_file)
        return dest_file

    def clear_cache(self) -> None:
        """Clear the progression cache."""
        self._cache.clear()

    def _project_progressions(self) -> list[tuple[str, ProgressionDef]]:
        if not self.project_path or not self.project_path.exists():
            return []

        found = []
        for path in sorted(self.project_path.glob("*.yaml")):
            progression = self._load_progression_file(path)
            if progression is not None:
                found.append((path.stem, progression))
        return found

    def _load_progression_file(self, path: Path) -> ProgressionDef | None:
        """Load a progression from a YAML file; invalid files are skipped."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return ProgressionDefinition.model_validate(data).to_def()
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning("Skipping invalid progression file %s: %s", path, e)
            return None

    @staticmethod
    def _entry(key: str, progression: ProgressionDef) -> CatalogEntry:
        return CatalogEntry(
            key=key,
            name=progression.name,
            description=progression.description,
            key_type=progression.key_type,
        )
