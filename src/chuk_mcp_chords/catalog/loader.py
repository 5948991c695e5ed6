"""
Catalog loader - discovers and loads chord catalogs.

Catalogs can come from:
1. Built-in library (shipped with package)
2. Project catalogs (user's project/catalogs directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_chords.catalog.catalog import ChordCatalog
from chuk_mcp_chords.constants import ErrorMessages
from chuk_mcp_chords.models.catalog import CatalogFile, CatalogMetadata

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """A catalog file could not be read or did not validate."""


class CatalogLoader:
    """
    Discovers and loads chord catalogs.

    Catalogs are loaded from YAML files in the library and project directories.
    Project catalogs override library catalogs with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the catalog loader.

        Args:
            library_path: Path to built-in catalog library
            project_path: Path to project catalogs directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, ChordCatalog] = {}

    def list_catalogs(self) -> list[CatalogMetadata]:
        """
        List all available catalogs.

        Returns catalogs from both library and project, with project
        catalogs taking precedence.
        """
        catalogs: dict[str, CatalogMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                catalog = self.load_file(path)
                catalogs[catalog.name] = CatalogMetadata(
                    name=catalog.name,
                    description=catalog.description,
                    chord_count=len(catalog),
                )

        return list(catalogs.values())

    def get_catalog(self, name: str) -> ChordCatalog | None:
        """
        Get a catalog by name.

        Project catalogs take precedence over library catalogs.

        Args:
            name: Catalog name (file stem)

        Returns:
            ChordCatalog if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                catalog = self.load_file(path)
                self._cache[name] = catalog
                return catalog

        return None

    def load_file(self, path: Path) -> ChordCatalog:
        """
        Load a catalog from a YAML file.

        Raises:
            CatalogError: If the file cannot be parsed or fails validation
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise CatalogError(ErrorMessages.CATALOG_INVALID.format(path=path, detail=e)) from e

        catalog = self.parse(data, source=path)
        logger.debug("Loaded catalog '%s' (%d chords) from %s", catalog.name, len(catalog), path)
        return catalog

    def parse(self, data: Any, source: Path | str = "<data>") -> ChordCatalog:
        """
        Build a catalog from already-decoded data.

        Args:
            data: Mapping in catalog/v1 form
            source: Where the data came from, for error messages

        Raises:
            CatalogError: If the data does not describe a valid catalog
        """
        if not isinstance(data, dict):
            raise CatalogError(
                ErrorMessages.CATALOG_INVALID.format(path=source, detail="expected a mapping")
            )

        try:
            catalog_file = CatalogFile.model_validate(data)
            records = catalog_file.records()
        except (ValidationError, ValueError) as e:
            raise CatalogError(ErrorMessages.CATALOG_INVALID.format(path=source, detail=e)) from e

        return ChordCatalog(
            name=catalog_file.name,
            description=catalog_file.description,
            templates=[record.to_template() for record in records],
        )

    def clear_cache(self) -> None:
        """Clear the catalog cache."""
        self._cache.clear()
