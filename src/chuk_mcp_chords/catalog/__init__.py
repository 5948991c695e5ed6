"""
Chord catalogs - the ordered chord templates recognition is built from.

Catalogs ship as YAML in the built-in library and can be overridden or
extended from a project directory.
"""

from chuk_mcp_chords.catalog.catalog import ChordCatalog
from chuk_mcp_chords.catalog.loader import CatalogError, CatalogLoader

__all__ = [
    "CatalogError",
    "CatalogLoader",
    "ChordCatalog",
]
