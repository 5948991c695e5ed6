"""
Pydantic models for data stored on disk or exchanged with tools.
"""

from chuk_mcp_chords.models.catalog import (
    CatalogFile,
    CatalogFilter,
    CatalogMetadata,
    ChordRecord,
    TensionFormula,
)

__all__ = [
    "CatalogFile",
    "CatalogFilter",
    "CatalogMetadata",
    "ChordRecord",
    "TensionFormula",
]
