"""
Catalog tools - MCP tools for browsing the chord catalog.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.constants import Accidental
from chuk_mcp_chords.core.chord import QUALITY_INTERVALS, ChordQuality
from chuk_mcp_chords.core.formatter import quality_glyph, quality_ordinal, render_chord
from chuk_mcp_chords.models.catalog import CatalogFilter

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

    from chuk_mcp_chords.catalog import CatalogLoader
    from chuk_mcp_chords.engine import ChordEngine

logger = logging.getLogger(__name__)


def register_catalog_tools(
    mcp: ChukMCPServer,
    engine: ChordEngine,
    loader: CatalogLoader,
) -> dict[str, Any]:
    """
    Register catalog browsing tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The chord engine (its catalog is the one browsed)
        loader: The catalog loader, for listing other catalogs

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_list_qualities() -> str:
        """
        List the chord qualities with their symbols.

        Returns:
            JSON string with one entry per quality, in ordinal order

        Example:
            chord_list_qualities()
        """
        try:
            qualities = [
                {
                    "quality": q.value,
                    "ordinal": quality_ordinal(q),
                    "glyph": quality_glyph(q, suppress_major=False),
                    "intervals": list(QUALITY_INTERVALS[q]),
                }
                for q in sorted(ChordQuality, key=quality_ordinal)
            ]
            return json.dumps({"status": "success", "qualities": qualities})
        except Exception as e:
            logger.exception("Failed to list qualities")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_list_qualities"] = chord_list_qualities

    @mcp.tool  # type: ignore[arg-type]
    async def chord_list_catalog(
        qualities: list[str] | None = None,
        roots: list[str] | None = None,
        include_inversions: bool = False,
        include_tensions: bool = False,
    ) -> str:
        """
        List catalog chords matching a selection.

        With no qualities or roots given, the beginner selection is used:
        major triads on the natural roots.

        Args:
            qualities: Quality names to include
            roots: Root names or pitch classes to include
            include_inversions: Also list slash-chord inversions
            include_tensions: Include chords with extensions (add9)

        Returns:
            JSON string with the selected chords

        Example:
            chord_list_catalog(qualities=["minor7"], roots=["D", "A"])
        """
        try:
            default = CatalogFilter.default()
            chord_filter = CatalogFilter(
                qualities=(
                    {ChordQuality.parse(q) for q in qualities}
                    if qualities
                    else default.qualities
                ),
                roots=roots if roots else default.roots,
                include_inversions=include_inversions,
                include_tensions=include_tensions,
            )
            chords = engine.selectable_chords(chord_filter)
            return json.dumps(
                {
                    "status": "success",
                    "catalog": engine.catalog.name,
                    "chords": [
                        {"symbol": render_chord(c, Accidental.SHARP), **c.to_dict()}
                        for c in chords
                    ],
                    "count": len(chords),
                }
            )
        except Exception as e:
            logger.exception("Failed to list catalog")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_list_catalog"] = chord_list_catalog

    @mcp.tool  # type: ignore[arg-type]
    async def chord_list_catalogs() -> str:
        """
        List available chord catalogs.

        Returns:
            JSON string with catalog names, descriptions and sizes

        Example:
            chord_list_catalogs()
        """
        try:
            catalogs = loader.list_catalogs()
            return json.dumps(
                {
                    "status": "success",
                    "active": engine.catalog.name,
                    "catalogs": [c.model_dump() for c in catalogs],
                    "count": len(catalogs),
                }
            )
        except Exception as e:
            logger.exception("Failed to list catalogs")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_list_catalogs"] = chord_list_catalogs

    return tools
