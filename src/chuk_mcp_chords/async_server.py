#!/usr/bin/env python3
"""
Async Chord MCP Server using chuk-mcp-server

This server provides MCP tools for recognizing and naming chords. A chord
catalog is loaded once at startup and indexed by pitch-class signature;
every tool call then resolves against that read-only index.

The server provides tools for:
- Identifying chords from pitches or MIDI files
- Checking a voicing against a target chord
- Rendering chord symbols and pitch names
- Browsing chord qualities and catalogs
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chords.catalog import CatalogLoader
from chuk_mcp_chords.constants import DEFAULT_CATALOG
from chuk_mcp_chords.engine import create_engine
from chuk_mcp_chords.tools import register_catalog_tools, register_recognition_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-chords")

# Paths - project catalogs default to ./catalogs, overridable from the CLI
BASE_PATH = Path.cwd()
CATALOGS_DIR = Path(os.environ.get("CHUK_CHORDS_CATALOGS_DIR", BASE_PATH / "catalogs"))
CATALOG_NAME = os.environ.get("CHUK_CHORDS_CATALOG", DEFAULT_CATALOG)
LIBRARY_PATH = Path(__file__).parent / "catalog" / "library"

# Build the engine once; it is read-only from here on
catalog_loader = CatalogLoader(library_path=LIBRARY_PATH, project_path=CATALOGS_DIR)
engine = create_engine(loader=catalog_loader, catalog_name=CATALOG_NAME)

# Register all tools
recognition_tools = register_recognition_tools(mcp, engine)
catalog_tools = register_catalog_tools(mcp, engine, catalog_loader)

# Export tool functions for direct access
chord_identify = recognition_tools["chord_identify"]
chord_validate = recognition_tools["chord_validate"]
chord_render = recognition_tools["chord_render"]
chord_name_pitch = recognition_tools["chord_name_pitch"]
chord_identify_midi = recognition_tools["chord_identify_midi"]

chord_list_qualities = catalog_tools["chord_list_qualities"]
chord_list_catalog = catalog_tools["chord_list_catalog"]
chord_list_catalogs = catalog_tools["chord_list_catalogs"]

logger.info("CHUK Chords MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Catalogs dir: {CATALOGS_DIR}")
