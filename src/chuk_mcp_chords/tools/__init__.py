"""
MCP tool implementations.

Tools are organized by domain:
- recognition - Identify, validate and render chords, name pitches
- catalog - Browse qualities and catalog chords
"""

from chuk_mcp_chords.tools.catalog import register_catalog_tools
from chuk_mcp_chords.tools.recognition import register_recognition_tools

__all__ = [
    "register_catalog_tools",
    "register_recognition_tools",
]
