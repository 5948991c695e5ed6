"""
chuk-mcp-chords - chord recognition and naming.

Identify the chord a set of pitches forms, check a voicing against a chord
and render chord symbols. The MCP server in async_server exposes the same
operations as tools.
"""

from chuk_mcp_chords.constants import Accidental
from chuk_mcp_chords.core import (
    Chord,
    ChordQuality,
    ChordTemplate,
    PitchSet,
    is_valid,
    name_pitch,
    render_chord,
)
from chuk_mcp_chords.engine import ChordEngine, create_engine

__all__ = [
    "Accidental",
    "Chord",
    "ChordEngine",
    "ChordQuality",
    "ChordTemplate",
    "PitchSet",
    "create_engine",
    "is_valid",
    "name_pitch",
    "render_chord",
]
