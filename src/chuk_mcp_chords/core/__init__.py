"""
Core chord primitives - the recognition layer.

These are the pieces everything else composes on:
- PitchSet: Ordered, duplicate-free pitches
- PitchClass / name_pitch: Pitch classes and letter names
- ChordQuality: The 17 chord qualities
- ChordTemplate: A catalog entry (tones, quality, root, extensions)
- Chord: A template resolved against a bass
- ChordDictionary: Signature index built from a catalog
- ChordMatcher: Played pitches -> Chord
- ChordValidator: Checks a voicing against a Chord
- render_chord / quality_glyph / quality_ordinal: Chord symbols
"""

from chuk_mcp_chords.core.chord import QUALITY_INTERVALS, Chord, ChordQuality, ChordTemplate
from chuk_mcp_chords.core.dictionary import ChordDictionary, signature_of
from chuk_mcp_chords.core.formatter import has_add9, quality_glyph, quality_ordinal, render_chord
from chuk_mcp_chords.core.matcher import ChordMatcher
from chuk_mcp_chords.core.pitch import (
    AccidentalChooser,
    PitchClass,
    RandomAccidentalChooser,
    name_pitch,
    octave_of,
    prefer_flats,
    prefer_sharps,
)
from chuk_mcp_chords.core.pitch_set import PitchSet
from chuk_mcp_chords.core.validator import (
    ChordValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    is_valid,
)

__all__ = [
    # Pitch
    "PitchSet",
    "PitchClass",
    "octave_of",
    "name_pitch",
    "AccidentalChooser",
    "RandomAccidentalChooser",
    "prefer_sharps",
    "prefer_flats",
    # Chord
    "ChordQuality",
    "ChordTemplate",
    "Chord",
    "QUALITY_INTERVALS",
    # Recognition
    "ChordDictionary",
    "signature_of",
    "ChordMatcher",
    "ChordValidator",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "is_valid",
    # Formatting
    "quality_glyph",
    "quality_ordinal",
    "render_chord",
    "has_add9",
]
