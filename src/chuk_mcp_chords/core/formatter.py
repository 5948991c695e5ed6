"""
Chord symbol formatting.

Turns a resolved Chord into the symbol a player reads: root name, quality
glyph, slash bass for inversions and an add9 suffix for a single ninth.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chuk_mcp_chords.constants import ADD9_INTERVAL, Accidental
from chuk_mcp_chords.core.chord import ChordQuality
from chuk_mcp_chords.core.pitch import name_pitch

if TYPE_CHECKING:
    from chuk_mcp_chords.core.chord import Chord
    from chuk_mcp_chords.core.pitch import AccidentalChooser

_GLYPHS: dict[ChordQuality, str] = {
    ChordQuality.MAJOR: "Δ",
    ChordQuality.MINOR: "-",
    ChordQuality.DIMINISHED: "°",
    ChordQuality.AUGMENTED: "+",
    ChordQuality.SUSPENDED_4: "sus4",
    ChordQuality.SUSPENDED_2: "sus2",
    ChordQuality.MAJOR_7: "Δ7",
    ChordQuality.DOMINANT_7: "7",
    ChordQuality.MINOR_7: "-7",
    ChordQuality.HALF_DIMINISHED_7: "ø7",
    ChordQuality.DIMINISHED_7: "o7",
    ChordQuality.MINOR_MAJOR_7: "−Δ7",
    ChordQuality.AUGMENTED_7: "+7",
    ChordQuality.AUGMENTED_MAJOR_7: "+Δ7",
    ChordQuality.SUSPENDED_7: "sus7",
    ChordQuality.MAJOR_6: "6",
    ChordQuality.MINOR_6: "-6",
}

# Stable ordinals for sorting and serialization - never reorder
_ORDINALS: dict[ChordQuality, int] = {
    ChordQuality.MAJOR: 0,
    ChordQuality.MINOR: 1,
    ChordQuality.DIMINISHED: 2,
    ChordQuality.AUGMENTED: 3,
    ChordQuality.SUSPENDED_4: 4,
    ChordQuality.SUSPENDED_2: 5,
    ChordQuality.MAJOR_7: 6,
    ChordQuality.DOMINANT_7: 7,
    ChordQuality.MINOR_7: 8,
    ChordQuality.HALF_DIMINISHED_7: 9,
    ChordQuality.DIMINISHED_7: 10,
    ChordQuality.MINOR_MAJOR_7: 11,
    ChordQuality.AUGMENTED_7: 12,
    ChordQuality.AUGMENTED_MAJOR_7: 13,
    ChordQuality.SUSPENDED_7: 14,
    ChordQuality.MAJOR_6: 15,
    ChordQuality.MINOR_6: 16,
}


def quality_glyph(quality: ChordQuality, suppress_major: bool = True) -> str:
    """
    Symbol for a chord quality.

    Plain major is written as the bare root unless suppress_major is False.
    """
    if quality == ChordQuality.MAJOR and suppress_major:
        return ""
    return _GLYPHS[quality]


def quality_ordinal(quality: ChordQuality) -> int:
    """Fixed 0-16 index of a quality."""
    return _ORDINALS[quality]


def has_add9(chord: Chord) -> bool:
    """True when the chord carries a single extension a major ninth above the root."""
    if chord.extensions.size != 1:
        return False
    tension = chord.extensions.bottom
    return tension is not None and tension % 12 + 12 - chord.root == ADD9_INTERVAL


def render_chord(
    chord: Chord,
    accidental: Accidental = Accidental.SHARP,
    chooser: AccidentalChooser | None = None,
) -> str:
    """
    Render a chord symbol.

    Args:
        chord: The chord to render
        accidental: Spelling preference for root and bass
        chooser: Decides spellings under Accidental.EITHER

    Returns:
        Symbol such as "C", "F#-7", "C/E", "Dadd9"
    """
    symbol = name_pitch(chord.root, False, accidental, chooser)
    symbol += quality_glyph(chord.quality)
    if chord.bass != chord.root:
        symbol += "/" + name_pitch(chord.bass, False, accidental, chooser)
    if has_add9(chord):
        symbol += "add9"
    return symbol
