"""
Constants and enums for the chord system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class Accidental(str, Enum):
    """
    Accidental preference when spelling a chromatic pitch.

    EITHER defers the choice to an accidental chooser, which may be
    deterministic (tests) or random (ear training).
    """

    SHARP = "#"
    FLAT = "b"
    EITHER = "either"


# Natural letters laid over the 12 pitch classes; a space marks a chromatic class
NATURAL_LETTERS = "C D EF G A B"

# Pitch classes of the seven natural letters
NATURAL_PITCH_CLASSES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Semitones in an octave
OCTAVE = 12

# Extension interval (root to tension, mod-reduced) that renders as "add9"
ADD9_INTERVAL = 14

# GM drum channel (0-indexed) - ignored when reading chords from MIDI
DRUM_CHANNEL = 9

# Built-in catalog used when none is named
DEFAULT_CATALOG = "standard"

# Schema versions - frozen for v1
SchemaVersion = Literal["catalog/v1"]


class ErrorMessages:
    """Standardized error messages."""

    CATALOG_NOT_FOUND = "Catalog '{name}' not found."
    CATALOG_INVALID = "Invalid chord catalog '{path}': {detail}"
    UNKNOWN_QUALITY = "Unknown chord quality: '{quality}'."
    UNKNOWN_ACCIDENTAL = "Unknown accidental: '{accidental}'. Expected '#', 'b' or 'either'."
    INVALID_BASS = "Bass {bass} is not a tone of {chord}."
    MIDI_NOT_FOUND = "MIDI file not found: {path}"


class SuccessMessages:
    """Standardized success messages."""

    CHORD_IDENTIFIED = "Identified {symbol}."
    NO_MATCH = "No chord matches pitch classes {signature}."
