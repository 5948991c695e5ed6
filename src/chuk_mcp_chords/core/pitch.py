"""
Pitch primitives - PitchClass and pitch naming.

A pitch is a plain int (MIDI numbering, C4 = 60). PitchClass names the 12
octave-independent classes. Naming a chromatic pitch needs an accidental
choice; when the caller does not care, an AccidentalChooser decides.
"""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Protocol

from chuk_mcp_chords.constants import NATURAL_LETTERS, OCTAVE, Accidental

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db' or '9'."""
        name = name.strip()

        if name.isdigit():
            if int(name) >= OCTAVE:
                raise ValueError(f"Pitch class out of range 0-11: {name}")
            return cls(int(name))

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")


def octave_of(pitch: int) -> int:
    """Octave number of a pitch. Octave 4 starts at middle C (60)."""
    return pitch // OCTAVE - 1


class AccidentalChooser(Protocol):
    """Strategy deciding how to spell a chromatic pitch under Accidental.EITHER."""

    def __call__(self, pitch: int) -> Accidental: ...


def prefer_sharps(pitch: int) -> Accidental:
    """Deterministic chooser - always spell with a sharp."""
    return Accidental.SHARP


def prefer_flats(pitch: int) -> Accidental:
    """Deterministic chooser - always spell with a flat."""
    return Accidental.FLAT


class RandomAccidentalChooser:
    """
    Coin-flip between sharp and flat spellings.

    Pass a seeded random.Random to make the sequence reproducible.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def __call__(self, pitch: int) -> Accidental:
        return Accidental.SHARP if self._rng.random() < 0.5 else Accidental.FLAT


def name_pitch(
    pitch: int,
    include_octave: bool = False,
    accidental: Accidental = Accidental.SHARP,
    chooser: AccidentalChooser | None = None,
) -> str:
    """
    Spell a pitch as a letter name.

    Args:
        pitch: Pitch number (MIDI numbering)
        include_octave: Append the octave number (omitted when negative)
        accidental: Spelling preference for the five chromatic classes
        chooser: Decides the spelling under Accidental.EITHER
            (defaults to sharps)

    Returns:
        Name such as "C", "F#", "Bb4"
    """
    name = NATURAL_LETTERS[pitch % OCTAVE]
    if name == " ":
        if accidental == Accidental.EITHER:
            accidental = (chooser or prefer_sharps)(pitch)
        if accidental == Accidental.FLAT:
            name = f"{NATURAL_LETTERS[(pitch + 1) % OCTAVE]}b"
        else:
            name = f"{NATURAL_LETTERS[(pitch - 1) % OCTAVE]}#"

    if include_octave:
        octave = octave_of(pitch)
        if octave >= 0:
            name += str(octave)
    return name
