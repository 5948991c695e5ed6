"""
MIDI input - reading sounding pitch sets from MIDI files.
"""

from chuk_mcp_chords.midi.reader import SoundingChord, read_midi_chords

__all__ = [
    "SoundingChord",
    "read_midi_chords",
]
