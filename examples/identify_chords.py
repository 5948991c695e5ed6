#!/usr/bin/env python3
"""
Example: Identifying and checking chords.

Builds an engine from the standard catalog, identifies a few voicings,
checks a voicing against a target chord and reads a progression back out
of a MIDI file.

Usage:
    python examples/identify_chords.py
"""

import tempfile
from pathlib import Path

from mido import Message, MidiFile, MidiTrack

from chuk_mcp_chords import Accidental, PitchSet, create_engine, render_chord
from chuk_mcp_chords.midi import read_midi_chords
from chuk_mcp_chords.models import CatalogFilter


def main() -> None:
    """Demonstrate chord recognition."""
    print("CHUK Chords Demo")
    print("=" * 40)
    print()

    engine = create_engine()
    print(f"Catalog: {engine.catalog.name} ({len(engine.catalog)} chords)")
    print(f"Signatures: {len(engine.dictionary)}")
    print()

    # Identify some voicings
    voicings = {
        "C E G": [60, 64, 67],
        "E G C": [64, 67, 72],
        "A C E G": [57, 60, 64, 67],
        "Bb D F": [58, 62, 65],
        "C E G D": [60, 64, 67, 74],
        "C C# D": [60, 61, 62],
    }
    print("Identify:")
    for label, pitches in voicings.items():
        symbol = engine.identify(PitchSet(pitches), Accidental.FLAT)
        print(f"  {label:10} -> {symbol or '(no match)'}")
    print()

    # Check a voicing against a target
    target = engine.resolve(PitchSet([60, 64, 67]))
    if target is not None:
        played = PitchSet([48, 60, 64, 67, 71])
        result = engine.check(target, played)
        print(f"Check {played} against {render_chord(target)}:")
        print(f"  valid: {result.is_valid}")
        for issue in result.issues:
            print(f"  {issue}")
        print()

    # Beginner chord set
    print("Default selection:")
    beginner = engine.selectable_chords(CatalogFilter.default())
    print("  " + " ".join(render_chord(c) for c in beginner))
    print()

    # Read a progression from MIDI
    mid = MidiFile(ticks_per_beat=480)
    track = MidiTrack()
    mid.tracks.append(track)
    for chord in ([60, 64, 67], [57, 60, 65], [55, 59, 62, 65], [60, 64, 67]):
        for note in chord:
            track.append(Message("note_on", note=note, velocity=90, time=0))
        for i, note in enumerate(chord):
            track.append(Message("note_off", note=note, velocity=0, time=480 if i == 0 else 0))

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "progression.mid"
        mid.save(path)
        print(f"Progression in {path.name}:")
        for snap in read_midi_chords(path, min_notes=3):
            print(f"  tick {snap.start_ticks:5}: {engine.identify(snap.pitches)}")


if __name__ == "__main__":
    main()
