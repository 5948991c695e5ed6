"""
MIDI input - turns recorded notes into sounding pitch sets.

Reads note_on/note_off messages with mido, tracks which notes are held and
takes a snapshot every time that changes. Each snapshot is one candidate
chord for the matcher.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from mido import MidiFile, merge_tracks

from chuk_mcp_chords.constants import DRUM_CHANNEL, ErrorMessages
from chuk_mcp_chords.core.pitch_set import PitchSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SoundingChord:
    """The set of notes held from start_ticks until the next change."""

    start_ticks: int
    pitches: PitchSet


def read_midi_chords(
    source: MidiFile | Path | str,
    min_notes: int = 1,
) -> list[SoundingChord]:
    """
    Extract held-note snapshots from a MIDI file.

    Drum channel notes are ignored. A note_on with velocity 0 counts as a
    note_off. Messages sharing a tick are applied together before the
    snapshot is taken.

    Args:
        source: A loaded MidiFile or a path to one
        min_notes: Skip snapshots with fewer held notes than this

    Returns:
        Snapshots in time order

    Raises:
        FileNotFoundError: If a path is given and does not exist
    """
    if isinstance(source, MidiFile):
        midi = source
    else:
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(ErrorMessages.MIDI_NOT_FOUND.format(path=path))
        midi = MidiFile(path)

    held: dict[int, int] = {}  # pitch -> number of channels holding it
    snapshots: list[SoundingChord] = []
    last: PitchSet | None = None
    now = 0

    def snapshot(at: int) -> None:
        nonlocal last
        current = PitchSet(held)
        if current == last:
            return
        last = current
        if current.size >= min_notes:
            snapshots.append(SoundingChord(start_ticks=at, pitches=current))

    for msg in merge_tracks(midi.tracks):
        if msg.time:
            snapshot(now)
            now += msg.time

        if msg.type not in ("note_on", "note_off") or msg.channel == DRUM_CHANNEL:
            continue

        if msg.type == "note_on" and msg.velocity > 0:
            held[msg.note] = held.get(msg.note, 0) + 1
        elif msg.note in held:
            held[msg.note] -= 1
            if held[msg.note] == 0:
                del held[msg.note]

    snapshot(now)
    logger.debug("Read %d chord snapshots from MIDI", len(snapshots))
    return snapshots
