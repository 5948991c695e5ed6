"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest
from mido import Message, MidiFile, MidiTrack

from chuk_mcp_chords.catalog import CatalogLoader
from chuk_mcp_chords.engine import ChordEngine, create_engine


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def catalog_loader() -> CatalogLoader:
    """Loader over the built-in catalog library."""
    return CatalogLoader()


@pytest.fixture
def engine(catalog_loader: CatalogLoader) -> ChordEngine:
    """Engine built from the standard catalog."""
    return create_engine(loader=catalog_loader)


def _block_chords(*chords: list[int], ticks: int = 480, channel: int = 0) -> MidiFile:
    """A MIDI file playing each chord as a block, one after another."""
    mid = MidiFile(ticks_per_beat=480)
    track = MidiTrack()
    mid.tracks.append(track)

    for chord in chords:
        for note in chord:
            track.append(Message("note_on", note=note, velocity=90, channel=channel, time=0))
        for i, note in enumerate(chord):
            delta = ticks if i == 0 else 0
            track.append(Message("note_off", note=note, velocity=0, channel=channel, time=delta))
    return mid


@pytest.fixture
def block_chords():
    """Factory for MIDI files of block chords."""
    return _block_chords
