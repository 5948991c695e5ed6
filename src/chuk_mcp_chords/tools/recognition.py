"""
Recognition tools - MCP tools for identifying, checking and naming chords.

Tools take plain pitch lists (MIDI numbers) and return JSON strings.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.constants import Accidental, ErrorMessages, SuccessMessages
from chuk_mcp_chords.core.chord import ChordQuality
from chuk_mcp_chords.core.dictionary import signature_of
from chuk_mcp_chords.core.formatter import render_chord
from chuk_mcp_chords.core.pitch import PitchClass, RandomAccidentalChooser, name_pitch
from chuk_mcp_chords.core.pitch_set import PitchSet
from chuk_mcp_chords.midi import read_midi_chords

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

    from chuk_mcp_chords.core.chord import Chord
    from chuk_mcp_chords.core.pitch import AccidentalChooser
    from chuk_mcp_chords.engine import ChordEngine

logger = logging.getLogger(__name__)


def parse_accidental(value: str) -> Accidental:
    """Parse '#', 'b', 'either' (or 'sharp', 'flat', 'random')."""
    aliases = {"sharp": Accidental.SHARP, "flat": Accidental.FLAT, "random": Accidental.EITHER}
    value = value.strip().lower()
    if value in aliases:
        return aliases[value]
    try:
        return Accidental(value)
    except ValueError:
        raise ValueError(ErrorMessages.UNKNOWN_ACCIDENTAL.format(accidental=value)) from None


def parse_pitch_class(value: int | str) -> int:
    """Accept a pitch class as an int or a name like 'Eb'."""
    if isinstance(value, str):
        return int(PitchClass.parse(value))
    return value % 12


def find_chord(
    engine: ChordEngine,
    root: int | str,
    quality: str,
    bass: int | str | None,
    extensions: list[int] | None = None,
) -> Chord:
    """
    Look a chord up in the engine's catalog by root, quality and tensions.

    Args:
        engine: The chord engine
        root: Root name or pitch class
        quality: Chord quality name
        bass: Bass for an inversion (None for root position)
        extensions: Tension intervals above the root ([14] = add9); none by default

    Raises:
        ValueError: If the catalog has no such chord or the bass is not one of its tones
    """
    root_pc = parse_pitch_class(root)
    quality_enum = ChordQuality.parse(quality)
    wanted = sorted(set(extensions or ()))
    for template in engine.catalog:
        if template.root != root_pc or template.quality != quality_enum:
            continue
        if [e - template.root for e in template.extensions] != wanted:
            continue
        chord = template.root_position()
        if bass is None:
            return chord
        bass_pc = parse_pitch_class(bass)
        if not template.tones.pitch_classes().has(bass_pc):
            raise ValueError(ErrorMessages.INVALID_BASS.format(bass=bass, chord=quality))
        return chord.with_bass(bass_pc)
    raise ValueError(f"No {quality_enum.value} chord on root {root} in the catalog")


def register_recognition_tools(
    mcp: ChukMCPServer,
    engine: ChordEngine,
    chooser: AccidentalChooser | None = None,
) -> dict[str, Any]:
    """
    Register chord recognition tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The chord engine
        chooser: Spelling strategy for accidental="either" (random by default)

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    chooser = chooser or RandomAccidentalChooser()

    def describe(chord: Chord, accidental: Accidental) -> dict[str, Any]:
        return {
            "symbol": render_chord(chord, accidental, chooser),
            "root_name": name_pitch(chord.root, False, accidental, chooser),
            "bass_name": name_pitch(chord.bass, False, accidental, chooser),
            **chord.to_dict(),
        }

    @mcp.tool  # type: ignore[arg-type]
    async def chord_identify(pitches: list[int], accidental: str = "#") -> str:
        """
        Identify the chord formed by a set of pitches.

        The lowest pitch decides between inversions when the pitch
        classes alone are ambiguous.

        Args:
            pitches: MIDI note numbers, any order (duplicates ignored)
            accidental: '#', 'b' or 'either'

        Returns:
            JSON string with the chord, or matched=false

        Example:
            chord_identify(pitches=[64, 67, 72])
        """
        try:
            acc = parse_accidental(accidental)
            played = PitchSet(pitches)
            chord = engine.resolve(played)
            if chord is None:
                return json.dumps(
                    {
                        "status": "success",
                        "matched": False,
                        "message": SuccessMessages.NO_MATCH.format(
                            signature=list(signature_of(played))
                        ),
                    }
                )

            result = describe(chord, acc)
            return json.dumps(
                {
                    "status": "success",
                    "matched": True,
                    "chord": result,
                    "message": SuccessMessages.CHORD_IDENTIFIED.format(symbol=result["symbol"]),
                }
            )
        except Exception as e:
            logger.exception("Failed to identify chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_identify"] = chord_identify

    @mcp.tool  # type: ignore[arg-type]
    async def chord_validate(
        root: str,
        quality: str,
        pitches: list[int],
        bass: str | None = None,
        strict: bool = True,
        extensions: list[int] | None = None,
    ) -> str:
        """
        Check whether played pitches voice a given chord.

        Args:
            root: Root name or pitch class ('C', 'F#', 9)
            quality: Chord quality ('major', 'minor7', ...)
            pitches: MIDI note numbers that were played
            bass: Bass for an inversion (defaults to the root)
            strict: Require the bass even in root position
            extensions: Tension intervals above the root ([14] for add9)

        Returns:
            JSON string with valid flag and any issues

        Example:
            chord_validate(root="C", quality="major", pitches=[48, 60, 64, 67, 71])
        """
        try:
            chord = find_chord(engine, root, quality, bass, extensions)
            result = engine.check(chord, PitchSet(pitches), strict)
            return json.dumps(
                {
                    "status": "success",
                    "valid": result.is_valid,
                    "issues": [
                        {"severity": i.severity.value, "code": i.code, "message": i.message}
                        for i in result.issues
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to validate chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_validate"] = chord_validate

    @mcp.tool  # type: ignore[arg-type]
    async def chord_render(
        root: str,
        quality: str,
        bass: str | None = None,
        accidental: str = "#",
        extensions: list[int] | None = None,
    ) -> str:
        """
        Render the symbol for a chord.

        Args:
            root: Root name or pitch class
            quality: Chord quality
            bass: Bass for an inversion
            accidental: '#', 'b' or 'either'
            extensions: Tension intervals above the root ([14] for add9)

        Returns:
            JSON string with the chord symbol

        Example:
            chord_render(root="A", quality="minor7", bass="C")
            chord_render(root="C", quality="major", extensions=[14])
        """
        try:
            chord = find_chord(engine, root, quality, bass, extensions)
            return json.dumps(
                {
                    "status": "success",
                    "symbol": render_chord(chord, parse_accidental(accidental), chooser),
                }
            )
        except Exception as e:
            logger.exception("Failed to render chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_render"] = chord_render

    @mcp.tool  # type: ignore[arg-type]
    async def chord_name_pitch(
        pitch: int,
        include_octave: bool = True,
        accidental: str = "#",
    ) -> str:
        """
        Spell a single pitch.

        Args:
            pitch: MIDI note number
            include_octave: Append the octave (C4 = 60)
            accidental: '#', 'b' or 'either'

        Returns:
            JSON string with the pitch name

        Example:
            chord_name_pitch(pitch=61, accidental="b")
        """
        try:
            name = name_pitch(pitch, include_octave, parse_accidental(accidental), chooser)
            return json.dumps({"status": "success", "pitch": pitch, "name": name})
        except Exception as e:
            logger.exception("Failed to name pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_name_pitch"] = chord_name_pitch

    @mcp.tool  # type: ignore[arg-type]
    async def chord_identify_midi(path: str, accidental: str = "#", min_notes: int = 3) -> str:
        """
        Identify the chords in a MIDI file.

        Every change in the set of held notes is one candidate chord.

        Args:
            path: Path to a .mid file
            accidental: '#', 'b' or 'either'
            min_notes: Ignore moments with fewer held notes

        Returns:
            JSON string with one entry per snapshot

        Example:
            chord_identify_midi(path="output/song.mid")
        """
        try:
            acc = parse_accidental(accidental)
            snapshots = read_midi_chords(Path(path), min_notes=min_notes)
            chords = []
            for snap in snapshots:
                chord = engine.resolve(snap.pitches)
                chords.append(
                    {
                        "start_ticks": snap.start_ticks,
                        "pitches": snap.pitches.to_list(),
                        "symbol": render_chord(chord, acc, chooser) if chord else None,
                    }
                )
            return json.dumps({"status": "success", "chords": chords, "count": len(chords)})
        except Exception as e:
            logger.exception("Failed to identify chords in MIDI file")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_identify_midi"] = chord_identify_midi

    return tools
