"""
Chord primitives - ChordQuality, ChordTemplate, Chord.

A ChordTemplate is one entry of the catalog: the defining tones, the
quality, the root and any tension tones. A Chord is a template resolved
against a bass - the same template appears once in root position and once
per inversion.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.constants import ErrorMessages
from chuk_mcp_chords.core.pitch_set import PitchSet

if TYPE_CHECKING:
    from collections.abc import Iterable


class ChordQuality(str, Enum):
    """The 17 chord qualities the catalog knows about."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"
    SUSPENDED_4 = "suspended4"
    SUSPENDED_2 = "suspended2"

    MAJOR_7 = "major7"
    DOMINANT_7 = "dominant7"
    MINOR_7 = "minor7"
    HALF_DIMINISHED_7 = "half-diminished7"
    DIMINISHED_7 = "diminished7"
    MINOR_MAJOR_7 = "minor-major7"
    AUGMENTED_7 = "augmented7"
    AUGMENTED_MAJOR_7 = "augmented-major7"
    SUSPENDED_7 = "suspended7"

    MAJOR_6 = "major6"
    MINOR_6 = "minor6"

    @classmethod
    def parse(cls, name: str) -> ChordQuality:
        """Parse a quality from its value ('minor7') or member name ('MINOR_7')."""
        name = name.strip()
        for member in cls:
            if name == member.value or name.upper() == member.name:
                return member
        raise ValueError(ErrorMessages.UNKNOWN_QUALITY.format(quality=name))


# Interval stacks (semitones above the root) used to build catalogs.
QUALITY_INTERVALS: dict[ChordQuality, tuple[int, ...]] = {
    ChordQuality.MAJOR: (0, 4, 7),
    ChordQuality.MINOR: (0, 3, 7),
    ChordQuality.DIMINISHED: (0, 3, 6),
    ChordQuality.AUGMENTED: (0, 4, 8),
    ChordQuality.SUSPENDED_4: (0, 5, 7),
    ChordQuality.SUSPENDED_2: (0, 2, 7),
    ChordQuality.MAJOR_7: (0, 4, 7, 11),
    ChordQuality.DOMINANT_7: (0, 4, 7, 10),
    ChordQuality.MINOR_7: (0, 3, 7, 10),
    ChordQuality.HALF_DIMINISHED_7: (0, 3, 6, 10),
    ChordQuality.DIMINISHED_7: (0, 3, 6, 9),
    ChordQuality.MINOR_MAJOR_7: (0, 3, 7, 11),
    ChordQuality.AUGMENTED_7: (0, 4, 8, 10),
    ChordQuality.AUGMENTED_MAJOR_7: (0, 4, 8, 11),
    ChordQuality.SUSPENDED_7: (0, 5, 7, 10),
    ChordQuality.MAJOR_6: (0, 4, 7, 9),
    ChordQuality.MINOR_6: (0, 3, 7, 9),
}


@dataclass(frozen=True, init=False)
class ChordTemplate:
    """
    A catalog entry.

    Tones may be stored stacked above the root (A minor 7 as 9, 12, 16, 19);
    everything that compares them reduces mod 12. Tones and extensions are
    held as sorted tuples, so templates are hashable and the tones and
    extensions properties always hand out a fresh PitchSet.
    """

    _tones: tuple[int, ...]
    quality: ChordQuality
    root: int
    _extensions: tuple[int, ...]

    def __init__(
        self,
        tones: Iterable[int],
        quality: ChordQuality,
        root: int,
        extensions: Iterable[int] = (),
    ) -> None:
        object.__setattr__(self, "_tones", tuple(PitchSet(tones)))
        object.__setattr__(self, "quality", quality)
        object.__setattr__(self, "root", root)
        object.__setattr__(self, "_extensions", tuple(PitchSet(extensions)))

    @property
    def tones(self) -> PitchSet:
        """Defining tones, ascending."""
        return PitchSet(self._tones)

    @property
    def extensions(self) -> PitchSet:
        """Tension tones, ascending."""
        return PitchSet(self._extensions)

    @classmethod
    def from_intervals(
        cls,
        root: int,
        quality: ChordQuality,
        intervals: tuple[int, ...] | None = None,
        extension_intervals: tuple[int, ...] = (),
    ) -> ChordTemplate:
        """
        Build a template by stacking intervals above a root.

        Args:
            root: Root pitch class (0-11)
            quality: Chord quality
            intervals: Semitones above the root (defaults to the quality's stack)
            extension_intervals: Tension tones above the root (14 = 9th)
        """
        stack = intervals if intervals is not None else QUALITY_INTERVALS[quality]
        return cls(
            tones=PitchSet(root + i for i in stack),
            quality=quality,
            root=root,
            extensions=PitchSet(root + i for i in extension_intervals),
        )

    @property
    def tone_count(self) -> int:
        """Defining tones plus extensions."""
        return len(self._tones) + len(self._extensions)

    def signature(self) -> tuple[int, ...]:
        """Distinct pitch classes of tones and extensions, ascending."""
        classes = self.tones.pitch_classes()
        for tone in self.extensions:
            classes.add(tone % 12)
        return tuple(classes)

    def at_bass(self, bass: int) -> Chord:
        """Resolve this template against a bass pitch class."""
        return Chord(template=self, bass=bass % 12)

    def root_position(self) -> Chord:
        """The template voiced with its root in the bass."""
        return self.at_bass(self.root)

    def inversions(self) -> list[Chord]:
        """One chord per defining tone other than the root, in tone order."""
        return [self.at_bass(tone) for tone in self.tones if tone % 12 != self.root % 12]


@dataclass(frozen=True)
class Chord:
    """
    A resolved chord - a template plus the pitch class meant to sound lowest.

    For root position bass == root; for an inversion it is another tone.
    """

    template: ChordTemplate
    bass: int

    @property
    def tones(self) -> PitchSet:
        return self.template.tones

    @property
    def quality(self) -> ChordQuality:
        return self.template.quality

    @property
    def root(self) -> int:
        return self.template.root

    @property
    def extensions(self) -> PitchSet:
        return self.template.extensions

    @property
    def is_inversion(self) -> bool:
        """True when something other than the root is in the bass."""
        return self.bass != self.root

    def with_bass(self, bass: int) -> Chord:
        """Same template, different bass."""
        return replace(self, bass=bass % 12)

    def voicing(self, octave: int = 4) -> PitchSet:
        """
        A concrete close voicing with the bass lowest.

        Args:
            octave: Octave of the bass note (4 puts it at or above middle C)

        Returns:
            PitchSet of MIDI pitches, tones then extensions above the bass
        """
        base = self.bass + (octave + 1) * 12
        pitches = PitchSet([base])
        for tone in self.tones:
            pitches.add(base + (tone - self.bass) % 12)
        for tone in self.extensions:
            pitches.add(base + 12 + (tone - self.bass) % 12)
        return pitches

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "quality": self.quality.value,
            "root": self.root,
            "bass": self.bass,
            "tones": self.tones.to_list(),
            "extensions": self.extensions.to_list(),
        }
