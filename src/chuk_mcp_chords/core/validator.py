"""
Chord validator - checks a played voicing against a target chord.

Validates:
- The bass note (always when strict, and for any inversion)
- Every defining tone is sounding
- Every extension is sounding
- The distinct pitch-class count differs from the chord's tone count
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from chuk_mcp_chords.core.pitch import name_pitch

if TYPE_CHECKING:
    from chuk_mcp_chords.core.chord import Chord
    from chuk_mcp_chords.core.pitch_set import PitchSet


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Voicing is not the chord
    WARNING = "warning"  # Acceptable but worth pointing out


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    code: str
    message: str

    def __str__(self) -> str:
        return f"[{self.severity.value.upper()}] {self.code}: {self.message}"


class ValidationResult:
    """Result of validating a voicing."""

    def __init__(self) -> None:
        self.issues: list[ValidationIssue] = []

    def add_error(self, code: str, message: str) -> None:
        """Add an error issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.ERROR, code, message))

    def add_warning(self, code: str, message: str) -> None:
        """Add a warning issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.WARNING, code, message))

    @property
    def is_valid(self) -> bool:
        """Return True if no errors (warnings are OK)."""
        return not any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def codes(self) -> list[str]:
        return [i.code for i in self.issues]

    def __bool__(self) -> bool:
        """Boolean conversion returns is_valid."""
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(str(issue) for issue in self.issues)


class ChordValidator:
    """Checks played pitch sets against chords."""

    def check(self, chord: Chord, played: PitchSet, strict: bool = True) -> ValidationResult:
        """
        Validate a voicing and report every problem found.

        Args:
            chord: The chord the player was asked for
            played: What was played
            strict: Require the bass even for root-position chords

        Returns:
            ValidationResult with any issues found
        """
        result = ValidationResult()

        if played.bottom is None:
            result.add_error("EMPTY", "Nothing was played")
            return result

        if strict or chord.bass != chord.root:
            bass = played.bottom % 12
            if bass != chord.bass:
                result.add_error(
                    "WRONG_BASS",
                    f"Expected {name_pitch(chord.bass)} in the bass, got {name_pitch(bass)}",
                )

        classes = played.pitch_classes()

        # An exact pitch-class count is rejected. Unconfirmed rule, kept as-is.
        if classes.size == chord.template.tone_count:
            result.add_error(
                "TONE_COUNT",
                f"Played {classes.size} distinct pitch classes, "
                f"matching the chord's tone count",
            )

        for tone in chord.tones:
            if not classes.has(tone % 12):
                result.add_error("MISSING_TONE", f"Missing chord tone {name_pitch(tone)}")

        for tone in chord.extensions:
            if not classes.has(tone % 12):
                result.add_error("MISSING_EXTENSION", f"Missing extension {name_pitch(tone)}")

        expected = set(chord.template.signature())
        for extra in classes.filter(lambda pc: pc not in expected):
            result.add_warning("EXTRA_TONE", f"{name_pitch(extra)} is not part of the chord")

        return result

    def is_valid(self, chord: Chord, played: PitchSet, strict: bool = True) -> bool:
        """True when the voicing passes every check."""
        return self.check(chord, played, strict).is_valid


def is_valid(chord: Chord, played: PitchSet, strict: bool = True) -> bool:
    """Module-level shortcut for ChordValidator().is_valid."""
    return ChordValidator().is_valid(chord, played, strict)
