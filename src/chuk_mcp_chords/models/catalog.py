"""
Catalog models - the on-disk shape of a chord catalog.

A catalog file lists chords either explicitly (one record per chord) or as
formulas (an interval stack per quality, expanded over the 12 roots). Both
end up as ChordRecord, which converts to the core ChordTemplate.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, Field, field_validator

from chuk_mcp_chords.constants import NATURAL_PITCH_CLASSES, SchemaVersion
from chuk_mcp_chords.core.chord import ChordQuality, ChordTemplate
from chuk_mcp_chords.core.pitch import PitchClass
from chuk_mcp_chords.core.pitch_set import PitchSet


def _parse_root(value: Any) -> Any:
    """Accept a root as an int, a digit string or a letter name like 'F#'."""
    if isinstance(value, str):
        return int(PitchClass.parse(value))
    return value


def _check_root(value: int) -> int:
    if not 0 <= value <= 11:
        raise ValueError(f"Root out of range 0-11: {value}")
    return value


class ChordRecord(BaseModel):
    """A single catalog entry as stored in a catalog file."""

    tones: list[int] = Field(..., min_length=1, description="Defining tones")
    quality: ChordQuality = Field(..., description="Chord quality")
    root: int = Field(..., ge=0, le=11, description="Root pitch class")
    extensions: list[int] = Field(default_factory=list, description="Tension tones")

    model_config = {"frozen": True}

    @field_validator("root", mode="before")
    @classmethod
    def parse_root(cls, v: Any) -> Any:
        return _parse_root(v)

    def to_template(self) -> ChordTemplate:
        """Convert to the core template."""
        return ChordTemplate(
            tones=PitchSet(self.tones),
            quality=self.quality,
            root=self.root,
            extensions=PitchSet(self.extensions),
        )


class TensionFormula(BaseModel):
    """Tension variants of a quality (e.g. major + 9th = add9)."""

    quality: ChordQuality
    intervals: list[int] = Field(..., min_length=1, description="Semitones above the root")

    model_config = {"frozen": True}


class CatalogFile(BaseModel):
    """A parsed catalog file."""

    schema_version: SchemaVersion = Field(default="catalog/v1", alias="schema")
    name: str = Field(..., description="Catalog name")
    description: str = Field(default="")
    formulas: dict[ChordQuality, list[int]] = Field(
        default_factory=dict,
        description="Interval stack per quality, expanded over all roots",
    )
    tensions: list[TensionFormula] = Field(default_factory=list)
    chords: list[ChordRecord] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    def records(self) -> list[ChordRecord]:
        """
        Every chord of the catalog, in catalog order.

        Formula chords come first (quality by quality, root by root), then
        tension variants, then explicit records.
        """
        records: list[ChordRecord] = []
        for quality, intervals in self.formulas.items():
            for root in range(12):
                records.append(
                    ChordRecord(
                        tones=[root + i for i in intervals],
                        quality=quality,
                        root=root,
                    )
                )
        for tension in self.tensions:
            stack = self.formulas.get(tension.quality)
            if stack is None:
                raise ValueError(f"Tension for '{tension.quality.value}' has no formula")
            for root in range(12):
                records.append(
                    ChordRecord(
                        tones=[root + i for i in stack],
                        quality=tension.quality,
                        root=root,
                        extensions=[root + i for i in tension.intervals],
                    )
                )
        records.extend(self.chords)
        return records


class CatalogMetadata(BaseModel):
    """Lightweight catalog info for listing."""

    name: str
    description: str
    chord_count: int


class CatalogFilter(BaseModel):
    """
    Which catalog chords are in play.

    The default mirrors a beginner setting: major triads on the natural
    roots, root position only, no tensions.
    """

    qualities: set[ChordQuality] | None = Field(
        default=None, description="Allowed qualities (None = all)"
    )
    roots: set[Annotated[int, AfterValidator(_check_root)]] | None = Field(
        default=None, description="Allowed roots (None = all)"
    )
    include_inversions: bool = Field(default=False)
    include_tensions: bool = Field(default=False)

    model_config = {"frozen": True}

    @field_validator("roots", mode="before")
    @classmethod
    def parse_roots(cls, v: Any) -> Any:
        if v is None:
            return v
        return {_parse_root(r) for r in v}

    @classmethod
    def default(cls) -> CatalogFilter:
        return cls(qualities={ChordQuality.MAJOR}, roots=set(NATURAL_PITCH_CLASSES))

    def accepts(self, template: ChordTemplate) -> bool:
        """True when a template passes the quality, root and tension filters."""
        if self.qualities is not None and template.quality not in self.qualities:
            return False
        if self.roots is not None and template.root not in self.roots:
            return False
        if not self.include_tensions and template.extensions.size > 0:
            return False
        return True
