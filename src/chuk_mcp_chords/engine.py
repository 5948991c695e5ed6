"""
ChordEngine - a catalog with its dictionary, matcher and validator.

create_engine() is the one place the dictionary gets built. The engine is
read-only afterwards, so a single instance can serve any number of callers.
Tests build their own engines from small catalogs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chuk_mcp_chords.catalog import CatalogLoader, ChordCatalog
from chuk_mcp_chords.constants import DEFAULT_CATALOG, Accidental, ErrorMessages
from chuk_mcp_chords.core.dictionary import ChordDictionary
from chuk_mcp_chords.core.formatter import render_chord
from chuk_mcp_chords.core.matcher import ChordMatcher
from chuk_mcp_chords.core.validator import ChordValidator, ValidationResult
from chuk_mcp_chords.models.catalog import CatalogFilter

if TYPE_CHECKING:
    from chuk_mcp_chords.core.chord import Chord
    from chuk_mcp_chords.core.pitch import AccidentalChooser
    from chuk_mcp_chords.core.pitch_set import PitchSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChordEngine:
    """Everything needed to recognize, check and name chords."""

    catalog: ChordCatalog
    dictionary: ChordDictionary
    matcher: ChordMatcher
    validator: ChordValidator = field(default_factory=ChordValidator)

    def resolve(self, played: PitchSet) -> Chord | None:
        """Identify the chord being played (None when nothing matches)."""
        return self.matcher.resolve(played)

    def is_valid(self, chord: Chord, played: PitchSet, strict: bool = True) -> bool:
        """Check a voicing against a chord."""
        return self.validator.is_valid(chord, played, strict)

    def check(self, chord: Chord, played: PitchSet, strict: bool = True) -> ValidationResult:
        """Check a voicing and report every issue."""
        return self.validator.check(chord, played, strict)

    def identify(
        self,
        played: PitchSet,
        accidental: Accidental = Accidental.SHARP,
        chooser: AccidentalChooser | None = None,
    ) -> str | None:
        """Resolve and render in one step."""
        chord = self.resolve(played)
        if chord is None:
            return None
        return render_chord(chord, accidental, chooser)

    def selectable_chords(self, chord_filter: CatalogFilter | None = None) -> list[Chord]:
        """
        Chords enabled by a filter.

        Args:
            chord_filter: Selection (defaults to CatalogFilter.default())

        Returns:
            Root-position chords in catalog order, each followed by its
            inversions when the filter includes them
        """
        chord_filter = chord_filter or CatalogFilter.default()
        chords: list[Chord] = []
        for _, template in self.catalog.select(chord_filter):
            chords.append(template.root_position())
            if chord_filter.include_inversions:
                chords.extend(template.inversions())
        return chords


def create_engine(
    catalog: ChordCatalog | None = None,
    loader: CatalogLoader | None = None,
    catalog_name: str = DEFAULT_CATALOG,
) -> ChordEngine:
    """
    Build an engine.

    Args:
        catalog: Catalog to index; loaded by name when omitted
        loader: Loader used when no catalog is given
        catalog_name: Catalog to load when no catalog is given

    Raises:
        ValueError: If the named catalog does not exist
    """
    if catalog is None:
        loader = loader or CatalogLoader()
        catalog = loader.get_catalog(catalog_name)
        if catalog is None:
            raise ValueError(ErrorMessages.CATALOG_NOT_FOUND.format(name=catalog_name))

    dictionary = ChordDictionary.build(catalog)
    logger.info("Chord engine ready: catalog '%s' (%d chords)", catalog.name, len(catalog))
    return ChordEngine(catalog=catalog, dictionary=dictionary, matcher=ChordMatcher(dictionary))
