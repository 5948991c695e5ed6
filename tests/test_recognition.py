"""
Tests for chord recognition.

Tests cover:
- ChordDictionary construction and bucket order
- ChordMatcher resolution and tie-breaks
- ChordValidator rules and issue codes
- Round trip over the standard catalog
"""

from chuk_mcp_chords.catalog import ChordCatalog
from chuk_mcp_chords.core import (
    ChordDictionary,
    ChordMatcher,
    ChordQuality,
    ChordTemplate,
    ChordValidator,
    PitchSet,
    is_valid,
    render_chord,
    signature_of,
)
from chuk_mcp_chords.engine import ChordEngine, create_engine


def _matcher(*templates: ChordTemplate) -> ChordMatcher:
    return ChordMatcher(ChordDictionary.build(templates))


C_MAJOR = ChordTemplate.from_intervals(0, ChordQuality.MAJOR)
C_ADD9 = ChordTemplate.from_intervals(0, ChordQuality.MAJOR, extension_intervals=(14,))
C_SIX = ChordTemplate.from_intervals(0, ChordQuality.MAJOR_6)
A_MINOR_7 = ChordTemplate.from_intervals(9, ChordQuality.MINOR_7)


class TestChordDictionary:
    """Tests for dictionary construction."""

    def test_signature_of(self) -> None:
        """Signatures are sorted distinct pitch classes."""
        assert signature_of([67, 60, 64, 72]) == (0, 4, 7)
        assert signature_of([]) == ()

    def test_bucket_order(self) -> None:
        """Root positions come first, then inversions, each in catalog order."""
        dictionary = ChordDictionary.build([C_SIX, A_MINOR_7])
        bucket = dictionary.lookup((0, 4, 7, 9))
        assert [(c.quality, c.bass) for c in bucket] == [
            (ChordQuality.MAJOR_6, 0),
            (ChordQuality.MINOR_7, 9),
            (ChordQuality.MAJOR_6, 4),
            (ChordQuality.MAJOR_6, 7),
            (ChordQuality.MAJOR_6, 9),
            (ChordQuality.MINOR_7, 0),
            (ChordQuality.MINOR_7, 4),
            (ChordQuality.MINOR_7, 7),
        ]

    def test_extensions_change_signature(self) -> None:
        """A tension variant lands in its own bucket."""
        dictionary = ChordDictionary.build([C_MAJOR, C_ADD9])
        assert len(dictionary) == 2
        assert len(dictionary.lookup((0, 4, 7))) == 3
        assert len(dictionary.lookup((0, 2, 4, 7))) == 3
        assert (0, 2, 4, 7) in dictionary

    def test_unknown_signature(self) -> None:
        """Unknown signatures give an empty bucket."""
        dictionary = ChordDictionary.build([C_MAJOR])
        assert dictionary.lookup((1, 2)) == ()

    def test_duplicates_kept(self) -> None:
        """Duplicate entries are not rejected."""
        dictionary = ChordDictionary.build([C_MAJOR, C_MAJOR])
        assert dictionary.variant_count == 6


class TestChordMatcher:
    """Tests for ChordMatcher.resolve."""

    def test_root_position(self, engine: ChordEngine) -> None:
        """C E G is C major."""
        chord = engine.resolve(PitchSet([0, 4, 7]))
        assert chord is not None
        assert chord.quality == ChordQuality.MAJOR
        assert chord.root == 0
        assert chord.bass == 0
        assert render_chord(chord) == "C"

    def test_first_inversion(self, engine: ChordEngine) -> None:
        """E in the bass gives C/E."""
        chord = engine.resolve(PitchSet([4, 7, 12]))
        assert chord is not None
        assert chord.quality == ChordQuality.MAJOR
        assert chord.root == 0
        assert chord.bass == 4
        assert render_chord(chord) == "C/E"

    def test_octave_spread(self, engine: ChordEngine) -> None:
        """Doublings and wide voicings do not matter."""
        assert engine.identify(PitchSet([36, 55, 60, 64, 76])) == "C"

    def test_empty(self, engine: ChordEngine) -> None:
        """Nothing played, nothing matched."""
        assert engine.resolve(PitchSet()) is None

    def test_unknown_set(self, engine: ChordEngine) -> None:
        """Pitch classes outside the catalog do not match."""
        assert engine.resolve(PitchSet([60, 61, 62])) is None
        assert engine.identify(PitchSet([60, 61])) is None

    def test_bass_disambiguates_shared_sets(self, engine: ChordEngine) -> None:
        """C6 and Am7 share pitch classes; the bass decides."""
        assert engine.identify(PitchSet([57, 60, 64, 67])) == "A-7"
        assert engine.identify(PitchSet([60, 64, 67, 69])) == "C6"
        # Neither is in root position; minor 7 precedes major 6 in the catalog
        assert engine.identify(PitchSet([64, 67, 69, 72])) == "A-7/E"

    def test_symmetric_chords(self, engine: ChordEngine) -> None:
        """Augmented and diminished 7 chords are named from the bass."""
        assert engine.identify(PitchSet([60, 64, 68])) == "C+"
        assert engine.identify(PitchSet([64, 68, 72])) == "E+"
        assert engine.identify(PitchSet([60, 63, 66, 69])) == "Co7"

    def test_suspended(self, engine: ChordEngine) -> None:
        """Csus4 and Fsus2 share C F G."""
        assert engine.identify(PitchSet([60, 65, 67])) == "Csus4"
        assert engine.identify(PitchSet([65, 67, 72])) == "Fsus2"

    def test_add9(self, engine: ChordEngine) -> None:
        """A ninth on top is recognized as add9."""
        assert engine.identify(PitchSet([60, 64, 67, 74])) == "Cadd9"
        assert engine.identify(PitchSet([60, 63, 67, 74])) == "C-add9"

    def test_bass_outside_variants(self, engine: ChordEngine) -> None:
        """A bass that is no variant's bass does not match."""
        # The ninth is an extension, not an inversion tone
        assert engine.resolve(PitchSet([62, 64, 67, 72])) is None

    def test_single_candidate_ignores_bass(self) -> None:
        """An unambiguous bucket resolves whatever is lowest."""
        single = ChordTemplate(tones=PitchSet([0]), quality=ChordQuality.MAJOR, root=0)
        matcher = _matcher(single)
        chord = matcher.resolve(PitchSet([36, 48]))
        assert chord is not None
        assert chord.root == 0

    def test_earlier_duplicate_wins(self) -> None:
        """With identical signature and bass the catalog order decides."""
        bogus = ChordTemplate(tones=PitchSet([0, 4, 7]), quality=ChordQuality.AUGMENTED, root=0)
        matcher = _matcher(C_MAJOR, bogus)
        chord = matcher.resolve(PitchSet([60, 64, 67]))
        assert chord is not None
        assert chord.quality == ChordQuality.MAJOR

    def test_catalog_round_trip(self, engine: ChordEngine) -> None:
        """Every catalog chord, voiced from its root, resolves back to itself."""
        for template in engine.catalog:
            chord = engine.resolve(template.tones)
            assert chord is not None, template
            assert chord.quality == template.quality, template
            assert chord.root == template.root, template


class TestChordValidator:
    """Tests for ChordValidator."""

    def test_exact_triad_rejected(self) -> None:
        """A voicing with exactly the chord's tone count fails."""
        chord = C_MAJOR.root_position()
        result = ChordValidator().check(chord, PitchSet([60, 64, 67]))
        assert not result.is_valid
        assert result.codes == ["TONE_COUNT"]
        assert not is_valid(chord, PitchSet([48, 60, 64, 67]))

    def test_extra_tone_accepted(self) -> None:
        """All tones plus an extra class passes, with a warning."""
        chord = C_MAJOR.root_position()
        result = ChordValidator().check(chord, PitchSet([60, 64, 67, 71]))
        assert result.is_valid
        assert bool(result)
        assert result.codes == ["EXTRA_TONE"]
        assert result.errors == []

    def test_strict_bass(self) -> None:
        """Strict mode checks the bass even in root position."""
        chord = C_MAJOR.root_position()
        played = PitchSet([64, 67, 71, 72])
        assert not is_valid(chord, played, strict=True)
        assert is_valid(chord, played, strict=False)
        assert "WRONG_BASS" in ChordValidator().check(chord, played).codes

    def test_inversion_always_checks_bass(self) -> None:
        """An inversion needs its bass even when not strict."""
        chord = C_MAJOR.at_bass(4)
        assert not is_valid(chord, PitchSet([60, 64, 67, 71]), strict=False)
        assert is_valid(chord, PitchSet([64, 67, 71, 72]), strict=False)

    def test_missing_tone(self) -> None:
        """Every defining tone must sound."""
        chord = C_MAJOR.root_position()
        result = ChordValidator().check(chord, PitchSet([60, 64, 71, 74]))
        assert not result.is_valid
        assert "MISSING_TONE" in result.codes

    def test_extensions(self) -> None:
        """Extensions count toward the tone count and must sound."""
        chord = C_ADD9.root_position()
        assert not is_valid(chord, PitchSet([60, 64, 67, 74]))
        assert is_valid(chord, PitchSet([60, 64, 67, 71, 74]))
        result = ChordValidator().check(chord, PitchSet([60, 64, 67, 69, 71]))
        assert "MISSING_EXTENSION" in result.codes

    def test_stacked_tones_compare_by_class(self) -> None:
        """Tones stored above the octave still match played classes."""
        chord = A_MINOR_7.root_position()
        assert is_valid(chord, PitchSet([57, 60, 64, 67, 71]))

    def test_empty_is_invalid(self) -> None:
        """Nothing played is never valid and never raises."""
        chord = C_MAJOR.root_position()
        assert not is_valid(chord, PitchSet())
        assert not is_valid(chord, PitchSet(), strict=False)
        assert ChordValidator().check(chord, PitchSet()).codes == ["EMPTY"]

    def test_result_str(self) -> None:
        """Results render their issues."""
        chord = C_MAJOR.root_position()
        result = ChordValidator().check(chord, PitchSet([62, 64, 67]))
        text = str(result)
        assert "[ERROR] WRONG_BASS" in text
        assert "MISSING_TONE" in text


class TestChordEngine:
    """Tests for ChordEngine wiring."""

    def test_custom_catalog(self) -> None:
        """Engines can be built from any catalog."""
        engine = create_engine(ChordCatalog([C_SIX, A_MINOR_7], name="tiny"))
        assert engine.catalog.name == "tiny"
        assert engine.identify(PitchSet([57, 60, 64, 67])) == "A-7"
        assert engine.identify(PitchSet([60, 64, 67])) is None

    def test_engines_are_independent(self) -> None:
        """Two engines do not share state."""
        first = create_engine(ChordCatalog([C_MAJOR]))
        second = create_engine(ChordCatalog([A_MINOR_7]))
        assert first.identify(PitchSet([60, 64, 67])) == "C"
        assert second.identify(PitchSet([60, 64, 67])) is None

    def test_check_via_engine(self, engine: ChordEngine) -> None:
        """Engine delegates to its validator."""
        chord = engine.resolve(PitchSet([60, 64, 67]))
        assert chord is not None
        assert engine.is_valid(chord, PitchSet([60, 64, 67, 71]))
        assert not engine.check(chord, PitchSet([60, 64, 67])).is_valid

    def test_resolved_chords_cannot_alter_catalog(self, engine: ChordEngine) -> None:
        """Editing a resolved chord's tones leaves the shared catalog intact."""
        chord = engine.resolve(PitchSet([60, 64, 67]))
        assert chord is not None
        chord.tones.add(1)
        chord.extensions.add(14)
        assert engine.catalog[0].tones.to_list() == [0, 4, 7]
        assert engine.catalog[0].extensions.to_list() == []
        assert engine.resolve(PitchSet([60, 64, 67])) == chord
        assert engine.is_valid(chord, PitchSet([60, 64, 67, 71]))

    def test_resolved_chords_are_hashable(self, engine: ChordEngine) -> None:
        """Resolved chords work as set members and dict keys."""
        first = engine.resolve(PitchSet([60, 64, 67]))
        again = engine.resolve(PitchSet([48, 64, 67, 72]))
        inverted = engine.resolve(PitchSet([64, 67, 72]))
        assert {first, again, inverted} == {first, inverted}
        assert {first: "tonic"}[again] == "tonic"
