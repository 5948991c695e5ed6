"""
Chord matcher - resolves played pitches to a catalog chord.

Pitch-class content alone cannot tell C6 from Am7, or C from C/E. When a
signature is ambiguous the lowest sounding pitch picks the variant.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chuk_mcp_chords.core.dictionary import signature_of

if TYPE_CHECKING:
    from chuk_mcp_chords.core.chord import Chord
    from chuk_mcp_chords.core.dictionary import ChordDictionary
    from chuk_mcp_chords.core.pitch_set import PitchSet

logger = logging.getLogger(__name__)


class ChordMatcher:
    """Looks played pitch sets up in a ChordDictionary."""

    def __init__(self, dictionary: ChordDictionary) -> None:
        self.dictionary = dictionary

    def resolve(self, played: PitchSet) -> Chord | None:
        """
        Identify the chord being played.

        Args:
            played: Sounding pitches

        Returns:
            The matching Chord, or None when nothing in the catalog fits
        """
        if played.bottom is None:
            return None

        signature = signature_of(played)
        candidates = self.dictionary.lookup(signature)
        if not candidates:
            logger.debug("No chord for signature %s", signature)
            return None

        # An unambiguous set resolves whatever is in the bass
        if len(candidates) == 1:
            return candidates[0]

        bass = played.bottom % 12
        for chord in candidates:
            if chord.bass % 12 == bass:
                return chord

        logger.debug("Signature %s has no variant with bass %d", signature, bass)
        return None
