"""
ChordDictionary - pitch-class signature to chord variants.

Built once from a catalog. Each bucket holds every chord whose tones and
extensions reduce to the same pitch-class set: first the root-position
entries in catalog order, then the inversions in catalog order. The matcher
relies on that order to break ties.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chuk_mcp_chords.core.chord import Chord, ChordTemplate

logger = logging.getLogger(__name__)

Signature = tuple[int, ...]


def signature_of(pitches: Iterable[int]) -> Signature:
    """Sorted, duplicate-free pitch classes of any pitch collection."""
    return tuple(sorted({pitch % 12 for pitch in pitches}))


class ChordDictionary:
    """
    Read-only index from signature to ordered chord variants.

    Not mutated after build(), so a single instance can be shared freely.
    """

    def __init__(self) -> None:
        self._buckets: dict[Signature, list[Chord]] = {}

    @classmethod
    def build(cls, templates: Iterable[ChordTemplate]) -> ChordDictionary:
        """
        Index a catalog.

        Duplicate templates are kept; the earlier entry wins lookups.

        Args:
            templates: Catalog entries in catalog order

        Returns:
            The populated dictionary
        """
        templates = list(templates)
        dictionary = cls()

        # Root position first so it outranks any inversion sharing a bass
        for template in templates:
            dictionary._add(template.signature(), template.root_position())

        for template in templates:
            for chord in template.inversions():
                dictionary._add(template.signature(), chord)

        logger.debug(
            "Built chord dictionary: %d signatures, %d variants from %d templates",
            len(dictionary._buckets),
            dictionary.variant_count,
            len(templates),
        )
        return dictionary

    def _add(self, signature: Signature, chord: Chord) -> None:
        self._buckets.setdefault(signature, []).append(chord)

    def lookup(self, signature: Signature) -> tuple[Chord, ...]:
        """Chord variants for a signature (empty when unknown)."""
        return tuple(self._buckets.get(signature, ()))

    @property
    def variant_count(self) -> int:
        """Total chords across all buckets."""
        return sum(len(bucket) for bucket in self._buckets.values())

    def __contains__(self, signature: object) -> bool:
        return signature in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)
