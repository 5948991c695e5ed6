"""
ChordCatalog - the ordered list of chord templates.

Order matters: it is the tie-break the matcher falls back on when two
templates share a signature and a bass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from chuk_mcp_chords.core.chord import ChordTemplate
    from chuk_mcp_chords.models.catalog import CatalogFilter


class ChordCatalog:
    """Immutable, ordered collection of ChordTemplate."""

    def __init__(
        self,
        templates: Iterable[ChordTemplate],
        name: str = "custom",
        description: str = "",
    ) -> None:
        self.name = name
        self.description = description
        self._templates: tuple[ChordTemplate, ...] = tuple(templates)

    @property
    def templates(self) -> tuple[ChordTemplate, ...]:
        return self._templates

    def select(self, chord_filter: CatalogFilter) -> list[tuple[int, ChordTemplate]]:
        """
        Templates passing a filter, with their catalog index.

        Args:
            chord_filter: Quality, root and tension constraints

        Returns:
            (index, template) pairs in catalog order
        """
        return [
            (index, template)
            for index, template in enumerate(self._templates)
            if chord_filter.accepts(template)
        ]

    def __getitem__(self, index: int) -> ChordTemplate:
        return self._templates[index]

    def __iter__(self) -> Iterator[ChordTemplate]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"ChordCatalog({self.name!r}, {len(self._templates)} chords)"
