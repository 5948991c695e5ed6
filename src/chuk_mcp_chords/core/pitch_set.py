"""
PitchSet - an ordered, duplicate-free container of pitches.

Every query builds one of these from the notes being played. Elements are
kept ascending at all times, so the lowest sounding pitch (the bass) is
always at the front.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

T = TypeVar("T")


class PitchSet:
    """
    Ascending set of integer pitches.

    Mutated only through add/delete/clear. All operations are total over
    integer input; nothing here raises.
    """

    __slots__ = ("_pitches",)

    def __init__(self, pitches: Iterable[int] | None = None) -> None:
        """Create a set, optionally seeded with pitches in any order."""
        self._pitches: list[int] = []
        if pitches is not None:
            for pitch in pitches:
                self.add(pitch)

    def _search(self, pitch: int) -> int:
        return bisect_left(self._pitches, pitch)

    def add(self, pitch: int) -> PitchSet:
        """Insert a pitch, keeping order. Adding an existing pitch is a no-op."""
        index = self._search(pitch)
        if index == len(self._pitches) or self._pitches[index] != pitch:
            self._pitches.insert(index, pitch)
        return self

    def has(self, pitch: int) -> bool:
        """Check membership in O(log n)."""
        index = self._search(pitch)
        return index < len(self._pitches) and self._pitches[index] == pitch

    def delete(self, pitch: int) -> bool:
        """
        Remove a pitch if present.

        Returns:
            True if the pitch was removed, False if it was not in the set
        """
        index = self._search(pitch)
        if index < len(self._pitches) and self._pitches[index] == pitch:
            del self._pitches[index]
            return True
        return False

    def clear(self) -> None:
        """Remove every pitch."""
        self._pitches = []

    @property
    def size(self) -> int:
        """Number of pitches in the set."""
        return len(self._pitches)

    @property
    def bottom(self) -> int | None:
        """Lowest pitch, or None when empty."""
        return self._pitches[0] if self._pitches else None

    @property
    def top(self) -> int | None:
        """Highest pitch, or None when empty."""
        return self._pitches[-1] if self._pitches else None

    def map(self, fn: Callable[[int], T]) -> list[T]:
        """Apply fn to each pitch in ascending order."""
        return [fn(pitch) for pitch in self._pitches]

    def filter(self, predicate: Callable[[int], bool]) -> list[int]:
        """Pitches for which predicate holds, ascending."""
        return [pitch for pitch in self._pitches if predicate(pitch)]

    def pitch_classes(self) -> PitchSet:
        """The set reduced mod 12."""
        return PitchSet(pitch % 12 for pitch in self._pitches)

    def to_list(self) -> list[int]:
        """Serialize as an ascending list (JSON friendly)."""
        return list(self._pitches)

    def __contains__(self, pitch: object) -> bool:
        return isinstance(pitch, int) and self.has(pitch)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._pitches))

    def __len__(self) -> int:
        return len(self._pitches)

    def __bool__(self) -> bool:
        return bool(self._pitches)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PitchSet):
            return NotImplemented
        return self._pitches == other._pitches

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PitchSet({', '.join(str(p) for p in self._pitches)})"
