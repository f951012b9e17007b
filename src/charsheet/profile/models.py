"""Canonical data structures shared by profile extractors and the encoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from charsheet.profile.tables import SEGMENT_WIDTHS

SLOT_SEPARATOR = ","
SEGMENT_SEPARATOR = ";"


@dataclass(slots=True)
class ProfileNotFoundError(LookupError):
    """Raised when the profile container is absent from the document."""

    selector: str
    message: str = "Profile modal not found"

    def __str__(self) -> str:
        return f"{self.message} (selector={self.selector})"


@dataclass(frozen=True, slots=True)
class Segment:
    """One fixed-shape group of positional slots inside a record."""

    name: str
    slots: tuple[str, ...]
    separator: str = SLOT_SEPARATOR

    def encode(self) -> str:
        return self.separator.join(self.slots)

    def __len__(self) -> int:
        return len(self.slots)


def build_segment(
    name: str,
    values: Iterable[str | None],
    *,
    separator: str = SLOT_SEPARATOR,
    empty: str = "",
) -> Segment:
    """Coerce optional field values into a segment, replacing absences with ``empty``."""

    return Segment(name=name, slots=tuple(value or empty for value in values), separator=separator)


@dataclass(frozen=True, slots=True)
class ProfileSegments:
    """All segments of one profile, in record order."""

    general: Segment
    skills: Segment
    equipment: Segment
    abilities: Segment
    food: Segment
    housing: Segment
    achievements: Segment

    def __post_init__(self) -> None:
        for segment in self.ordered():
            expected = SEGMENT_WIDTHS[segment.name]
            if len(segment) != expected:
                raise ValueError(f"Segment {segment.name} has {len(segment)} slots, expected {expected}")

    def ordered(self) -> tuple[Segment, ...]:
        return (
            self.general,
            self.skills,
            self.equipment,
            self.abilities,
            self.food,
            self.housing,
            self.achievements,
        )

    def to_dict(self) -> dict[str, str]:
        return {segment.name: segment.encode() for segment in self.ordered()}
