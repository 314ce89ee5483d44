"""
Tempo detection result for a track.

A track's tempo is one of three states: no set-tempo event was found,
exactly one was found, or several were found. Several events make the
tempo ambiguous and editing is withheld rather than guessing which one
the user meant.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from miditrack.utils.validation import DEFAULT_TEMPO

MICROSECONDS_PER_MINUTE = 60_000_000


def bpm_from_microseconds(microseconds: int) -> int:
    """Convert microseconds per quarter note to a rounded BPM."""
    return round_half_up(MICROSECONDS_PER_MINUTE / microseconds)


def microseconds_from_bpm(bpm: int) -> int:
    """Convert BPM to rounded microseconds per quarter note."""
    return round_half_up(MICROSECONDS_PER_MINUTE / bpm)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(value + 0.5)


@dataclass(frozen=True)
class TempoNotFound:
    """The track carries no set-tempo event."""

    @property
    def display_bpm(self) -> Optional[int]:
        return DEFAULT_TEMPO

    @property
    def editable(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{DEFAULT_TEMPO} (default)"


@dataclass(frozen=True)
class TempoKnown:
    """The track carries exactly one set-tempo event."""

    bpm: int

    @property
    def display_bpm(self) -> Optional[int]:
        return self.bpm

    @property
    def editable(self) -> bool:
        return True

    def __str__(self) -> str:
        return str(self.bpm)


@dataclass(frozen=True)
class TempoAmbiguous:
    """The track carries more than one set-tempo event."""

    count: int = 2

    @property
    def display_bpm(self) -> Optional[int]:
        return None

    @property
    def editable(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"ambiguous ({self.count} changes)"


TempoInfo = Union[TempoNotFound, TempoKnown, TempoAmbiguous]


def tempo_from_events(bpms: Iterable[int]) -> TempoInfo:
    """
    Classify the tempo of a track from the BPM of each set-tempo event.

    Args:
        bpms: BPM of every set-tempo event, in stream order

    Returns:
        TempoNotFound, TempoKnown or TempoAmbiguous
    """
    found = list(bpms)

    if not found:
        return TempoNotFound()
    if len(found) == 1:
        return TempoKnown(found[0])
    return TempoAmbiguous(len(found))
