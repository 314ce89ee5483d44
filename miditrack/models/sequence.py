"""
Sequence and track summary models.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from miditrack.models.tempo import TempoInfo, TempoNotFound


@dataclass(frozen=True)
class TrackChunk:
    """
    A raw ``MTrk`` chunk as framed by the container.

    Attributes:
        index: Zero-based position of the chunk in the file
        offset: File offset of the chunk payload
        declared_length: Length field of the chunk header
        data: Payload bytes (a copy of the file slice)
    """

    index: int
    offset: int
    declared_length: int
    data: bytes = field(repr=False)

    @property
    def truncated(self) -> bool:
        """True if the file ended before the declared length."""
        return len(self.data) < self.declared_length


@dataclass(frozen=True)
class Track:
    """
    Summary of one track chunk.

    Attributes:
        index: Zero-based position of the chunk in the file
        name: Track name meta event, or "Track N" if absent
        data: Raw, unmodified track payload
        note_count: Number of note-on/note-off events
        tempo: Tempo detection result
    """

    index: int
    name: str
    data: bytes = field(repr=False)
    note_count: int = 0
    tempo: TempoInfo = field(default_factory=TempoNotFound)

    @property
    def size(self) -> int:
        """Payload size in bytes."""
        return len(self.data)

    @property
    def has_notes(self) -> bool:
        return self.note_count > 0

    @property
    def tempo_editable(self) -> bool:
        """Check if the tempo can be edited (exactly one set-tempo event)."""
        return self.tempo.editable

    @staticmethod
    def default_name(index: int) -> str:
        """Name used when a chunk has no track-name meta event."""
        return f"Track {index + 1}"


@dataclass(frozen=True)
class Sequence:
    """
    A decoded Standard MIDI File.

    Only tracks containing notes are kept in ``tracks``; ``track_count``
    is the count declared in the header.

    Attributes:
        format: SMF format (0, 1 or 2)
        division: Ticks per quarter note
        track_count: Number of track chunks declared in the header
        tracks: Summaries of tracks with at least one note
    """

    format: int
    division: int
    track_count: int
    tracks: Tuple[Track, ...] = ()

    @property
    def is_smpte(self) -> bool:
        """Check if the division uses the (unsupported) SMPTE form."""
        return bool(self.division & 0x8000)

    def get_track(self, number: int) -> Optional[Track]:
        """
        Get a summarized track by its 1-based position.

        Args:
            number: Position in ``tracks`` (1 = first track with notes)

        Returns:
            The Track, or None if out of range
        """
        if 1 <= number <= len(self.tracks):
            return self.tracks[number - 1]
        return None
