"""
Track event stream scanner.

Makes a single pass over a track payload and collects the summary shown
in track listings: name, note count and detected tempo.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from miditrack.formats.smf.events import iter_events
from miditrack.models.event import ChannelVoiceEvent, MetaEvent
from miditrack.models.sequence import Track, TrackChunk
from miditrack.models.tempo import TempoInfo, bpm_from_microseconds, tempo_from_events
from miditrack.utils.validation import EventStreamError

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Summary data collected from one track payload."""

    name: Optional[str] = None
    note_count: int = 0
    tempo_bpms: List[int] = field(default_factory=list)
    event_count: int = 0
    error: Optional[EventStreamError] = None

    @property
    def tempo(self) -> TempoInfo:
        return tempo_from_events(self.tempo_bpms)

    @property
    def complete(self) -> bool:
        """True if the whole payload was decoded."""
        return self.error is None


class TrackScanner:
    """
    Scanner for SMF track payloads.

    Example:
        result = TrackScanner.scan(chunk.data)
        print(result.name, result.note_count, result.tempo)
    """

    @classmethod
    def scan(cls, data: bytes) -> ScanResult:
        """
        Scan a track payload.

        An undecodable event stops the scan; everything collected before
        it is kept.

        Args:
            data: Raw track payload

        Returns:
            ScanResult for the payload
        """
        result = ScanResult()

        try:
            for decoded in iter_events(data):
                result.event_count += 1
                event = decoded.event

                if isinstance(event, MetaEvent):
                    if event.is_track_name and result.name is None:
                        result.name = event.text
                    elif event.is_set_tempo:
                        microseconds = event.microseconds_per_quarter
                        if microseconds:
                            result.tempo_bpms.append(bpm_from_microseconds(microseconds))
                        else:
                            logger.warning("Ignoring zero set-tempo at offset %d", decoded.start)
                elif isinstance(event, ChannelVoiceEvent):
                    if event.is_note:
                        result.note_count += 1
        except EventStreamError as e:
            logger.warning("Stopped scanning track at offset %d: %s", e.offset, e)
            result.error = e

        return result

    @classmethod
    def summarize(cls, chunk: TrackChunk) -> Track:
        """
        Build the Track summary for a container chunk.

        Args:
            chunk: Framed track chunk

        Returns:
            Track with name, note count and tempo
        """
        result = cls.scan(chunk.data)

        logger.debug(
            "Track %d: %d events, %d notes, tempo %s",
            chunk.index + 1,
            result.event_count,
            result.note_count,
            result.tempo,
        )

        return Track(
            index=chunk.index,
            name=result.name if result.name is not None else Track.default_name(chunk.index),
            data=chunk.data,
            note_count=result.note_count,
            tempo=result.tempo,
        )
