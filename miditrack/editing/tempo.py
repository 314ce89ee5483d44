"""
Tempo (set-tempo meta event) rewriter.

Replaces the value of every set-tempo event in a track payload. All
other bytes, running status included, are copied unchanged. If the
track has no set-tempo event, ``00 FF 51 03 tt tt tt`` is prepended.
"""

import logging
from dataclasses import dataclass

from miditrack.formats.smf.events import iter_events
from miditrack.models.event import EventType, MetaEvent, MetaType
from miditrack.models.tempo import microseconds_from_bpm
from miditrack.utils.validation import EventStreamError, validate_tempo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TempoRewrite:
    """
    Result of a tempo rewrite.

    Attributes:
        data: New track payload
        microseconds: Microseconds per quarter note written
        found: True if an existing set-tempo event was rewritten
    """

    data: bytes
    microseconds: int
    found: bool


class TempoRewriter:
    """
    Rewriter that substitutes or inserts a set-tempo event.

    Attributes:
        bpm: Target tempo (20-300 BPM)
        microseconds: Target microseconds per quarter note
    """

    def __init__(self, bpm: int):
        validate_tempo(bpm)
        self.bpm = bpm
        self.microseconds = microseconds_from_bpm(bpm)

    @property
    def tempo_bytes(self) -> bytes:
        """3-byte big-endian set-tempo payload."""
        return self.microseconds.to_bytes(3, "big")

    def rewrite(self, data: bytes) -> TempoRewrite:
        """
        Rewrite a track payload.

        Args:
            data: Raw (or instrument-rewritten) track payload

        Returns:
            TempoRewrite with the new payload and the found flag
        """
        result = bytearray()
        found = False

        try:
            for decoded in iter_events(data):
                event = decoded.event

                if isinstance(event, MetaEvent) and event.is_set_tempo:
                    result += data[decoded.start : decoded.payload_start]
                    result += self.tempo_bytes
                    found = True
                else:
                    result += data[decoded.start : decoded.end]
        except EventStreamError as e:
            logger.warning("Copying undecodable tail from offset %d verbatim: %s", e.offset, e)
            result += data[e.offset :]

        if not found:
            logger.debug("No set-tempo event found, inserting %d us/quarter", self.microseconds)
            result[0:0] = bytes([0x00, EventType.META, MetaType.SET_TEMPO, 0x03]) + self.tempo_bytes

        return TempoRewrite(bytes(result), self.microseconds, found)


def change_tempo(data: bytes, bpm: int) -> bytes:
    """
    Return a copy of a track payload with its tempo set to ``bpm``.

    Args:
        data: Raw track payload
        bpm: Tempo in BPM (20-300)

    Returns:
        Rewritten track payload
    """
    return TempoRewriter(bpm).rewrite(data).data
