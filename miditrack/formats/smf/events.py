"""
SMF track event decoder.

Decodes one event at a time from a track payload. The cursor is an
explicit integer: ``decode_event`` takes the current offset and the
running status and returns a DecodedEvent whose ``end`` is the offset of
the next event.

Track event layout:
    <delta-time VLQ> <event>

    event := FF type <length VLQ> payload          (meta)
           | F0 <length VLQ> payload               (SysEx)
           | F7 <length VLQ> payload               (SysEx escape)
           | status data1 [data2]                  (channel voice)
           | data1 [data2]                         (running status)

Running status is only set by channel voice messages. Meta and SysEx
events leave it untouched.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from miditrack.models.event import (
    ChannelVoiceEvent,
    Event,
    EventType,
    MetaEvent,
    SysExEvent,
    data_length,
)
from miditrack.utils.validation import EventStreamError
from miditrack.utils.varlen import VarLenError, decode_varlen


@dataclass(frozen=True)
class DecodedEvent:
    """
    An event together with its byte span in the payload.

    Attributes:
        event: The decoded event
        start: Offset of the delta-time
        body: Offset just past the delta-time (status or first data byte)
        end: Offset just past the event
    """

    event: Event
    start: int
    body: int
    end: int

    @property
    def payload_start(self) -> int:
        """Offset of a meta/SysEx payload (equals ``end`` for empty payloads)."""
        payload = getattr(self.event, "payload", b"")
        return self.end - len(payload)


def _read_length(data: bytes, pos: int, start: int) -> Tuple[int, int]:
    try:
        return decode_varlen(data, pos)
    except VarLenError as e:
        raise EventStreamError(str(e), start) from e


def _take(data: bytes, pos: int, count: int, start: int) -> bytes:
    if pos + count > len(data):
        raise EventStreamError(
            f"Event at offset {start} needs {count} bytes at {pos}, "
            f"only {len(data) - pos} left",
            start,
        )
    return data[pos : pos + count]


def decode_event(data: bytes, pos: int, running_status: Optional[int] = None) -> DecodedEvent:
    """
    Decode the event starting at ``pos``.

    Args:
        data: Track payload
        pos: Offset of the event's delta-time
        running_status: Last explicit channel voice status, if any

    Returns:
        DecodedEvent with the event and its span

    Raises:
        EventStreamError: If the event is truncated, uses running status
            without a previous status, or has an unsupported status byte
    """
    start = pos

    try:
        delta, pos = decode_varlen(data, pos)
    except VarLenError as e:
        raise EventStreamError(str(e), start) from e

    body = pos
    status = _take(data, pos, 1, start)[0]

    if status == EventType.META:
        meta_type = _take(data, pos + 1, 1, start)[0]
        length, pos = _read_length(data, pos + 2, start)
        payload = _take(data, pos, length, start)
        event: Event = MetaEvent(delta, meta_type, payload)
        return DecodedEvent(event, start, body, pos + length)

    if status in (EventType.SYSEX, EventType.SYSEX_ESCAPE):
        length, pos = _read_length(data, pos + 1, start)
        payload = _take(data, pos, length, start)
        return DecodedEvent(SysExEvent(delta, status, payload), start, body, pos + length)

    running = not status & 0x80
    if running:
        if running_status is None:
            raise EventStreamError(
                f"Data byte 0x{status:02X} at offset {pos} without a running status", start
            )
        status = running_status
    else:
        pos += 1

    command = status & 0xF0
    if command == 0xF0:
        raise EventStreamError(f"Unsupported status byte 0x{status:02X} at offset {body}", start)

    count = data_length(command)
    values = _take(data, pos, count, start)
    event = ChannelVoiceEvent(delta, command, status & 0x0F, values, running)
    return DecodedEvent(event, start, body, pos + count)


def iter_events(data: bytes, pos: int = 0) -> Iterator[DecodedEvent]:
    """
    Iterate over every event of a track payload.

    Running status is remembered across channel voice events.

    Args:
        data: Track payload
        pos: Offset to start decoding at

    Yields:
        DecodedEvent for each event, in stream order

    Raises:
        EventStreamError: On the first undecodable event. Events before it
            have already been yielded.
    """
    running_status: Optional[int] = None

    while pos < len(data):
        decoded = decode_event(data, pos, running_status)

        if isinstance(decoded.event, ChannelVoiceEvent):
            running_status = decoded.event.status

        yield decoded
        pos = decoded.end
