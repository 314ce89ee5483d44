"""
MIDI track event models.

Events are transient: they are decoded from a track payload one at a
time and never stored in a Sequence.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union


class EventType(IntEnum):
    """Status byte values (channel voice commands use the high nibble)."""

    NOTE_OFF = 0x80
    NOTE_ON = 0x90
    POLY_PRESSURE = 0xA0
    CONTROL_CHANGE = 0xB0
    PROGRAM_CHANGE = 0xC0
    CHANNEL_PRESSURE = 0xD0
    PITCH_BEND = 0xE0
    SYSEX = 0xF0
    SYSEX_ESCAPE = 0xF7
    META = 0xFF


class MetaType(IntEnum):
    """Meta event type bytes."""

    SEQUENCE_NUMBER = 0x00
    TEXT = 0x01
    COPYRIGHT = 0x02
    TRACK_NAME = 0x03
    INSTRUMENT_NAME = 0x04
    LYRIC = 0x05
    MARKER = 0x06
    CUE_POINT = 0x07
    CHANNEL_PREFIX = 0x20
    PORT = 0x21
    END_OF_TRACK = 0x2F
    SET_TEMPO = 0x51
    SMPTE_OFFSET = 0x54
    TIME_SIGNATURE = 0x58
    KEY_SIGNATURE = 0x59
    SEQUENCER_SPECIFIC = 0x7F


# Commands followed by a single data byte; every other one takes two
SINGLE_DATA_BYTE_COMMANDS = (EventType.PROGRAM_CHANGE, EventType.CHANNEL_PRESSURE)


def data_length(command: int) -> int:
    """Number of data bytes following a channel voice status byte."""
    return 1 if command in SINGLE_DATA_BYTE_COMMANDS else 2


@dataclass(frozen=True)
class MetaEvent:
    """
    A meta event (``FF type length payload``).

    Attributes:
        delta_time: Ticks since the previous event
        meta_type: Meta type byte
        payload: Event data
    """

    delta_time: int
    meta_type: int
    payload: bytes = field(default=b"", repr=False)

    @property
    def is_track_name(self) -> bool:
        return self.meta_type == MetaType.TRACK_NAME and len(self.payload) > 0

    @property
    def is_set_tempo(self) -> bool:
        return self.meta_type == MetaType.SET_TEMPO and len(self.payload) == 3

    @property
    def microseconds_per_quarter(self) -> int:
        """Tempo value of a set-tempo event."""
        return int.from_bytes(self.payload[:3], "big")

    @property
    def text(self) -> str:
        """Payload decoded as Latin-1 text."""
        return self.payload.decode("latin-1")

    def __str__(self) -> str:
        try:
            name = MetaType(self.meta_type).name
        except ValueError:
            name = f"0x{self.meta_type:02X}"
        return f"Meta {name} ({len(self.payload)} bytes)"


@dataclass(frozen=True)
class SysExEvent:
    """
    A system-exclusive event (``F0``/``F7`` length payload).

    Attributes:
        delta_time: Ticks since the previous event
        status: 0xF0 or 0xF7
        payload: Event data
    """

    delta_time: int
    status: int
    payload: bytes = field(default=b"", repr=False)

    def __str__(self) -> str:
        return f"SysEx 0x{self.status:02X} ({len(self.payload)} bytes)"


@dataclass(frozen=True)
class ChannelVoiceEvent:
    """
    A channel voice message.

    Attributes:
        delta_time: Ticks since the previous event
        command: High nibble of the status byte (0x80-0xE0)
        channel: Low nibble of the status byte (0-15)
        data: One or two data bytes
        running: True if the status byte was omitted (running status)
    """

    delta_time: int
    command: int
    channel: int
    data: bytes = b""
    running: bool = False

    @property
    def status(self) -> int:
        return self.command | self.channel

    @property
    def is_note(self) -> bool:
        """Check if this is a note-on or note-off event."""
        return self.command in (EventType.NOTE_ON, EventType.NOTE_OFF)

    @property
    def is_program_change(self) -> bool:
        return self.command == EventType.PROGRAM_CHANGE

    def to_bytes(self) -> bytes:
        """Encode with an explicit status byte (no delta time)."""
        return bytes([self.status]) + self.data

    def __str__(self) -> str:
        name = EventType(self.command).name
        values = " ".join(str(b) for b in self.data)
        suffix = " (running)" if self.running else ""
        return f"{name} ch{self.channel + 1} {values}{suffix}"


Event = Union[MetaEvent, SysExEvent, ChannelVoiceEvent]
