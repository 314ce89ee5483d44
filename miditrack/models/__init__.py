"""Data models for MIDI sequence representation."""

from miditrack.models.sequence import Sequence, Track, TrackChunk
from miditrack.models.tempo import TempoAmbiguous, TempoInfo, TempoKnown, TempoNotFound
from miditrack.models.event import (
    ChannelVoiceEvent,
    Event,
    EventType,
    MetaEvent,
    MetaType,
    SysExEvent,
)

__all__ = [
    "Sequence",
    "Track",
    "TrackChunk",
    "TempoAmbiguous",
    "TempoInfo",
    "TempoKnown",
    "TempoNotFound",
    "ChannelVoiceEvent",
    "Event",
    "EventType",
    "MetaEvent",
    "MetaType",
    "SysExEvent",
]
