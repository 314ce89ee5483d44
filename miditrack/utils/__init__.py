"""Utility functions for miditrack."""

from miditrack.utils.varlen import encode_varlen, decode_varlen, VarLenError
from miditrack.utils.validation import (
    EventStreamError,
    InvalidContainer,
    InvalidTrackFraming,
    MidiFileError,
    ValidationError,
)

__all__ = [
    "encode_varlen",
    "decode_varlen",
    "VarLenError",
    "EventStreamError",
    "InvalidContainer",
    "InvalidTrackFraming",
    "MidiFileError",
    "ValidationError",
]
