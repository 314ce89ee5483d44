"""Standard MIDI File handlers."""

from miditrack.formats.smf.events import DecodedEvent, decode_event, iter_events
from miditrack.formats.smf.reader import SMFReader
from miditrack.formats.smf.scanner import ScanResult, TrackScanner
from miditrack.formats.smf.writer import SMFWriter

__all__ = [
    "DecodedEvent",
    "decode_event",
    "iter_events",
    "SMFReader",
    "ScanResult",
    "TrackScanner",
    "SMFWriter",
]
