"""
miditrack - Extract and edit single tracks of Standard MIDI Files.

This library provides tools to:
- Read .mid files and summarize their tracks (name, notes, tempo)
- Change a track's instrument (program change)
- Change a track's tempo (set-tempo meta event)
- Write one edited track as a standalone format 0 file

Example usage:
    from miditrack import SMFReader
    from miditrack.editing import extract_track

    sequence = SMFReader.read("song.mid")
    track = sequence.get_track(1)

    result = extract_track(sequence, track, "song.mid", program=40, bpm=96)
    with open(result.filename, "wb") as f:
        f.write(result.data)
"""

__version__ = "0.1.0"
__author__ = "miditrack Contributors"

from miditrack.formats.smf.reader import SMFReader
from miditrack.formats.smf.writer import SMFWriter
from miditrack.models.sequence import Sequence, Track
from miditrack.models.tempo import TempoAmbiguous, TempoKnown, TempoNotFound

__all__ = [
    "SMFReader",
    "SMFWriter",
    "Sequence",
    "Track",
    "TempoAmbiguous",
    "TempoKnown",
    "TempoNotFound",
]
