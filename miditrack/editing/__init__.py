"""
Track editors for instrument and tempo changes.

Every editor takes a track payload and returns a new one; the source
bytes are never modified.

Example:
    from miditrack.editing import change_instrument, change_tempo

    data = change_instrument(track.data, 40)  # Violin
    data = change_tempo(data, 96)
"""

from miditrack.editing.instrument import InstrumentRewrite, InstrumentRewriter, change_instrument
from miditrack.editing.tempo import TempoRewrite, TempoRewriter, change_tempo
from miditrack.editing.extract import ExtractedTrack, extract_track, suggest_filename

__all__ = [
    "InstrumentRewrite",
    "InstrumentRewriter",
    "change_instrument",
    "TempoRewrite",
    "TempoRewriter",
    "change_tempo",
    "ExtractedTrack",
    "extract_track",
    "suggest_filename",
]
