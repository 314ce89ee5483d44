"""
Single-track extraction.

Applies the requested edits to one track of a Sequence and assembles the
result into a standalone format 0 file, together with the suggested
output file name.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from miditrack.editing.instrument import InstrumentRewriter
from miditrack.editing.tempo import TempoRewriter
from miditrack.formats.smf.writer import SMFWriter
from miditrack.models.sequence import Sequence, Track
from miditrack.models.tempo import TempoKnown
from miditrack.utils.gm_instruments import KEEP_ORIGINAL, get_instrument_name
from miditrack.utils.validation import is_tempo_in_range

logger = logging.getLogger(__name__)

OUTPUT_EXTENSION = ".mid"

_UNSAFE_CHARS = re.compile(r"[^a-z0-9]", re.IGNORECASE)


@dataclass(frozen=True)
class ExtractedTrack:
    """
    An assembled single-track file.

    Attributes:
        data: Complete MIDI file bytes
        payload: Edited track payload inside ``data``
        filename: Suggested output file name
        program: Program applied, or KEEP_ORIGINAL
        bpm: Tempo applied, or None if the tempo was left alone
    """

    data: bytes
    payload: bytes
    filename: str
    program: int = KEEP_ORIGINAL
    bpm: Optional[int] = None

    @property
    def modified(self) -> bool:
        return self.program != KEEP_ORIGINAL or self.bpm is not None


def sanitize_name(name: str) -> str:
    """Replace every character outside ``[A-Za-z0-9]`` with ``_``."""
    return _UNSAFE_CHARS.sub("_", name)


def suggest_filename(
    source: Union[str, Path], track_name: str, program: int = KEEP_ORIGINAL
) -> str:
    """
    Build the output file name for an extracted track.

    Pattern: ``<basename>-<trackname>_<instrument or "original">.mid``
    where basename is the source file name up to its first dot.

    Args:
        source: Source file path or name
        track_name: Track name
        program: Program applied, or KEEP_ORIGINAL

    Returns:
        File name (no directory)
    """
    basename = Path(source).name.split(".")[0]
    instrument = (
        sanitize_name(get_instrument_name(program)) if program != KEEP_ORIGINAL else "original"
    )
    return f"{basename}-{sanitize_name(track_name)}_{instrument}{OUTPUT_EXTENSION}"


def effective_tempo(track: Track, requested: Optional[int]) -> Optional[int]:
    """
    Decide which tempo to write for a track.

    Only tracks with exactly one set-tempo event can be retimed. A
    requested tempo outside 20-300 BPM falls back to the current one, and
    a tempo equal to the current one needs no rewrite.

    Args:
        track: Track summary
        requested: Requested BPM, or None

    Returns:
        BPM to write, or None to leave the tempo untouched
    """
    if not isinstance(track.tempo, TempoKnown) or requested is None:
        return None

    bpm = requested if is_tempo_in_range(requested) else track.tempo.bpm
    if bpm == track.tempo.bpm:
        return None
    return bpm


def extract_track(
    sequence: Sequence,
    track: Track,
    source: Union[str, Path] = "track.mid",
    program: int = KEEP_ORIGINAL,
    bpm: Optional[int] = None,
) -> ExtractedTrack:
    """
    Edit one track and assemble it into a single-track file.

    Args:
        sequence: Decoded source sequence (for the division)
        track: Track to extract
        source: Source file name, used for the suggested output name
        program: Program to apply, or KEEP_ORIGINAL
        bpm: Requested tempo, or None to keep it

    Returns:
        ExtractedTrack with the assembled file
    """
    payload = track.data

    if program != KEEP_ORIGINAL:
        rewrite = InstrumentRewriter(program).rewrite(payload)
        payload = rewrite.data
        logger.info(
            "%s: program %d (%s)",
            track.name,
            program,
            "inserted" if rewrite.inserted else f"{rewrite.replaced} replaced",
        )

    tempo = effective_tempo(track, bpm)
    if tempo is not None:
        payload = TempoRewriter(tempo).rewrite(payload).data
        logger.info("%s: tempo %d -> %d BPM", track.name, track.tempo.display_bpm, tempo)

    return ExtractedTrack(
        data=SMFWriter.to_bytes(payload, sequence.division),
        payload=payload,
        filename=suggest_filename(source, track.name, program),
        program=program,
        bpm=tempo,
    )
