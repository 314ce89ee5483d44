"""
Error types and edit-parameter validation for MIDI track data.
"""

from pathlib import Path
from typing import Union

# Tempo range accepted by the tempo editor (BPM)
MIN_TEMPO = 20
MAX_TEMPO = 300

# Tempo shown for tracks without a set-tempo event
DEFAULT_TEMPO = 120

MIDI_EXTENSIONS = (".mid", ".midi")


class MidiFileError(ValueError):
    """Raised when a buffer is not a usable Standard MIDI File."""

    pass


class InvalidContainer(MidiFileError):
    """The buffer does not start with an ``MThd`` header chunk."""

    pass


class InvalidTrackFraming(MidiFileError):
    """A declared track chunk does not start with ``MTrk``."""

    pass


class EventStreamError(ValueError):
    """An event inside a track payload is truncated or undecodable."""

    def __init__(self, message: str, offset: int):
        super().__init__(message)
        self.offset = offset


class ValidationError(ValueError):
    """Raised when an edit parameter is out of range."""

    pass


def validate_program(program: int) -> None:
    """
    Validate a General MIDI program number (0-127).

    Args:
        program: Program number

    Raises:
        ValidationError: If program is out of range
    """
    if not 0 <= program <= 127:
        raise ValidationError(f"Program must be 0-127, got {program}")


def validate_tempo(bpm: int) -> None:
    """
    Validate a tempo in BPM.

    Args:
        bpm: Tempo in beats per minute

    Raises:
        ValidationError: If tempo is outside 20-300 BPM
    """
    if not MIN_TEMPO <= bpm <= MAX_TEMPO:
        raise ValidationError(f"Tempo must be {MIN_TEMPO}-{MAX_TEMPO} BPM, got {bpm}")


def is_tempo_in_range(bpm: int) -> bool:
    """Check whether ``bpm`` lies within the editable tempo range."""
    return MIN_TEMPO <= bpm <= MAX_TEMPO


def is_midi_filename(filepath: Union[str, Path]) -> bool:
    """Check whether a path carries a ``.mid``/``.midi`` extension."""
    return Path(filepath).suffix.lower() in MIDI_EXTENSIONS


def validate_smf_header(data: bytes) -> bool:
    """
    Validate a Standard MIDI File header tag.

    Args:
        data: File data (at least 4 bytes)

    Returns:
        True if the buffer starts with ``MThd``
    """
    if len(data) < 4:
        return False

    return data[:4] == b"MThd"
