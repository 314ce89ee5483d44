"""
Standard MIDI File reader.

Reads .mid files, frames their track chunks by declared length and
summarizes each track into the Sequence model.
"""

import logging
import struct
from pathlib import Path
from typing import List, Tuple, Union

from miditrack.formats.smf.scanner import TrackScanner
from miditrack.models.sequence import Sequence, TrackChunk
from miditrack.utils.validation import (
    InvalidContainer,
    InvalidTrackFraming,
    validate_smf_header,
)

logger = logging.getLogger(__name__)


class SMFReader:
    """
    Reader for Standard MIDI Files.

    Track chunks are framed by their declared length, never by event
    parsing, so a malformed event stream in one track cannot shift the
    position of the tracks after it.

    Example:
        sequence = SMFReader.read("song.mid")
        for track in sequence.tracks:
            print(f"{track.name}: {track.note_count} notes")
    """

    HEADER_MAGIC = b"MThd"
    TRACK_MAGIC = b"MTrk"

    # Chunk tag + length
    CHUNK_HEADER_SIZE = 8

    # format, track count, division
    HEADER_FIELDS = struct.Struct(">HHH")

    def __init__(self):
        self._raw_data: bytes = b""

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Sequence:
        """
        Read a MIDI file and return a Sequence.

        Args:
            filepath: Path to .mid file

        Returns:
            Parsed Sequence object
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Sequence:
        """
        Parse a MIDI file.

        Args:
            filepath: Path to .mid file

        Returns:
            Parsed Sequence object
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            self._raw_data = f.read()

        return self.parse_bytes(self._raw_data)

    def parse_bytes(self, data: bytes) -> Sequence:
        """
        Parse MIDI data from bytes.

        Only tracks with at least one note are kept.

        Args:
            data: Raw MIDI file contents

        Returns:
            Parsed Sequence object

        Raises:
            InvalidContainer: If the header chunk is missing
            InvalidTrackFraming: If a declared track chunk is missing
        """
        self._raw_data = data

        (format_type, track_count, division), chunks = self.read_chunks(data)

        tracks = []
        for chunk in chunks:
            track = TrackScanner.summarize(chunk)
            if track.has_notes:
                tracks.append(track)
            else:
                logger.debug("Skipping track %d: no notes", chunk.index + 1)

        return Sequence(
            format=format_type,
            division=division,
            track_count=track_count,
            tracks=tuple(tracks),
        )

    @classmethod
    def read_header(cls, data: bytes) -> Tuple[Tuple[int, int, int], int]:
        """
        Parse the ``MThd`` chunk.

        The header length field is honoured for positioning but not
        required to be 6. Lengths below 6 still skip the three header
        fields.

        Args:
            data: Raw MIDI file contents

        Returns:
            ((format, track count, division), offset of the first track chunk)
        """
        if not validate_smf_header(data):
            raise InvalidContainer(
                f"Invalid MIDI file: missing {cls.HEADER_MAGIC.decode()} header"
            )

        if len(data) < cls.CHUNK_HEADER_SIZE + cls.HEADER_FIELDS.size:
            raise InvalidContainer(f"Invalid MIDI file: header truncated ({len(data)} bytes)")

        (header_length,) = struct.unpack_from(">I", data, 4)
        fields = cls.HEADER_FIELDS.unpack_from(data, cls.CHUNK_HEADER_SIZE)

        # Tracks never start inside the format/track count/division fields
        return fields, cls.CHUNK_HEADER_SIZE + max(header_length, cls.HEADER_FIELDS.size)

    @classmethod
    def read_chunks(cls, data: bytes) -> Tuple[Tuple[int, int, int], List[TrackChunk]]:
        """
        Frame every declared track chunk without scanning events.

        Args:
            data: Raw MIDI file contents

        Returns:
            ((format, track count, division), list of TrackChunk)
        """
        fields, pos = cls.read_header(data)
        track_count = fields[1]

        chunks = []
        for index in range(track_count):
            tag = data[pos : pos + 4]
            if tag != cls.TRACK_MAGIC:
                raise InvalidTrackFraming(
                    f"Invalid track header for track {index + 1} at offset 0x{pos:X}: {tag!r}"
                )
            if pos + cls.CHUNK_HEADER_SIZE > len(data):
                raise InvalidTrackFraming(f"Track {index + 1} chunk header truncated")

            (length,) = struct.unpack_from(">I", data, pos + 4)
            start = pos + cls.CHUNK_HEADER_SIZE
            chunk = TrackChunk(
                index=index,
                offset=start,
                declared_length=length,
                data=bytes(data[start : start + length]),
            )
            if chunk.truncated:
                logger.warning(
                    "Track %d declares %d bytes but only %d remain",
                    index + 1,
                    length,
                    len(chunk.data),
                )

            chunks.append(chunk)
            pos = start + length

        return fields, chunks

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file can be read as a Standard MIDI File.

        Args:
            filepath: Path to check

        Returns:
            True if file starts with an MThd chunk
        """
        filepath = Path(filepath)

        if not filepath.exists():
            return False

        try:
            with open(filepath, "rb") as f:
                header = f.read(4)
        except OSError:
            return False

        return validate_smf_header(header)

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a MIDI file without scanning tracks.

        Args:
            filepath: Path to .mid file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read()

        info = {
            "valid": False,
            "size": len(data),
        }

        try:
            (format_type, track_count, division), _ = cls.read_header(data)
        except InvalidContainer:
            return info

        info.update(
            {
                "valid": True,
                "format": format_type,
                "track_count": track_count,
                "division": division,
            }
        )
        return info
