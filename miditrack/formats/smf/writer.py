"""
Single-track Standard MIDI File writer.

Wraps one (possibly edited) track payload into a minimal format 0 file.
"""

import logging
import struct
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class SMFWriter:
    """
    Writer for single-track MIDI files.

    The output always has format 0 and one track; only the division is
    taken from the source file. The payload is written as-is.

    Example:
        data = SMFWriter.to_bytes(track.data, sequence.division)
        SMFWriter.write(track.data, sequence.division, "track.mid")
        SMFWriter.save(data, "track.mid")
    """

    HEADER_MAGIC = b"MThd"
    TRACK_MAGIC = b"MTrk"
    HEADER_LENGTH = 6
    OUTPUT_FORMAT = 0
    OUTPUT_TRACK_COUNT = 1

    @classmethod
    def to_bytes(cls, track_data: bytes, division: int) -> bytes:
        """
        Assemble a complete single-track file.

        Args:
            track_data: Track payload (without the MTrk chunk header)
            division: Ticks per quarter note of the source file

        Returns:
            14-byte header chunk + 8-byte track chunk header + payload
        """
        header = cls.HEADER_MAGIC + struct.pack(
            ">IHHH",
            cls.HEADER_LENGTH,
            cls.OUTPUT_FORMAT,
            cls.OUTPUT_TRACK_COUNT,
            division & 0xFFFF,
        )
        track_header = cls.TRACK_MAGIC + struct.pack(">I", len(track_data))

        return header + track_header + bytes(track_data)

    @classmethod
    def write(cls, track_data: bytes, division: int, filepath: Union[str, Path]) -> Path:
        """
        Write a single-track file to disk.

        Args:
            track_data: Track payload
            division: Ticks per quarter note
            filepath: Output file path

        Returns:
            The path written
        """
        return cls.save(cls.to_bytes(track_data, division), filepath)

    @classmethod
    def save(cls, data: bytes, filepath: Union[str, Path]) -> Path:
        """
        Write already assembled file bytes to disk.

        Args:
            data: Complete MIDI file bytes (see ``to_bytes``)
            filepath: Output file path, parent directories are created

        Returns:
            The path written
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, "wb") as f:
            f.write(data)

        logger.debug("Wrote %d bytes to %s", len(data), filepath)
        return filepath
