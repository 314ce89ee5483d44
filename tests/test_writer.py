"""Tests for the single-track MIDI file writer."""

import mido
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from miditrack.formats.smf.reader import SMFReader
from miditrack.formats.smf.writer import SMFWriter


class TestSMFWriter:
    """Test cases for file assembly."""

    def test_header_bytes(self):
        payload = bytes([0x00, 0xFF, 0x2F, 0x00])

        data = SMFWriter.to_bytes(payload, 0x1E0)

        assert data[:14] == bytes.fromhex("4D546864 00000006 0000 0001 01E0")
        assert data[14:22] == bytes.fromhex("4D54726B 00000004")
        assert data[22:] == payload

    def test_length_matches_payload(self, piano_track):
        data = SMFWriter.to_bytes(piano_track, 96)

        assert len(data) == 22 + len(piano_track)
        assert int.from_bytes(data[18:22], "big") == len(piano_track)

    def test_round_trip(self, piano_track):
        """An assembled file reads back as one format 0 track."""
        sequence = SMFReader().parse_bytes(SMFWriter.to_bytes(piano_track, 480))

        assert sequence.format == 0
        assert sequence.track_count == 1
        assert sequence.division == 480
        assert sequence.tracks[0].data == piano_track

    def test_write_file(self, tmp_path, piano_track):
        path = SMFWriter.write(piano_track, 96, tmp_path / "out" / "piano.mid")

        assert path.exists()
        assert path.read_bytes() == SMFWriter.to_bytes(piano_track, 96)

    def test_save_assembled_bytes(self, tmp_path, piano_track):
        """Saving ready-made file bytes writes exactly that buffer."""
        data = SMFWriter.to_bytes(piano_track, 480)

        path = SMFWriter.save(data, tmp_path / "new" / "dir" / "piano.mid")

        assert path.read_bytes() == data

    def test_written_file_loads_in_mido(self, tmp_path, piano_track):
        path = SMFWriter.write(piano_track, 96, tmp_path / "piano.mid")

        mid = mido.MidiFile(str(path))

        assert mid.type == 0
        assert mid.ticks_per_beat == 96
        assert len(mid.tracks) == 1
        assert mid.tracks[0].name == "Piano"
        programs = [m.program for m in mid.tracks[0] if m.type == "program_change"]
        assert programs == [5]
