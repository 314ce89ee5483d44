"""Test configuration and fixtures."""

import struct

import mido
import pytest

# Track payloads used across tests
END_OF_TRACK = bytes([0x00, 0xFF, 0x2F, 0x00])

# Name "Piano", 120 BPM, program 5, one note on/off pair
PIANO_TRACK = (
    bytes([0x00, 0xFF, 0x03, 0x05])
    + b"Piano"
    + bytes([0x00, 0xFF, 0x51, 0x03, 0x07, 0xA1, 0x20])
    + bytes([0x00, 0xC0, 0x05])
    + bytes([0x00, 0x90, 0x3C, 0x40])
    + bytes([0x60, 0x80, 0x3C, 0x40])
    + END_OF_TRACK
)

# Two notes using running status, no program change, no tempo
RUNNING_STATUS_TRACK = (
    bytes([0x00, 0x90, 0x3C, 0x40])
    + bytes([0x10, 0x3E, 0x40])
    + bytes([0x10, 0x3C, 0x00])
    + bytes([0x10, 0x3E, 0x00])
    + END_OF_TRACK
)


def build_smf(tracks, format_type=1, division=0x60, header_length=6):
    """Assemble an SMF from raw track payloads."""
    header = b"MThd" + struct.pack(">IHHH", header_length, format_type, len(tracks), division)
    header += bytes(header_length - 6)
    body = b"".join(b"MTrk" + struct.pack(">I", len(t)) + t for t in tracks)
    return header + body


@pytest.fixture
def make_smf():
    """Return the SMF builder."""
    return build_smf


@pytest.fixture
def piano_track():
    return PIANO_TRACK


@pytest.fixture
def running_status_track():
    return RUNNING_STATUS_TRACK


@pytest.fixture
def smf_data():
    """Three-track file: a conductor without notes, piano, running-status track."""
    conductor = bytes([0x00, 0xFF, 0x03, 0x04]) + b"Song" + END_OF_TRACK
    return build_smf([conductor, PIANO_TRACK, RUNNING_STATUS_TRACK])


@pytest.fixture
def smf_file(tmp_path, smf_data):
    """Write ``smf_data`` to a .mid file."""
    path = tmp_path / "song.mid"
    path.write_bytes(smf_data)
    return path


@pytest.fixture
def mido_file(tmp_path):
    """
    MIDI file written by mido (uses running status on output).

    Tracks:
        1. "Conductor" - tempo only, no notes
        2. "Piano" - 120 BPM, program 0, 4 note events
        3. "Bass" - two tempo changes, 2 note events
    """
    mid = mido.MidiFile(type=1, ticks_per_beat=96)

    conductor = mido.MidiTrack()
    conductor.append(mido.MetaMessage("track_name", name="Conductor", time=0))
    conductor.append(mido.MetaMessage("set_tempo", tempo=500000, time=0))
    mid.tracks.append(conductor)

    piano = mido.MidiTrack()
    piano.append(mido.MetaMessage("track_name", name="Piano", time=0))
    piano.append(mido.MetaMessage("set_tempo", tempo=500000, time=0))
    piano.append(mido.Message("program_change", program=0, channel=0, time=0))
    piano.append(mido.Message("note_on", note=60, velocity=64, channel=0, time=0))
    piano.append(mido.Message("note_on", note=64, velocity=64, channel=0, time=0))
    piano.append(mido.Message("note_off", note=60, velocity=0, channel=0, time=96))
    piano.append(mido.Message("note_off", note=64, velocity=0, channel=0, time=0))
    mid.tracks.append(piano)

    bass = mido.MidiTrack()
    bass.append(mido.MetaMessage("track_name", name="Bass", time=0))
    bass.append(mido.MetaMessage("set_tempo", tempo=500000, time=0))
    bass.append(mido.Message("note_on", note=36, velocity=100, channel=1, time=0))
    bass.append(mido.MetaMessage("set_tempo", tempo=600000, time=48))
    bass.append(mido.Message("note_off", note=36, velocity=0, channel=1, time=48))
    mid.tracks.append(bass)

    path = tmp_path / "mido_song.mid"
    mid.save(str(path))
    return path
