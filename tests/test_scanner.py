"""Tests for the track event decoder and scanner."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from miditrack.formats.smf.events import decode_event, iter_events
from miditrack.formats.smf.scanner import TrackScanner
from miditrack.models.event import ChannelVoiceEvent, MetaEvent, SysExEvent
from miditrack.models.sequence import TrackChunk
from miditrack.models.tempo import TempoAmbiguous, TempoKnown, TempoNotFound
from miditrack.utils.validation import EventStreamError

EOT = bytes([0x00, 0xFF, 0x2F, 0x00])


def tempo_event(microseconds: int) -> bytes:
    return bytes([0x00, 0xFF, 0x51, 0x03]) + microseconds.to_bytes(3, "big")


class TestDecodeEvent:
    """Test cases for single event decoding."""

    def test_note_on(self):
        decoded = decode_event(bytes([0x00, 0x91, 0x3C, 0x40]), 0)

        assert isinstance(decoded.event, ChannelVoiceEvent)
        assert decoded.event.command == 0x90
        assert decoded.event.channel == 1
        assert decoded.event.data == bytes([0x3C, 0x40])
        assert not decoded.event.running
        assert (decoded.start, decoded.body, decoded.end) == (0, 1, 4)

    def test_running_status(self):
        decoded = decode_event(bytes([0x10, 0x3E, 0x40]), 0, running_status=0x92)

        assert decoded.event.running
        assert decoded.event.status == 0x92
        assert decoded.end == 3

    def test_data_byte_without_running_status(self):
        with pytest.raises(EventStreamError) as exc_info:
            decode_event(bytes([0x00, 0x3C, 0x40]), 0)

        assert exc_info.value.offset == 0

    def test_multi_byte_delta(self):
        decoded = decode_event(bytes([0x83, 0x60, 0x80, 0x3C, 0x00]), 0)

        assert decoded.event.delta_time == 480
        assert decoded.body == 2

    def test_meta_event(self):
        data = bytes([0x00, 0xFF, 0x03, 0x04]) + b"Lead"

        decoded = decode_event(data, 0)

        assert isinstance(decoded.event, MetaEvent)
        assert decoded.event.is_track_name
        assert decoded.event.text == "Lead"
        assert decoded.payload_start == 4
        assert decoded.end == 8

    def test_sysex_event(self):
        data = bytes([0x00, 0xF0, 0x05, 0x7E, 0x7F, 0x09, 0x01, 0xF7])

        decoded = decode_event(data, 0)

        assert isinstance(decoded.event, SysExEvent)
        assert decoded.event.payload == bytes([0x7E, 0x7F, 0x09, 0x01, 0xF7])
        assert decoded.end == len(data)

    def test_program_change_takes_one_byte(self):
        data = bytes([0x00, 0xC0, 0x05, 0x00, 0xD0, 0x40])

        events = list(iter_events(data))

        assert len(events) == 2
        assert events[0].end == 3
        assert events[1].event.command == 0xD0

    def test_unsupported_status(self):
        with pytest.raises(EventStreamError, match="Unsupported"):
            decode_event(bytes([0x00, 0xF2, 0x00, 0x00]), 0)

    def test_truncated_event(self):
        with pytest.raises(EventStreamError) as exc_info:
            decode_event(bytes([0x00, 0x00, 0x90, 0x3C]), 1)

        assert exc_info.value.offset == 1


class TestIterEvents:
    """Test cases for event stream iteration."""

    def test_meta_keeps_running_status(self):
        """Meta events between channel events leave running status untouched."""
        data = (
            bytes([0x00, 0x90, 0x3C, 0x40])
            + bytes([0x00, 0xFF, 0x01, 0x01, 0x41])
            + bytes([0x10, 0x3C, 0x00])
        )

        events = list(iter_events(data))

        assert events[2].event.running
        assert events[2].event.status == 0x90

    def test_offsets_are_contiguous(self, piano_track):
        events = list(iter_events(piano_track))

        assert events[0].start == 0
        for previous, current in zip(events, events[1:]):
            assert previous.end == current.start
        assert events[-1].end == len(piano_track)


class TestTrackScanner:
    """Test cases for track summaries."""

    def test_note_count(self):
        data = bytes([0x00, 0x90, 0x3C, 0x40, 0x60, 0x80, 0x3C, 0x40])

        result = TrackScanner.scan(data)

        assert result.note_count == 2
        assert result.name is None
        assert result.tempo == TempoNotFound()
        assert result.complete

    def test_running_status_notes(self, running_status_track):
        result = TrackScanner.scan(running_status_track)

        assert result.note_count == 4
        assert result.event_count == 5

    def test_other_channel_events_are_not_notes(self):
        data = (
            bytes([0x00, 0xB0, 0x07, 0x64])
            + bytes([0x00, 0xE0, 0x00, 0x40])
            + bytes([0x00, 0xA0, 0x3C, 0x10])
            + EOT
        )

        assert TrackScanner.scan(data).note_count == 0

    def test_first_track_name_wins(self):
        data = (
            bytes([0x00, 0xFF, 0x03, 0x05])
            + b"First"
            + bytes([0x00, 0xFF, 0x03, 0x06])
            + b"Second"
            + EOT
        )

        assert TrackScanner.scan(data).name == "First"

    def test_single_tempo(self):
        result = TrackScanner.scan(tempo_event(500000) + EOT)

        assert result.tempo == TempoKnown(120)

    def test_tempo_is_rounded(self):
        assert TrackScanner.scan(tempo_event(600000)).tempo == TempoKnown(100)
        # 60000000 / 461538 = 130.0001
        assert TrackScanner.scan(tempo_event(461538)).tempo == TempoKnown(130)

    def test_several_tempos_are_ambiguous(self):
        data = tempo_event(500000) + tempo_event(500000) + EOT

        tempo = TrackScanner.scan(data).tempo

        assert tempo == TempoAmbiguous(2)
        assert tempo.display_bpm is None
        assert not tempo.editable

    def test_zero_tempo_ignored(self):
        result = TrackScanner.scan(tempo_event(0) + EOT)

        assert result.tempo == TempoNotFound()

    def test_sysex_is_skipped(self):
        data = (
            bytes([0x00, 0xF0, 0x03, 0x90, 0x3C, 0xF7])
            + bytes([0x00, 0x90, 0x3C, 0x40])
            + EOT
        )

        assert TrackScanner.scan(data).note_count == 1

    def test_meta_payload_is_not_scanned(self):
        """Bytes that look like notes inside a text event are not counted."""
        data = bytes([0x00, 0xFF, 0x01, 0x03, 0x90, 0x3C, 0x40]) + EOT

        assert TrackScanner.scan(data).note_count == 0

    def test_truncated_tail_keeps_prefix(self):
        data = bytes([0x00, 0x90, 0x3C, 0x40, 0x00, 0xFF, 0x03, 0x7F, 0x41])

        result = TrackScanner.scan(data)

        assert result.note_count == 1
        assert not result.complete
        assert result.error.offset == 4

    def test_summarize_chunk(self, piano_track):
        chunk = TrackChunk(index=4, offset=22, declared_length=len(piano_track), data=piano_track)

        track = TrackScanner.summarize(chunk)

        assert track.index == 4
        assert track.name == "Piano"
        assert track.note_count == 2
        assert track.tempo == TempoKnown(120)
        assert track.tempo_editable
        assert track.data == piano_track

    def test_summarize_unnamed_chunk(self, running_status_track):
        chunk = TrackChunk(
            index=0, offset=22, declared_length=len(running_status_track), data=running_status_track
        )

        assert TrackScanner.summarize(chunk).name == "Track 1"
