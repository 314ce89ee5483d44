"""Format handlers for Standard MIDI Files."""

from miditrack.formats.smf import SMFReader, SMFWriter

__all__ = ["SMFReader", "SMFWriter"]
