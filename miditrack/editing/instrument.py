"""
Instrument (program change) rewriter.

Re-encodes a track payload so that every program change selects the
target program. If the track has no program change at all, one is
inserted at the very start on channel 1.

The rewrite process:
1. Copy each delta-time verbatim
2. Copy meta and SysEx events byte for byte
3. Emit channel voice events with an explicit status byte
   (running status is expanded, never re-compressed)
4. Replace the data byte of program change events
5. Prepend ``00 C0 <program>`` if no program change was seen
"""

import logging
from dataclasses import dataclass

from miditrack.formats.smf.events import iter_events
from miditrack.models.event import ChannelVoiceEvent, EventType
from miditrack.utils.validation import EventStreamError, validate_program

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstrumentRewrite:
    """
    Result of an instrument rewrite.

    Attributes:
        data: New track payload
        program: Program written
        replaced: Number of program change events rewritten
    """

    data: bytes
    program: int
    replaced: int

    @property
    def inserted(self) -> bool:
        """True if a program change had to be prepended."""
        return self.replaced == 0


class InstrumentRewriter:
    """
    Rewriter that substitutes or inserts a program change.

    Attributes:
        program: Target program number (0-127)
    """

    def __init__(self, program: int):
        validate_program(program)
        self.program = program

    def rewrite(self, data: bytes) -> InstrumentRewrite:
        """
        Rewrite a track payload.

        Args:
            data: Raw track payload (never modified)

        Returns:
            InstrumentRewrite with the new payload
        """
        result = bytearray()
        replaced = 0

        try:
            for decoded in iter_events(data):
                event = decoded.event

                # Delta-time bytes
                result += data[decoded.start : decoded.body]

                if not isinstance(event, ChannelVoiceEvent):
                    result += data[decoded.body : decoded.end]
                elif event.is_program_change:
                    result += bytes([event.status, self.program])
                    replaced += 1
                else:
                    result += event.to_bytes()
        except EventStreamError as e:
            logger.warning("Copying undecodable tail from offset %d verbatim: %s", e.offset, e)
            result += data[e.offset :]

        if not replaced:
            logger.debug("No program change found, inserting program %d", self.program)
            result[0:0] = bytes([0x00, EventType.PROGRAM_CHANGE, self.program])

        return InstrumentRewrite(bytes(result), self.program, replaced)


def change_instrument(data: bytes, program: int) -> bytes:
    """
    Return a copy of a track payload using ``program`` as its instrument.

    Args:
        data: Raw track payload
        program: Program number (0-127)

    Returns:
        Rewritten track payload
    """
    return InstrumentRewriter(program).rewrite(data).data
