"""
CLI display modules.
"""

from cli.display.tables import (
    display_sequence_info,
    display_track_table,
    display_event_table,
    display_instrument_catalog,
)
from cli.display.hex_view import display_hex_dump

__all__ = [
    "display_sequence_info",
    "display_track_table",
    "display_event_table",
    "display_instrument_catalog",
    "display_hex_dump",
]
