"""
Hex dump display for track payloads.

Bytes are colored by their role in the event stream so delta-times,
status bytes and payloads can be told apart at a glance.
"""

from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from miditrack.formats.smf.events import iter_events
from miditrack.models.event import ChannelVoiceEvent, SysExEvent
from miditrack.utils.validation import EventStreamError

console = Console()

ROLE_STYLES = {
    "delta": "dim",
    "status": "bold cyan",
    "running": "bold white",
    "meta": "magenta",
    "sysex": "yellow",
    "data": "white",
    "invalid": "bold red",
}


def classify_bytes(data: bytes) -> List[str]:
    """
    Assign an event-stream role to every byte of a track payload.

    Args:
        data: Track payload

    Returns:
        One role name (a key of ROLE_STYLES) per byte
    """
    roles = ["invalid"] * len(data)

    try:
        for decoded in iter_events(data):
            for i in range(decoded.start, decoded.body):
                roles[i] = "delta"

            event = decoded.event
            if isinstance(event, ChannelVoiceEvent):
                roles[decoded.body] = "running" if event.running else "status"
                for i in range(decoded.body + 1, decoded.end):
                    roles[i] = "data"
            else:
                role = "sysex" if isinstance(event, SysExEvent) else "meta"
                roles[decoded.body] = "status"
                for i in range(decoded.body + 1, decoded.end):
                    roles[i] = role
    except EventStreamError:
        # Undecodable tail keeps the "invalid" role
        return roles

    return roles


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    bytes_per_line: int = 16,
    max_lines: int = 32,
) -> None:
    """Display a role-colored hex dump of a track payload."""

    roles = classify_bytes(data)
    end = min(len(data), max_lines * bytes_per_line)
    content = Text()

    for offset in range(0, end, bytes_per_line):
        chunk = data[offset : offset + bytes_per_line]

        content.append(f"{offset:08X}  ", style="dim")

        for i, byte in enumerate(chunk):
            if i == 8:
                content.append(" ")
            content.append(f"{byte:02X} ", style=ROLE_STYLES[roles[offset + i]])

        padding = bytes_per_line - len(chunk)
        content.append("   " * padding + (" " if padding and len(chunk) <= 8 else ""))

        ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
        content.append(f" {ascii_str}\n", style="cyan")

    if len(data) > end:
        content.append(f"... {len(data) - end} more bytes ...", style="dim")

    console.print(Panel(content, title=title, border_style="blue", expand=False))

    legend = Text()
    for role, style in ROLE_STYLES.items():
        legend.append(f"{role} ", style=style)
    console.print(legend)
