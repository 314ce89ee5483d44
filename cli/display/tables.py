"""
Rich table displays for MIDI file information.
"""

from pathlib import Path
from typing import Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cli.display.formatters import format_division, format_size, format_tempo, value_bar
from miditrack.formats.smf.events import DecodedEvent
from miditrack.models.sequence import Sequence, Track
from miditrack.utils.gm_instruments import list_catalog, get_instrument_category

console = Console()

FORMAT_NAMES = {
    0: "single track",
    1: "multi track, synchronous",
    2: "multi track, independent",
}


def display_sequence_info(sequence: Sequence, filepath: Path, file_size: int) -> None:
    """Display header information of a decoded MIDI file."""

    format_name = FORMAT_NAMES.get(sequence.format, "unknown")

    header_content = f"""[bold]File:[/bold] {filepath}
[bold]Size:[/bold] {format_size(file_size)}
[bold]Format:[/bold] {sequence.format} ({format_name})
[bold]Tracks:[/bold] {sequence.track_count} declared, {len(sequence.tracks)} with notes
[bold]Division:[/bold] {format_division(sequence.division)}"""

    console.print(
        Panel(
            header_content,
            title="[bold blue]MIDI File Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def build_track_table(
    tracks: Iterable[Track], title: str = "Tracks", numbered: bool = True
) -> Table:
    """
    Build the track summary table.

    Args:
        tracks: Track summaries
        title: Table title
        numbered: Show the 1-based position used by ``--track``

    Returns:
        Rich Table
    """
    tracks = list(tracks)
    max_notes = max((t.note_count for t in tracks), default=0)

    table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold cyan")
    if numbered:
        table.add_column("#", style="bold", width=3)
    table.add_column("Chunk", style="dim", width=5)
    table.add_column("Name", style="cyan")
    table.add_column("Notes", width=20)
    table.add_column("Size", justify="right")
    table.add_column("Tempo")

    for number, track in enumerate(tracks, start=1):
        notes = value_bar(track.note_count, max_value=max_notes, width=12)
        if not track.has_notes:
            notes = f"[dim]{notes}[/dim]"

        row: List[str] = [str(number)] if numbered else []
        row += [
            str(track.index + 1),
            escape(track.name),
            notes,
            str(track.size),
            format_tempo(track.tempo),
        ]
        table.add_row(*row)

    return table


def display_track_table(
    tracks: Iterable[Track], title: str = "Tracks", numbered: bool = True
) -> None:
    """Display the track summary table."""
    tracks = list(tracks)

    if not tracks:
        console.print("[yellow]No tracks with notes found in file.[/yellow]")
        return

    console.print(build_track_table(tracks, title=title, numbered=numbered))


def display_event_table(
    events: Iterable[DecodedEvent], title: str = "Events", limit: Optional[int] = None
) -> int:
    """
    Display decoded events with their offsets and raw bytes.

    Args:
        events: Decoded events in stream order
        title: Table title
        limit: Maximum number of rows (None = all)

    Returns:
        Number of rows displayed
    """
    table = Table(title=title, box=box.SIMPLE, show_header=True, header_style="bold magenta")
    table.add_column("Offset", style="dim", width=8)
    table.add_column("Tick", justify="right", width=8)
    table.add_column("Event", style="cyan")
    table.add_column("Bytes", style="dim")

    tick = 0
    shown = 0
    for decoded in events:
        if limit is not None and shown >= limit:
            break
        tick += decoded.event.delta_time
        table.add_row(
            f"0x{decoded.start:04X}",
            str(tick),
            str(decoded.event),
            _raw_preview(decoded),
        )
        shown += 1

    console.print(table)
    return shown


def _raw_preview(decoded: DecodedEvent, max_bytes: int = 12) -> str:
    payload_len = decoded.end - decoded.body
    raw = getattr(decoded.event, "payload", None)
    if raw is None:
        raw = decoded.event.to_bytes()
    head = " ".join(f"{b:02X}" for b in raw[:max_bytes])
    if len(raw) > max_bytes:
        head += f" ... ({payload_len} bytes)"
    return head


def display_instrument_catalog() -> None:
    """Display the instruments accepted by ``extract --instrument``."""
    table = Table(
        title="Instruments", box=box.ROUNDED, show_header=True, header_style="bold green"
    )
    table.add_column("Program", justify="right", width=7)
    table.add_column("Name", style="cyan")
    table.add_column("Family", style="dim")

    for program, name in list_catalog():
        if program < 0:
            table.add_row("-", name, "keep the track's instrument")
        else:
            table.add_row(str(program), name, get_instrument_category(program))

    console.print(table)
