"""
Events command - list the decoded events of a track chunk.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.commands.common import load_chunk
from cli.display.tables import display_event_table
from miditrack.formats.smf.events import iter_events
from miditrack.utils.validation import EventStreamError

console = Console()
app = typer.Typer()


@app.command()
def events(
    file: Path = typer.Argument(..., help="MIDI file to inspect"),
    chunk: int = typer.Option(1, "--chunk", "-c", help="Track chunk number in the file (1-based)"),
    limit: int = typer.Option(0, "--limit", "-n", help="Maximum events to show (0=all)"),
) -> None:
    """
    List the events of one track chunk.

    Chunks are numbered by their position in the file, including
    chunks without notes (see 'tracks --all').

    Examples:

        miditrack events song.mid --chunk 1

        miditrack events song.mid -c 3 -n 40
    """
    track_chunk = load_chunk(file, chunk)

    decoded = []
    error = None
    try:
        for event in iter_events(track_chunk.data):
            decoded.append(event)
    except EventStreamError as e:
        error = e

    shown = display_event_table(
        decoded,
        title=f"Chunk {chunk} ({len(track_chunk.data)} bytes)",
        limit=limit or None,
    )

    if shown < len(decoded):
        console.print(f"[dim]... {len(decoded) - shown} more events[/dim]")

    if error is not None:
        console.print(f"[red]Decoding stopped at offset 0x{error.offset:04X}: {error}[/red]")

    if track_chunk.truncated:
        console.print(
            f"[yellow]Chunk declares {track_chunk.declared_length} bytes "
            f"but the file ends after {len(track_chunk.data)}.[/yellow]"
        )


if __name__ == "__main__":
    app()
