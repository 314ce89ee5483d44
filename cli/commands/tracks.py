"""
Tracks command - track listing with note counts and tempo.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from cli.commands.common import load_all_chunks, load_sequence
from cli.display.tables import display_track_table
from miditrack.formats.smf.scanner import TrackScanner

console = Console()
app = typer.Typer()


@app.command()
def tracks(
    file: Path = typer.Argument(..., help="MIDI file to analyze"),
    show_all: bool = typer.Option(
        False, "--all", "-a", help="Include track chunks without notes"
    ),
) -> None:
    """
    Display the tracks of a MIDI file.

    Shows for each track:
    - Position (# used by extract --track) and chunk number
    - Name from the track-name meta event
    - Note-on/note-off count
    - Payload size
    - Tempo (single tempo, default, or several tempo changes)

    Examples:

        miditrack tracks song.mid

        miditrack tracks song.mid --all
    """
    sequence = load_sequence(file)

    console.print(
        Panel(
            f"[bold]File:[/bold] {file}\n[bold]Division:[/bold] {sequence.division}",
            title="[bold]Track Information[/bold]",
            border_style="blue",
        )
    )
    console.print()

    if not show_all:
        display_track_table(sequence.tracks)
        return

    summaries = [TrackScanner.summarize(chunk) for chunk in load_all_chunks(file)]
    display_track_table(summaries, title="All Track Chunks", numbered=False)

    skipped = sum(1 for t in summaries if not t.has_notes)
    if skipped:
        console.print(f"[dim]{skipped} chunk(s) without notes cannot be extracted.[/dim]")


if __name__ == "__main__":
    app()
