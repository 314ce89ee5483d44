"""
Info command - display MIDI file header and track summary.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.commands.common import load_sequence
from cli.display.tables import display_sequence_info, display_track_table

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="MIDI file to analyze"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show tracebacks on errors"),
) -> None:
    """
    Display MIDI file information.

    Shows the header fields (format, declared track count, division)
    followed by every track that contains notes.

    Examples:

        miditrack info song.mid
    """
    sequence = load_sequence(file, verbose=verbose)

    display_sequence_info(sequence, file, file.stat().st_size)
    console.print()
    display_track_table(sequence.tracks)

    if sequence.tracks:
        console.print(
            "[dim]Use [bold]miditrack extract FILE --track #[/bold] to save a track.[/dim]"
        )


if __name__ == "__main__":
    app()
