"""
Dump command - annotated hex dump of a track chunk.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.commands.common import load_chunk
from cli.display.hex_view import display_hex_dump

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help="MIDI file to dump"),
    chunk: int = typer.Option(1, "--chunk", "-c", help="Track chunk number in the file (1-based)"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    lines: int = typer.Option(32, "--lines", "-l", help="Maximum lines (0=all)"),
) -> None:
    """
    Show a hex dump of one track chunk payload.

    Bytes are colored by role: delta-time, status, running-status data,
    meta payload, SysEx payload, channel data, or undecodable.

    Examples:

        miditrack dump song.mid --chunk 2

        miditrack dump song.mid -c 2 --lines 0
    """
    track_chunk = load_chunk(file, chunk)

    if width <= 0:
        console.print(f"[red]Invalid width: {width}[/red]")
        raise typer.Exit(1)

    max_lines = lines if lines > 0 else (len(track_chunk.data) // width) + 1

    display_hex_dump(
        track_chunk.data,
        title=f"Chunk {chunk} @ 0x{track_chunk.offset:X} ({len(track_chunk.data)} bytes)",
        bytes_per_line=width,
        max_lines=max_lines,
    )


if __name__ == "__main__":
    app()
