"""
Helpers shared by the CLI commands.
"""

from pathlib import Path
from typing import List

import typer
from rich.console import Console

from miditrack.formats.smf.reader import SMFReader
from miditrack.models.sequence import Sequence, TrackChunk
from miditrack.utils.validation import MidiFileError, is_midi_filename

console = Console()


def check_midi_file(file: Path) -> None:
    """Exit with an error unless ``file`` is an existing .mid/.midi file."""
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    if not is_midi_filename(file):
        console.print(f"[red]Error: Please select a valid MIDI file (.mid, .midi): {file}[/red]")
        raise typer.Exit(1)


def load_sequence(file: Path, verbose: bool = False) -> Sequence:
    """
    Read and summarize a MIDI file, exiting on any container error.

    Args:
        file: Path to .mid file
        verbose: Print the traceback on failure

    Returns:
        Decoded Sequence
    """
    check_midi_file(file)

    try:
        return SMFReader.read(file)
    except MidiFileError as e:
        console.print(f"[red]Error parsing MIDI file: {e}[/red]")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)


def load_chunk(file: Path, chunk: int) -> TrackChunk:
    """
    Read one raw track chunk by its 1-based position in the file.

    Args:
        file: Path to .mid file
        chunk: Chunk number (1-based, includes tracks without notes)

    Returns:
        The TrackChunk
    """
    chunks = load_all_chunks(file)

    if not 1 <= chunk <= len(chunks):
        console.print(f"[red]Invalid chunk number: {chunk}. Use 1-{len(chunks)}.[/red]")
        raise typer.Exit(1)

    return chunks[chunk - 1]


def load_all_chunks(file: Path) -> List[TrackChunk]:
    """Read every raw track chunk of a MIDI file."""
    check_midi_file(file)

    try:
        _, chunks = SMFReader.read_chunks(file.read_bytes())
    except MidiFileError as e:
        console.print(f"[red]Error parsing MIDI file: {e}[/red]")
        raise typer.Exit(1)

    return chunks
