"""
Extract command - save one track as a standalone MIDI file,
optionally with a new instrument and tempo.
"""

import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from cli.commands.common import load_sequence
from miditrack.editing.extract import extract_track
from miditrack.formats.smf.writer import SMFWriter
from miditrack.models.tempo import TempoKnown
from miditrack.utils.gm_instruments import KEEP_ORIGINAL, get_instrument_name, resolve_instrument
from miditrack.utils.validation import MAX_TEMPO, MIN_TEMPO, ValidationError, is_tempo_in_range

console = Console()
app = typer.Typer()


def resolve_output_path(output: Optional[str], source: Path, filename: str) -> Path:
    """
    Decide where the extracted file goes.

    Args:
        output: Raw --output value, or None
        source: Source MIDI file
        filename: Suggested output file name

    Returns:
        Output file path
    """
    if output is None:
        return source.parent / filename

    path = Path(output)
    if path.is_dir() or output.endswith((os.sep, "/")) or not path.suffix:
        return path / filename
    return path


@app.command()
def extract(
    file: Path = typer.Argument(..., help="Source MIDI file (.mid, .midi)"),
    track: int = typer.Option(..., "--track", "-t", help="Track # as listed by 'tracks'"),
    instrument: Optional[str] = typer.Option(
        None, "--instrument", "-i", help="Program number or name (see 'instruments')"
    ),
    tempo: Optional[int] = typer.Option(
        None, "--tempo", "-b", help=f"New tempo in BPM ({MIN_TEMPO}-{MAX_TEMPO})"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output file or directory"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed progress"),
) -> None:
    """
    Extract one track into a single-track MIDI file.

    The output is a format 0 file with the source division. Bytes that
    are not edited are copied unchanged.

    - --instrument replaces every program change (or inserts one)
    - --tempo replaces the set-tempo event (only for tracks with a
      single tempo)

    Default output name: <file>-<track>_<instrument|original>.mid

    --output is a directory if it exists as one, ends with / or has no
    file suffix; missing directories are created.

    Examples:

        miditrack extract song.mid --track 2

        miditrack extract song.mid -t 2 -i violin -b 96

        miditrack extract song.mid -t 1 -i 40 -o out/
    """
    sequence = load_sequence(file, verbose=verbose)

    selected = sequence.get_track(track)
    if selected is None:
        if not sequence.tracks:
            console.print("[red]Error: No tracks with notes found in file.[/red]")
        else:
            console.print(
                f"[red]Invalid track number: {track}. Use 1-{len(sequence.tracks)}.[/red]"
            )
        raise typer.Exit(1)

    program = KEEP_ORIGINAL
    if instrument is not None:
        resolved = resolve_instrument(instrument)
        if resolved is None:
            console.print(f"[red]Error: Unknown instrument: {instrument}[/red]")
            console.print("Run [bold]miditrack instruments[/bold] to list the choices.")
            raise typer.Exit(1)
        program = resolved

    if tempo is not None:
        if not isinstance(selected.tempo, TempoKnown):
            console.print(
                f"[yellow]Tempo editing unavailable for '{escape(selected.name)}' "
                f"(tempo: {selected.tempo}); keeping the original.[/yellow]"
            )
        elif not is_tempo_in_range(tempo):
            console.print(
                f"[yellow]Tempo {tempo} outside {MIN_TEMPO}-{MAX_TEMPO} BPM; "
                f"keeping {selected.tempo.bpm}.[/yellow]"
            )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=not verbose,
    ) as progress:
        task = progress.add_task(f"Extracting {escape(selected.name)}...", total=None)

        try:
            result = extract_track(sequence, selected, file, program=program, bpm=tempo)
        except ValidationError as e:
            console.print(f"[red]Error: {e}[/red]")
            if verbose:
                console.print_exception()
            raise typer.Exit(1)

        output_path = resolve_output_path(output, file, result.filename)
        SMFWriter.save(result.data, output_path)

        progress.update(task, description="Done!")

    console.print(f"[green]Extracted:[/green] {escape(selected.name)} -> {output_path}")
    console.print(f"[dim]Instrument: {get_instrument_name(result.program)}[/dim]")
    if result.bpm is not None:
        console.print(f"[dim]Tempo: {selected.tempo.display_bpm} -> {result.bpm} BPM[/dim]")
    console.print(
        f"[dim]Output size: {len(result.data)} bytes "
        f"(track {len(selected.data)} -> {len(result.payload)} bytes)[/dim]"
    )


if __name__ == "__main__":
    app()
