"""
miditrack - Extract and edit single tracks of Standard MIDI Files.

A modern CLI tool for inspecting MIDI files and saving one track,
optionally with a new instrument and tempo.
"""

import typer
from rich.console import Console

from cli.commands.dump import dump
from cli.commands.events import events
from cli.commands.extract import extract
from cli.commands.info import info
from cli.commands.instruments import instruments
from cli.commands.tracks import tracks
from cli.log import configure_logging
from miditrack import __version__

console = Console()

# Main app
app = typer.Typer(
    name="miditrack",
    help="Extract and edit single tracks of Standard MIDI Files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="tracks")(tracks)
app.command(name="extract")(extract)
app.command(name="events")(events)
app.command(name="dump")(dump)
app.command(name="instruments")(instruments)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]miditrack[/bold] version {__version__}")
    console.print("[dim]Single-track extractor for Standard MIDI Files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    debug: bool = typer.Option(False, "--debug", help="Show debug log messages"),
) -> None:
    """
    miditrack - Save one track of a MIDI file as its own file.

    [bold]Quick Start:[/bold]

        miditrack info song.mid                  # Header and track list
        miditrack extract song.mid --track 2     # Save track 2

    [bold]Editing:[/bold]

        miditrack extract song.mid -t 2 -i violin       # New instrument
        miditrack extract song.mid -t 2 -b 96           # New tempo
        miditrack instruments                           # Instrument list

    [bold]Inspection:[/bold]

        miditrack tracks song.mid --all    # Include tracks without notes
        miditrack events song.mid -c 2     # Decoded events of chunk 2
        miditrack dump song.mid -c 2       # Hex dump of chunk 2

    Use --help with any command for more details.
    """
    configure_logging(verbose=debug)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
