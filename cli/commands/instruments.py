"""
Instruments command - list the selectable instruments.
"""

import typer

from cli.display.tables import display_instrument_catalog

app = typer.Typer()


@app.command()
def instruments() -> None:
    """
    List the instruments accepted by 'extract --instrument'.

    Either the program number or the name (case insensitive) can be
    passed; "original" keeps the track's instrument.
    """
    display_instrument_catalog()


if __name__ == "__main__":
    app()
