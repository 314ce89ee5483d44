"""
Display formatting utilities for CLI output.

Provides bar graphics, tempo labels, and other formatting helpers.
"""

from miditrack.models.tempo import TempoAmbiguous, TempoInfo, TempoKnown


def value_bar(
    value: int,
    max_value: int = 127,
    width: int = 10,
    filled_char: str = "█",
    empty_char: str = "░",
    show_value: bool = True,
) -> str:
    """
    Create a text-based bar graphic.

    Args:
        value: Current value
        max_value: Value of a full bar
        width: Bar width in characters
        filled_char: Character for filled portion
        empty_char: Character for empty portion
        show_value: Prefix the numeric value

    Returns:
        Formatted string like "  91 [████████░░]"
    """
    if max_value <= 0:
        max_value = 1

    clamped = max(0, min(value, max_value))

    fill_count = int((clamped / max_value) * width)
    if clamped and not fill_count:
        fill_count = 1
    bar = filled_char * fill_count + empty_char * (width - fill_count)

    if show_value:
        return f"{value:5d} [{bar}]"
    return f"[{bar}]"


def format_tempo(tempo: TempoInfo) -> str:
    """
    Format a tempo detection result with Rich markup.

    Returns:
        "120 BPM" for a single tempo, dimmed default for no tempo,
        yellow warning for several tempo changes
    """
    if isinstance(tempo, TempoKnown):
        return f"{tempo.bpm} BPM"
    if isinstance(tempo, TempoAmbiguous):
        return f"[yellow]{tempo.count} changes[/yellow]"
    return f"[dim]{tempo.display_bpm} BPM (default)[/dim]"


def format_division(division: int) -> str:
    """Format the header division field."""
    if division & 0x8000:
        return f"0x{division:04X} [yellow](SMPTE, unsupported)[/yellow]"
    return f"{division} ticks/quarter"


def format_size(size: int) -> str:
    """Format a byte count."""
    if size < 1024:
        return f"{size} bytes"
    return f"{size / 1024:.1f} KB ({size} bytes)"
