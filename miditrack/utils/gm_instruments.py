"""
General MIDI instrument lookup tables.

Based on the General MIDI Level 1 sound set.
Reference: https://www.midi.org/specifications-old/item/gm-level-1-sound-set
"""

from typing import Dict, List, Optional, Tuple

# Sentinel program meaning "leave the track's instrument untouched"
KEEP_ORIGINAL = -1
KEEP_ORIGINAL_LABEL = "Original"

# GM Voice names (Program 0-127)
GM_VOICES = [
    # Piano (0-7)
    "Acoustic Grand Piano",
    "Bright Acoustic Piano",
    "Electric Grand Piano",
    "Honky-tonk Piano",
    "Electric Piano 1",
    "Electric Piano 2",
    "Harpsichord",
    "Clavinet",
    # Chromatic Percussion (8-15)
    "Celesta",
    "Glockenspiel",
    "Music Box",
    "Vibraphone",
    "Marimba",
    "Xylophone",
    "Tubular Bells",
    "Dulcimer",
    # Organ (16-23)
    "Drawbar Organ",
    "Percussive Organ",
    "Rock Organ",
    "Church Organ",
    "Reed Organ",
    "Accordion",
    "Harmonica",
    "Tango Accordion",
    # Guitar (24-31)
    "Acoustic Guitar (nylon)",
    "Acoustic Guitar (steel)",
    "Electric Guitar (jazz)",
    "Electric Guitar (clean)",
    "Electric Guitar (muted)",
    "Overdriven Guitar",
    "Distortion Guitar",
    "Guitar Harmonics",
    # Bass (32-39)
    "Acoustic Bass",
    "Electric Bass (finger)",
    "Electric Bass (pick)",
    "Fretless Bass",
    "Slap Bass 1",
    "Slap Bass 2",
    "Synth Bass 1",
    "Synth Bass 2",
    # Strings (40-47)
    "Violin",
    "Viola",
    "Cello",
    "Contrabass",
    "Tremolo Strings",
    "Pizzicato Strings",
    "Orchestral Harp",
    "Timpani",
    # Ensemble (48-55)
    "String Ensemble 1",
    "String Ensemble 2",
    "Synth Strings 1",
    "Synth Strings 2",
    "Choir Aahs",
    "Voice Oohs",
    "Synth Voice",
    "Orchestra Hit",
    # Brass (56-63)
    "Trumpet",
    "Trombone",
    "Tuba",
    "Muted Trumpet",
    "French Horn",
    "Brass Section",
    "Synth Brass 1",
    "Synth Brass 2",
    # Reed (64-71)
    "Soprano Sax",
    "Alto Sax",
    "Tenor Sax",
    "Baritone Sax",
    "Oboe",
    "English Horn",
    "Bassoon",
    "Clarinet",
    # Pipe (72-79)
    "Piccolo",
    "Flute",
    "Recorder",
    "Pan Flute",
    "Blown Bottle",
    "Shakuhachi",
    "Whistle",
    "Ocarina",
    # Synth Lead (80-87)
    "Lead 1 (square)",
    "Lead 2 (sawtooth)",
    "Lead 3 (calliope)",
    "Lead 4 (chiff)",
    "Lead 5 (charang)",
    "Lead 6 (voice)",
    "Lead 7 (fifths)",
    "Lead 8 (bass + lead)",
    # Synth Pad (88-95)
    "Pad 1 (new age)",
    "Pad 2 (warm)",
    "Pad 3 (polysynth)",
    "Pad 4 (choir)",
    "Pad 5 (bowed)",
    "Pad 6 (metallic)",
    "Pad 7 (halo)",
    "Pad 8 (sweep)",
    # Synth Effects (96-103)
    "FX 1 (rain)",
    "FX 2 (soundtrack)",
    "FX 3 (crystal)",
    "FX 4 (atmosphere)",
    "FX 5 (brightness)",
    "FX 6 (goblins)",
    "FX 7 (echoes)",
    "FX 8 (sci-fi)",
    # Ethnic (104-111)
    "Sitar",
    "Banjo",
    "Shamisen",
    "Koto",
    "Kalimba",
    "Bagpipe",
    "Fiddle",
    "Shanai",
    # Percussive (112-119)
    "Tinkle Bell",
    "Agogo",
    "Steel Drums",
    "Woodblock",
    "Taiko Drum",
    "Melodic Tom",
    "Synth Drum",
    "Reverse Cymbal",
    # Sound Effects (120-127)
    "Guitar Fret Noise",
    "Breath Noise",
    "Seashore",
    "Bird Tweet",
    "Telephone Ring",
    "Helicopter",
    "Applause",
    "Gunshot",
]

# Programs offered by the instrument picker
SELECTABLE_PROGRAMS: Tuple[int, ...] = (
    0, 1, 4, 5, 6, 11,
    24, 25, 26, 27,
    32, 33,
    40, 41, 42, 48, 52,
    56, 60,
    64, 65, 66, 68, 71, 73,
    80,
)

# Picker labels that differ from the GM table
_LABEL_OVERRIDES = {
    80: "Square Lead",
}

INSTRUMENT_CATALOG: Dict[int, str] = {
    program: _LABEL_OVERRIDES.get(program, GM_VOICES[program]) for program in SELECTABLE_PROGRAMS
}


def get_instrument_name(program: int) -> str:
    """
    Get the display name for a program number.

    Args:
        program: Program number (0-127) or ``KEEP_ORIGINAL``

    Returns:
        Human-readable instrument name
    """
    if program == KEEP_ORIGINAL:
        return KEEP_ORIGINAL_LABEL

    if program in INSTRUMENT_CATALOG:
        return INSTRUMENT_CATALOG[program]

    if 0 <= program < len(GM_VOICES):
        return GM_VOICES[program]

    return f"Program {program}"


def get_instrument_category(program: int) -> str:
    """Get the GM family of a program number."""
    if program < 0 or program > 127:
        return "Unknown"

    categories = [
        "Piano",
        "Chromatic Percussion",
        "Organ",
        "Guitar",
        "Bass",
        "Strings",
        "Ensemble",
        "Brass",
        "Reed",
        "Pipe",
        "Synth Lead",
        "Synth Pad",
        "Synth Effects",
        "Ethnic",
        "Percussive",
        "Sound Effects",
    ]
    return categories[program // 8]


def resolve_instrument(value: str) -> Optional[int]:
    """
    Resolve a user-supplied instrument to a catalog program number.

    Accepts a program number ("40"), a catalog name ("violin", case
    insensitive) or "original" for ``KEEP_ORIGINAL``.

    Args:
        value: Number or name

    Returns:
        Program number, ``KEEP_ORIGINAL``, or None if not in the catalog
    """
    text = value.strip()

    if text.lower() == KEEP_ORIGINAL_LABEL.lower():
        return KEEP_ORIGINAL

    try:
        program = int(text)
    except ValueError:
        lowered = text.lower()
        for program, name in INSTRUMENT_CATALOG.items():
            if name.lower() == lowered:
                return program
        return None

    if program == KEEP_ORIGINAL or program in INSTRUMENT_CATALOG:
        return program
    return None


def list_catalog() -> List[Tuple[int, str]]:
    """Return the picker entries in display order, "Original" first."""
    return [(KEEP_ORIGINAL, KEEP_ORIGINAL_LABEL)] + list(INSTRUMENT_CATALOG.items())
