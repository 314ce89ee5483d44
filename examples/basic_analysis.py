#!/usr/bin/env python3
"""
Example: Basic MIDI file analysis

Shows how to use the SMF reader to list the tracks of a MIDI file.

Usage:
    python basic_analysis.py song.mid
"""

import sys

sys.path.insert(0, "..")

from miditrack import SMFReader, TempoKnown


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        return 1

    sequence = SMFReader.read(sys.argv[1])

    # Header
    print(f"Format: {sequence.format}")
    print(f"Tracks declared: {sequence.track_count}")
    print(f"Division: {sequence.division} ticks/quarter")
    print()

    # Tracks with notes
    print("Tracks:")
    for number, track in enumerate(sequence.tracks, start=1):
        editable = " (editable)" if isinstance(track.tempo, TempoKnown) else ""
        print(
            f"  {number}. {track.name}: {track.note_count} notes, "
            f"{track.size} bytes, tempo {track.tempo}{editable}"
        )

    if sequence.tracks:
        print()
        print("First 16 bytes of track 1:")
        print(" ".join(f"{b:02X}" for b in sequence.tracks[0].data[:16]))

    return 0


if __name__ == "__main__":
    sys.exit(main())
