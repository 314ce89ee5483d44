#!/usr/bin/env python3
"""
Example: Change the instrument and tempo of one track

Shows how to chain the rewriters by hand and write the result,
without the extract helper.

Usage:
    python modify_track.py song.mid 1 40 96
"""

import sys

sys.path.insert(0, "..")

from miditrack import SMFReader, SMFWriter
from miditrack.editing import InstrumentRewriter, TempoRewriter
from miditrack.utils.gm_instruments import get_instrument_name


def main():
    if len(sys.argv) < 5:
        print(__doc__)
        return 1

    source, number, program, bpm = sys.argv[1], int(sys.argv[2]), int(sys.argv[3]), int(sys.argv[4])

    sequence = SMFReader.read(source)
    track = sequence.get_track(number)
    if track is None:
        print(f"No track {number} (file has {len(sequence.tracks)} tracks with notes)")
        return 1

    # Instrument first, then tempo
    instrument = InstrumentRewriter(program).rewrite(track.data)
    print(f"{get_instrument_name(program)}: {instrument.replaced} program change(s) replaced")

    tempo = TempoRewriter(bpm).rewrite(instrument.data)
    action = "replaced" if tempo.found else "inserted"
    print(f"Tempo {bpm} BPM ({tempo.microseconds} us/quarter) {action}")

    output = SMFWriter.write(tempo.data, sequence.division, f"track{number}_edited.mid")
    print(f"Saved to: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
