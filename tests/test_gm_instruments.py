"""Tests for the General MIDI instrument tables."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from miditrack.utils.gm_instruments import (
    GM_VOICES,
    INSTRUMENT_CATALOG,
    KEEP_ORIGINAL,
    get_instrument_category,
    get_instrument_name,
    list_catalog,
    resolve_instrument,
)


class TestInstrumentNames:
    """Test cases for instrument name lookups."""

    def test_gm_table_size(self):
        assert len(GM_VOICES) == 128

    def test_catalog_names(self):
        assert get_instrument_name(0) == "Acoustic Grand Piano"
        assert get_instrument_name(40) == "Violin"
        assert get_instrument_name(80) == "Square Lead"
        assert get_instrument_name(KEEP_ORIGINAL) == "Original"

    def test_non_catalog_program(self):
        assert get_instrument_name(127) == "Gunshot"
        assert get_instrument_name(200) == "Program 200"

    def test_categories(self):
        assert get_instrument_category(0) == "Piano"
        assert get_instrument_category(40) == "Strings"
        assert get_instrument_category(128) == "Unknown"

    def test_catalog_order(self):
        catalog = list_catalog()

        assert catalog[0] == (KEEP_ORIGINAL, "Original")
        assert len(catalog) == len(INSTRUMENT_CATALOG) + 1


class TestResolveInstrument:
    """Test cases for parsing --instrument values."""

    def test_number(self):
        assert resolve_instrument("40") == 40

    def test_name_is_case_insensitive(self):
        assert resolve_instrument("violin") == 40
        assert resolve_instrument(" Square Lead ") == 80

    def test_original(self):
        assert resolve_instrument("original") == KEEP_ORIGINAL
        assert resolve_instrument("-1") == KEEP_ORIGINAL

    def test_unknown(self):
        assert resolve_instrument("kazoo") is None
        assert resolve_instrument("2") is None
        assert resolve_instrument("999") is None
