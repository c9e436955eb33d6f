"""Tests for the byte decoder."""

from ydict.render.decoder import (
    CP1250_HIGH,
    PHONETIC_GLYPHS,
    decode_byte,
    decode_bytes,
)


class TestDecodeByte:
    """Tests for decode_byte function."""

    def test_ascii_passthrough(self):
        """Test ASCII bytes pass through unchanged."""
        assert decode_byte(0x41) == "A"
        assert decode_byte(0x7A) == "z"
        assert decode_byte(0x20) == " "

    def test_del_is_tilde(self):
        """Test 0x7F renders as a tilde in both fonts."""
        assert decode_byte(0x7F) == "~"
        assert decode_byte(0x7F, phonetic=True) == "~"

    def test_polish_letters(self):
        """Test CP1250 high bytes decode to Polish letters."""
        assert decode_byte(0xB9) == "ą"
        assert decode_byte(0xEA) == "ę"
        assert decode_byte(0xB3) == "ł"
        assert decode_byte(0xE6) == "ć"
        assert decode_byte(0x9C) == "ś"
        assert decode_byte(0x9F) == "ź"
        assert decode_byte(0xBF) == "ż"

    def test_undefined_code_page_bytes(self):
        """Test bytes CP1250 leaves undefined render as placeholder."""
        for b in (0x81, 0x83, 0x88, 0x90, 0x98):
            assert decode_byte(b) == "?"

    def test_phonetic_slots(self):
        """Test known phonetic glyph slots."""
        assert decode_byte(0x82, phonetic=True) == "ɔ"
        assert decode_byte(0x85, phonetic=True) == "ʃ"
        assert decode_byte(0x88, phonetic=True) == "ə"
        assert decode_byte(0x8A, phonetic=True) == "ɪ"
        assert decode_byte(0x8D, phonetic=True) == "ː"
        assert decode_byte(0x90, phonetic=True) == "ŋ"
        assert decode_byte(0x97, phonetic=True) == "ð"
        assert decode_byte(0x98, phonetic=True) == "æ"

    def test_phonetic_unknown_slots(self):
        """Test unidentified phonetic slots render as placeholder."""
        assert decode_byte(0x80, phonetic=True) == "?"
        assert decode_byte(0x9F, phonetic=True) == "?"

    def test_same_byte_depends_on_font(self):
        """Test 0x8A is a glyph in the phonetic font and a letter otherwise."""
        assert decode_byte(0x8A, phonetic=True) == "ɪ"
        assert decode_byte(0x8A, phonetic=False) == "Š"

    def test_phonetic_outside_glyph_range(self):
        """Test phonetic font only remaps 0x80..0x9F."""
        assert decode_byte(0x61, phonetic=True) == "a"
        assert decode_byte(0xB9, phonetic=True) == "ą"


class TestTables:
    """Tests for the decoding tables."""

    def test_table_sizes(self):
        """Test table sizes."""
        assert len(PHONETIC_GLYPHS) == 32
        assert len(CP1250_HIGH) == 128

    def test_tables_are_immutable(self):
        """Test tables are tuples."""
        assert isinstance(PHONETIC_GLYPHS, tuple)
        assert isinstance(CP1250_HIGH, tuple)


class TestDecodeBytes:
    """Tests for decode_bytes function."""

    def test_word(self):
        """Test decoding a CP1250 word."""
        assert decode_bytes(b"abdykowa\xe6") == "abdykować"

    def test_phonetic_run(self):
        """Test decoding a phonetic transcription."""
        assert decode_bytes(b"\x98bd\x8ake\x8at", phonetic=True) == "æbdɪkeɪt"

    def test_empty(self):
        """Test empty input."""
        assert decode_bytes(b"") == ""
