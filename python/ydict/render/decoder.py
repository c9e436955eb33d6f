"""Byte to text decoding for dictionary records.

Records are single-byte text in one of two encodings:
    - CP1250 (Central European) for ordinary text
    - A custom glyph font (\\f1 in the markup) for phonetic transcriptions,
      where bytes 0x80..0x9F are IPA-like symbols instead of letters

Unknown bytes render as "?" so that missing mappings stay visible.
"""

PLACEHOLDER = "?"

PHONETIC_FIRST = 0x80
PHONETIC_LAST = 0x9F

# Slot i holds the symbol for byte 0x80 + i in the phonetic font.
# "?" marks slots that have not been identified yet.
PHONETIC_GLYPHS: tuple[str, ...] = (
    "?", "?", "ɔ", "ʒ", "?", "ʃ", "ɛ", "ʌ",
    "ə", "θ", "ɪ", "ɑ", "?", "ː", "ˈ", "?",
    "ŋ", "?", "?", "?", "?", "?", "?", "ð",
    "æ", "?", "?", "?", "?", "?", "?", "?",
)


def _cp1250_char(byte: int) -> str:
    try:
        return bytes((byte,)).decode("cp1250")
    except UnicodeDecodeError:
        return PLACEHOLDER


# Index i holds the character for byte 0x80 + i.
CP1250_HIGH: tuple[str, ...] = tuple(_cp1250_char(b) for b in range(0x80, 0x100))


def decode_byte(byte: int, phonetic: bool = False) -> str:
    """Decode a single record byte.

    Args:
        byte: Byte value (0..255).
        phonetic: True while the phonetic font is selected.

    Returns:
        The decoded text (one character).
    """
    if phonetic and PHONETIC_FIRST <= byte <= PHONETIC_LAST:
        return PHONETIC_GLYPHS[byte - PHONETIC_FIRST]
    if byte == 0x7F:
        return "~"
    if byte < 0x80:
        return chr(byte)
    return CP1250_HIGH[byte - 0x80]


def decode_bytes(data: bytes, phonetic: bool = False) -> str:
    """Decode a run of record bytes with a fixed font.

    Args:
        data: Raw bytes.
        phonetic: True while the phonetic font is selected.

    Returns:
        Decoded text.
    """
    return "".join(decode_byte(b, phonetic) for b in data)
