"""Loader for the binary .idx word table.

Format (little-endian):
    0x00  u32   magic 0x8D4E11D5
    0x08  u16   entry count N
    0x10  u32   absolute offset T of the entry table

    At T, N entries of:
        4 bytes   reserved (meaning unknown, skipped)
        u32       offset of the definition record in the .dat file
        bytes     word, NUL-terminated, stored as CP1250

Word bytes are kept undecoded; lookups compare them as bytes.
"""

import logging
from pathlib import Path

from ..exceptions import IndexFormatError
from ..schema import WordEntry, WordTable
from .base import U32, file_size, read_u16_le, read_u32_le

logger = logging.getLogger(__name__)

IDX_MAGIC = 0x8D4E11D5
COUNT_OFFSET = 8
TABLE_OFFSET_OFFSET = 16
RESERVED_SIZE = 4


class IndexLoader:
    """Reads the word table of an .idx file."""

    def __init__(self, idx_path: Path | str):
        """Initialize loader.

        Args:
            idx_path: Path to the .idx file.
        """
        self.idx_path = Path(idx_path)

    def load(self) -> WordTable:
        """Load the whole word table.

        Returns:
            Entries in on-disk order.

        Raises:
            IndexFormatError: If the file is unreadable, is not an .idx file,
                or is truncated anywhere. No partial table is returned.
        """
        try:
            with open(self.idx_path, "rb") as f:
                return self._load(f)
        except OSError as e:
            raise IndexFormatError(f"Cannot read {self.idx_path}: {e}") from e

    def _load(self, f) -> WordTable:
        magic = read_u32_le(f, IndexFormatError, "magic")
        if magic != IDX_MAGIC:
            raise IndexFormatError(
                f"Bad magic 0x{magic:08X} in {self.idx_path} "
                f"(expected 0x{IDX_MAGIC:08X})"
            )

        f.seek(COUNT_OFFSET)
        count = read_u16_le(f, IndexFormatError, "entry count")

        f.seek(TABLE_OFFSET_OFFSET)
        table_offset = read_u32_le(f, IndexFormatError, "table offset")

        size = file_size(f)
        if table_offset > size:
            raise IndexFormatError(
                f"Table offset {table_offset} is past end of file ({size})"
            )

        f.seek(table_offset)
        table = f.read()
        entries = parse_table(table, count)

        logger.debug("Loaded %d words from %s", len(entries), self.idx_path)
        return entries


def parse_table(table: bytes, count: int) -> WordTable:
    """Parse count entries from the start of the table bytes.

    Args:
        table: Bytes from the table offset to end of file.
        count: Number of entries declared in the header.

    Returns:
        Parsed entries.

    Raises:
        IndexFormatError: If the table ends before count entries are read.
    """
    entries = []
    pos = 0
    end = len(table)

    for i in range(count):
        fixed_end = pos + RESERVED_SIZE + U32.size
        if fixed_end > end:
            raise IndexFormatError(f"Entry {i} of {count} is truncated")
        (dat_offset,) = U32.unpack_from(table, pos + RESERVED_SIZE)

        nul = table.find(b"\x00", fixed_end)
        if nul < 0:
            raise IndexFormatError(f"Word of entry {i} is not NUL-terminated")

        entries.append(WordEntry(word=table[fixed_end:nul], dat_offset=dat_offset))
        pos = nul + 1

    return tuple(entries)


def load_index(idx_path: Path | str) -> WordTable:
    """Convenience function to load an .idx word table.

    Args:
        idx_path: Path to the .idx file.

    Returns:
        Entries in on-disk order.
    """
    return IndexLoader(idx_path).load()


def dump_index(dump_path: Path | str, entries: WordTable) -> bool:
    """Write the word table as text for offline inspection.

    One line per entry: index<TAB>dat_offset<TAB>word. Word bytes are
    written as stored.

    Args:
        dump_path: Destination file.
        entries: Loaded word table.

    Returns:
        True if the dump was written.
    """
    try:
        with open(dump_path, "wb") as f:
            for i, entry in enumerate(entries):
                f.write(b"%d\t%d\t%s\n" % (i, entry.dat_offset, entry.word))
    except OSError as e:
        logger.warning("Could not write index dump %s: %s", dump_path, e)
        return False
    return True
