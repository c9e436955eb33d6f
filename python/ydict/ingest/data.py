"""Reader for length-prefixed definition records in the .dat file.

Format:
    u32 (little-endian)  record length L
    L bytes              RTF-like markup

Records are located only through offsets from the .idx file. The file is
opened for every read; no handle is kept between calls.
"""

from pathlib import Path

from ..exceptions import RecordError
from .base import U32, file_size, read_exact, read_u32_le

# Corruption guard, not a format limit.
MAX_RECORD_SIZE = 4 * 1024 * 1024


class DefinitionStore:
    """Extracts raw records from a .dat file."""

    def __init__(self, dat_path: Path | str):
        self.dat_path = Path(dat_path)

    def read(self, offset: int) -> bytes:
        """Read the record at offset.

        Args:
            offset: Byte offset of the length prefix.

        Returns:
            The record bytes, exactly as long as the prefix says.

        Raises:
            RecordError: If the offset or length is out of range, the read is
                short, or the file cannot be read.
        """
        try:
            with open(self.dat_path, "rb") as f:
                return self._read(f, offset)
        except OSError as e:
            raise RecordError(f"Cannot read {self.dat_path}: {e}") from e

    def _read(self, f, offset: int) -> bytes:
        size = file_size(f)
        if offset < 0 or offset + U32.size > size:
            raise RecordError(f"Offset {offset} is outside the file ({size} bytes)")

        f.seek(offset)
        length = read_u32_le(f, RecordError, "record length")
        if length == 0 or length > MAX_RECORD_SIZE:
            raise RecordError(f"Bad record length {length} at offset {offset}")
        if offset + U32.size + length > size:
            raise RecordError(
                f"Record at {offset} ({length} bytes) runs past end of file"
            )

        return read_exact(f, length, RecordError, "record")


def read_record(dat_path: Path | str, offset: int) -> bytes:
    """Convenience function to read one record.

    Args:
        dat_path: Path to the .dat file.
        offset: Byte offset of the record.

    Returns:
        Raw record bytes.
    """
    return DefinitionStore(dat_path).read(offset)
