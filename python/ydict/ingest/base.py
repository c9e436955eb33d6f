"""Little-endian readers shared by the .idx and .dat loaders.

Every helper reads exactly the bytes it needs and raises the caller's
error type on a short read, so a truncated file can never produce a
partially filled value.
"""

import struct
from typing import BinaryIO

U16 = struct.Struct("<H")
U32 = struct.Struct("<I")


def read_exact(
    f: BinaryIO,
    size: int,
    error: type[Exception],
    what: str = "data",
) -> bytes:
    """Read exactly size bytes.

    Args:
        f: Binary file object.
        size: Number of bytes to read.
        error: Exception type raised on a short read.
        what: Description used in the error message.

    Returns:
        The bytes read.
    """
    data = f.read(size)
    if len(data) != size:
        raise error(f"Truncated {what}: wanted {size} bytes, got {len(data)}")
    return data


def read_u16_le(f: BinaryIO, error: type[Exception], what: str = "u16") -> int:
    """Read an unsigned little-endian 16-bit value."""
    return U16.unpack(read_exact(f, U16.size, error, what))[0]


def read_u32_le(f: BinaryIO, error: type[Exception], what: str = "u32") -> int:
    """Read an unsigned little-endian 32-bit value."""
    return U32.unpack(read_exact(f, U32.size, error, what))[0]


def file_size(f: BinaryIO) -> int:
    """Size of an open file, leaving the position at the end."""
    return f.seek(0, 2)
