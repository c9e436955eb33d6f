"""Pytest configuration and fixtures."""

import struct
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

IDX_MAGIC = 0x8D4E11D5
TABLE_START = 32


def build_idx(
    entries: list[tuple[bytes, int]],
    count: int | None = None,
    magic: int = IDX_MAGIC,
    table_offset: int = TABLE_START,
    reserved: bytes = b"\xde\xad\xbe\xef",
) -> bytes:
    """Build .idx bytes for (word, dat_offset) pairs."""
    header = bytearray(table_offset)
    struct.pack_into("<I", header, 0, magic)
    struct.pack_into("<H", header, 8, len(entries) if count is None else count)
    struct.pack_into("<I", header, 16, table_offset)

    table = bytearray()
    for word, dat_offset in entries:
        table += reserved
        table += struct.pack("<I", dat_offset)
        table += word + b"\x00"
    return bytes(header) + bytes(table)


def build_dat(records: list[bytes]) -> tuple[bytes, list[int]]:
    """Build .dat bytes and the offset of each record."""
    data = bytearray(b"YDAT")  # records never start at 0 in real files
    offsets = []
    for record in records:
        offsets.append(len(data))
        data += struct.pack("<I", len(record))
        data += record
    return bytes(data), offsets


# Table order as on disk: "house-boat" breaks bytewise order on purpose.
SAMPLE_ENTRIES = [
    (b"abdicate", b"{\\b abdicate}\\par {\\f1 [\\'98bd\\'8ake\\'8at]}\\par\\cf2 vt\\par\\cf2 abdykowa\\'e6"),
    (b"house", b"\\cf2 n\\par\\cf2 dom\\par\\pard\\sa100 a house of cards"),
    (b"household", b"gospodarstwo domowe"),
    (b"house-boat", b"\\cf2 n\\par\\cf2 barka mieszkalna"),
    (b"run", b"\\cf2 vi\\par\\cf2 biec\\par\\par\\par\\cf2 uciekaj"),
    (b"Running", b"bieganie"),
    (b"runway", b"pas startowy"),
    (b"zebra", b"{\\qc ukryte}zebra"),
]


@pytest.fixture
def write_dictionary(tmp_path):
    """Factory writing an .idx/.dat pair; returns (idx_path, dat_path)."""

    def _write(entries=SAMPLE_ENTRIES, extra_offsets=()):
        dat, offsets = build_dat([record for _, record in entries])
        idx_entries = [(word, off) for (word, _), off in zip(entries, offsets)]
        idx_entries.extend(extra_offsets)

        idx_path = tmp_path / "dict.idx"
        dat_path = tmp_path / "dict.dat"
        idx_path.write_bytes(build_idx(idx_entries))
        dat_path.write_bytes(dat)
        return idx_path, dat_path

    return _write


@pytest.fixture
def sample_files(write_dictionary):
    """Sample dictionary plus one entry pointing past the end of .dat."""
    return write_dictionary(extra_offsets=[(b"broken", 999999)])


@pytest.fixture
def sample_dictionary(sample_files):
    """Initialized Dictionary over the sample files."""
    from ydict import Dictionary

    d = Dictionary()
    assert d.init(*sample_files)
    return d
