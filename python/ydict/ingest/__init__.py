"""Binary file loaders.

- index: the .idx word table (words and record offsets)
- data: length-prefixed records from the .dat file

Usage:
    from ydict.ingest import load_index, read_record

    entries = load_index("dict100.idx")
    raw = read_record("dict100.dat", entries[0].dat_offset)
"""

from .index import IDX_MAGIC, IndexLoader, dump_index, load_index
from .data import MAX_RECORD_SIZE, DefinitionStore, read_record

__all__ = [
    "IDX_MAGIC",
    "IndexLoader",
    "load_index",
    "dump_index",
    "MAX_RECORD_SIZE",
    "DefinitionStore",
    "read_record",
]
