"""ydict - Reader for the ydp two-file dictionary format.

Reads a binary .idx word table and the matching .dat file of
RTF-like definition records, and renders definitions as text.

Core concepts:
    - The .idx file maps each word to an offset in the .dat file
    - Each .dat record is length-prefixed markup
    - Markup is rendered either as a plain stream or laid out for a console

Example:
    "house" -> .idx entry (b"house", 48213)
    .dat[48213] -> "{\\b house\\b0 }\\par {\\f1 \\'8aaus}" -> "house\\nhɪaus"

Usage:
    from ydict import Dictionary

    d = Dictionary()
    if d.init("dict100.idx", "dict100.dat"):
        i = d.find_exact("house")
        print(d.render_cli(i))

        for j in d.suggest("to run", 10):
            print(d.word_at(j).text)
"""

from .dictionary import Dictionary
from .exceptions import IndexFormatError, RecordError, YdictError
from .lookup import WordIndex
from .schema import IdxDumpStatus, RenderMode, RenderState, WordEntry

__version__ = "0.1.0"

__all__ = [
    "Dictionary",
    "WordIndex",
    "WordEntry",
    "RenderMode",
    "RenderState",
    "IdxDumpStatus",
    "YdictError",
    "IndexFormatError",
    "RecordError",
]
