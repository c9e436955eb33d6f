"""Data structures shared across ydict.

Core concept:
    - The .idx file yields an ordered table of WordEntry records
    - Each entry points at a length-prefixed record in the .dat file
    - Records are rendered through a stack of RenderState values

Example:
    WordEntry(word=b"house", dat_offset=48213)
    -> .dat[48213:48217] = record length, then the RTF-like record bytes
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


@dataclass(frozen=True)
class WordEntry:
    """One row of the .idx word table."""

    word: bytes             # Raw word bytes as stored on disk (CP1250)
    dat_offset: int         # Byte offset of the record in the .dat file

    @property
    def text(self) -> str:
        """Word decoded for display."""
        return self.word.decode("cp1250", errors="replace")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "word": self.text,
            "dat_offset": self.dat_offset,
        }


# Ordered as on disk; not guaranteed to be sorted bytewise.
WordTable = tuple[WordEntry, ...]


@dataclass(frozen=True)
class RenderState:
    """Formatting state of one markup group.

    Frozen so that a group pushed onto the stack can never be changed
    through a reference held by its parent or a sibling.
    """

    cf: int = 0             # \cfN style bucket
    phonetic: bool = False  # \f1 selects the phonetic glyph font
    hidden: bool = False    # \qc hides the rest of the group
    margin: bool = False    # \saN with N != 0 indents the line


class RenderMode(Enum):
    """Output flavour of the markup renderer."""

    PLAIN = "plain"
    CLI = "cli"

    @classmethod
    def from_name(cls, name: str) -> Optional["RenderMode"]:
        """Get RenderMode from its name, case-insensitively."""
        for mode in cls:
            if mode.value == name.lower():
                return mode
        return None


@dataclass
class IdxDumpStatus:
    """Outcome of the optional .idx diagnostic dump."""

    requested: bool = False
    ok: bool = False        # Meaningful only if requested
    path: str = ""          # Meaningful only if requested
