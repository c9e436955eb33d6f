"""Dictionary facade.

Owns the loaded word table and the .dat path, and exposes every lookup
and rendering operation. Failures never raise out of this class: callers
get False, b"", "", -1 or [] and the loaded table stays untouched.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import DictionaryConfig
from .exceptions import IndexFormatError, RecordError
from .ingest import DefinitionStore, dump_index, load_index
from .lookup import WordIndex
from .render import render
from .schema import IdxDumpStatus, RenderMode, WordEntry, WordTable

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTIONS = 15


class Dictionary:
    """A loaded .idx/.dat dictionary pair."""

    def __init__(self):
        self._entries: WordTable = ()
        self._index = WordIndex(())
        self._store: Optional[DefinitionStore] = None
        self.idx_dump_status = IdxDumpStatus()

    @classmethod
    def from_config(cls, cfg: DictionaryConfig) -> "Dictionary":
        """Create and initialize from a DictionaryConfig.

        The result may be uninitialized; check is_initialized.
        """
        d = cls()
        d.init(cfg.idx_path, cfg.dat_path, cfg.idx_dump_path or None)
        return d

    def init(
        self,
        idx_path: Path | str,
        dat_path: Path | str,
        idx_dump_path: Path | str | None = None,
    ) -> bool:
        """Load the word table, replacing anything loaded before.

        Args:
            idx_path: Path to the .idx file.
            dat_path: Path to the .dat file. Only checked for readability
                here; records are read on demand.
            idx_dump_path: Optional destination for a text dump of the table.

        Returns:
            True on success. On failure the dictionary is left uninitialized.
        """
        self._entries = ()
        self._index = WordIndex(())
        self._store = None
        self.idx_dump_status = IdxDumpStatus()

        if not idx_path or not dat_path:
            logger.warning("Both .idx and .dat paths are required")
            return False

        try:
            with open(dat_path, "rb"):
                pass
        except OSError as e:
            logger.warning("Cannot open %s: %s", dat_path, e)
            return False

        try:
            entries = load_index(idx_path)
        except IndexFormatError as e:
            logger.warning("Cannot load index: %s", e)
            return False

        if idx_dump_path:
            self.idx_dump_status = IdxDumpStatus(
                requested=True,
                ok=dump_index(idx_dump_path, entries),
                path=str(idx_dump_path),
            )

        self._entries = entries
        self._index = WordIndex(entries)
        self._store = DefinitionStore(dat_path)
        logger.info("Loaded %d words from %s", len(entries), idx_path)
        return True

    @property
    def is_initialized(self) -> bool:
        return self._store is not None

    def version(self) -> str:
        """Short status line."""
        if not self.is_initialized:
            return "ydict - not initialized"
        return f"ydict - idx loaded ({len(self._entries)} words)"

    def word_count(self) -> int:
        return len(self._entries)

    def word_at(self, index: int) -> Optional[WordEntry]:
        """Get the entry at index, or None if out of range."""
        if index < 0 or index >= len(self._entries):
            return None
        return self._entries[index]

    def read_raw(self, index: int) -> bytes:
        """Read the raw markup record of entry index.

        Returns:
            Record bytes, or b"" if the entry or its record is invalid.
        """
        entry = self.word_at(index)
        if entry is None or self._store is None:
            return b""
        try:
            return self._store.read(entry.dat_offset)
        except RecordError as e:
            logger.debug("Record %d (%r): %s", index, entry.word, e)
            return b""

    def render(self, index: int, mode: RenderMode | str = RenderMode.CLI) -> str:
        """Render entry index in the given mode, or "" for an unknown mode."""
        raw = self.read_raw(index)
        if not raw:
            return ""
        try:
            return render(raw, mode)
        except ValueError as e:
            logger.warning("Cannot render entry %d: %s", index, e)
            return ""

    def render_plain(self, index: int) -> str:
        return self.render(index, RenderMode.PLAIN)

    def render_cli(self, index: int) -> str:
        return self.render(index, RenderMode.CLI)

    def lookup(self, word: str | bytes, mode: RenderMode | str = RenderMode.CLI) -> str:
        """Render the entry for an exact word, or "" if it is missing."""
        index = self.find_exact(word)
        if index < 0:
            return ""
        return self.render(index, mode)

    def find_exact(self, word: str | bytes) -> int:
        if not self.is_initialized:
            return -1
        return self._index.find_exact(word)

    def lower_bound(self, key: str | bytes) -> int:
        if not self.is_initialized:
            return -1
        return self._index.lower_bound(key)

    def find_first_with_prefix(self, prefix: str | bytes) -> int:
        if not self.is_initialized:
            return -1
        return self._index.find_first_with_prefix(prefix)

    def suggest(self, prefix: str | bytes, limit: int = DEFAULT_SUGGESTIONS) -> list[int]:
        if not self.is_initialized:
            return []
        return self._index.suggest(prefix, limit)
