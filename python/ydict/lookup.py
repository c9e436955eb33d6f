"""Word lookups over a loaded .idx table.

The on-disk table is close to bytewise order but not exactly: compound and
hyphenated entries are known to break it. Binary search is therefore only
a fast path; exact lookups always fall back to a linear scan.

Keys may be given as str (encoded to CP1250 like the table) or as bytes.
"""

import bisect
from typing import Optional

from .schema import WordTable

VERB_PREFIX = b"to "


def to_key(word: str | bytes) -> Optional[bytes]:
    """Convert a lookup key to table bytes.

    Args:
        word: Key as text or raw bytes.

    Returns:
        CP1250 bytes, or None if the text cannot be encoded.
    """
    if isinstance(word, bytes):
        return word
    try:
        return word.encode("cp1250")
    except UnicodeEncodeError:
        return None


def starts_with_icase(word: bytes, prefix: bytes) -> bool:
    """ASCII case-insensitive prefix test; other bytes compare exactly."""
    if len(word) < len(prefix):
        return False
    return word[:len(prefix)].lower() == prefix.lower()


class WordIndex:
    """Exact, ordered and prefix lookups over a word table."""

    def __init__(self, entries: WordTable):
        """Initialize index.

        Args:
            entries: Word table in on-disk order.
        """
        self._entries = entries
        self._keys = [e.word for e in entries]

    def __len__(self) -> int:
        return len(self._keys)

    def find_exact(self, word: str | bytes) -> int:
        """Find the index of an exact word.

        Args:
            word: Word to find.

        Returns:
            Index of the first matching entry, or -1.
        """
        key = to_key(word)
        if not key:
            return -1

        pos = bisect.bisect_left(self._keys, key)
        if pos < len(self._keys) and self._keys[pos] == key:
            return pos

        # Linear scan is the source of truth
        for i, candidate in enumerate(self._keys):
            if candidate == key:
                return i
        return -1

    def lower_bound(self, key: str | bytes) -> int:
        """Position of the first entry not less than key.

        Assumes table order, so the result is only a nearest-match hint.

        Returns:
            Index in [0, len(self)].
        """
        raw = to_key(key)
        if raw is None:
            return len(self._keys)
        return bisect.bisect_left(self._keys, raw)

    def find_first_with_prefix(self, prefix: str | bytes) -> int:
        """Find the entry at lower_bound(prefix) if it starts with prefix.

        Case-sensitive.

        Returns:
            Index of the entry, or -1.
        """
        raw = to_key(prefix)
        if not raw:
            return -1
        pos = self.lower_bound(raw)
        if pos >= len(self._keys):
            return -1
        return pos if self._keys[pos].startswith(raw) else -1

    def suggest(self, prefix: str | bytes, max_results: int = 15) -> list[int]:
        """List entries starting with prefix, in table order.

        A leading "to " is dropped so that "to run" suggests "run".

        Args:
            prefix: Prefix to match, ASCII case-insensitively.
            max_results: Maximum number of results.

        Returns:
            Indices of matching entries.
        """
        raw = to_key(prefix)
        if not raw or max_results <= 0:
            return []

        if starts_with_icase(raw, VERB_PREFIX):
            raw = raw[len(VERB_PREFIX):]
            if not raw:
                return []

        results = []
        for i, word in enumerate(self._keys):
            if starts_with_icase(word, raw):
                results.append(i)
                if len(results) >= max_results:
                    break
        return results
