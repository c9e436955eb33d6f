"""Exceptions raised by the ydict loaders.

The Dictionary facade catches these at its boundary and hands callers
sentinel values instead, so they are only seen when the loaders are used
directly.
"""


class YdictError(Exception):
    """Base class for ydict errors."""


class IndexFormatError(YdictError, ValueError):
    """The .idx file is unreadable, truncated, or not in this format."""


class RecordError(YdictError, ValueError):
    """A .dat record could not be extracted at the requested offset."""
