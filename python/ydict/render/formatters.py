"""Pluggable layout policies for scanned records.

Each formatter consumes the events produced by the scanner and lays them
out as text. The scanner does all the parsing, so a formatter only decides
how lines, blank lines and prefixes look.

Formatters:
    - plain: raw text stream, one newline per line break
    - cli: console layout with margins, bullets and collapsed blank lines

Usage:
    from ydict.render import render
    text = render(raw_record, RenderMode.CLI)

    # Register custom formatter
    from ydict.render import register_formatter
    register_formatter("custom", MyFormatterClass)
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ..schema import RenderMode, RenderState
from .scanner import Event, LineBreak, TextRun, scan

# Registry of available formatters
_FORMATTERS: dict[str, type["Formatter"]] = {}

BULLET_CF = 2
MARGIN = "  "
BULLET = "- "
TRIM_CHARS = " \t\r"

# Part-of-speech headings are styled like bullets but must not get one.
POS_HEADINGS = frozenset({
    "n", "adj", "adv", "vt", "vi", "prep", "pron", "conj", "num", "det",
    "modal aux vb",
})


def is_pos_heading(text: str) -> bool:
    """Check if a line is a part-of-speech heading such as "vt" or "adj"."""
    return text.strip(TRIM_CHARS) in POS_HEADINGS


class Formatter(ABC):
    """Base class for layout policies."""

    name: str = "base"

    @abstractmethod
    def format(self, events: Iterable[Event]) -> str:
        """Lay out scanned events as text.

        Args:
            events: Events from scan().

        Returns:
            Rendered text.
        """
        pass

    def render(self, data: bytes) -> str:
        """Scan and lay out a raw record."""
        return self.format(scan(data))


# =============================================================================
# Plain
# =============================================================================

class PlainFormatter(Formatter):
    """Text as it appears in the record, without any layout."""

    name = "plain"

    def format(self, events: Iterable[Event]) -> str:
        parts = []
        for event in events:
            if isinstance(event, LineBreak):
                parts.append("\n")
            else:
                parts.append(event.text)
        return "".join(parts)


# =============================================================================
# CLI
# =============================================================================

class CliFormatter(Formatter):
    """Console layout.

    Lines are trimmed, indented when the record sets a margin, and
    bulleted when they use the bullet style bucket. At most one blank line
    is kept in a row and nothing is emitted before the first text.
    """

    name = "cli"

    def format(self, events: Iterable[Event]) -> str:
        out: list[str] = []
        newline_run = 0
        line: list[str] = []
        line_state: Optional[RenderState] = None

        def flush_line() -> None:
            nonlocal newline_run, line_state
            text = "".join(line).strip(TRIM_CHARS)
            line.clear()
            state, line_state = line_state, None
            if not text:
                return
            newline_run = 0
            if state.margin:
                out.append(MARGIN)
            if state.cf == BULLET_CF and not is_pos_heading(text):
                out.append(BULLET)
            out.append(text)

        def emit_newline() -> None:
            nonlocal newline_run
            if not out or newline_run >= 2:
                return
            out.append("\n")
            newline_run += 1

        for event in events:
            if isinstance(event, TextRun):
                if line_state is None:
                    line_state = event.state
                line.append(event.text)
            else:
                flush_line()
                emit_newline()

        flush_line()
        return "".join(out)


# =============================================================================
# Registry Functions
# =============================================================================

def _init_registry():
    """Initialize the formatter registry with built-in policies."""
    global _FORMATTERS
    _FORMATTERS = {
        RenderMode.PLAIN.value: PlainFormatter,
        RenderMode.CLI.value: CliFormatter,
    }


_init_registry()

# Cached instances
_INSTANCES: dict[str, Formatter] = {}


def get_formatter(name: str) -> Formatter:
    """Get a formatter instance by name.

    Args:
        name: Formatter name.

    Returns:
        Formatter instance (cached).
    """
    if name not in _FORMATTERS:
        raise ValueError(
            f"Unknown formatter: {name}. "
            f"Available: {list(_FORMATTERS.keys())}"
        )

    if name not in _INSTANCES:
        _INSTANCES[name] = _FORMATTERS[name]()

    return _INSTANCES[name]


def register_formatter(name: str, cls: type[Formatter]) -> None:
    """Register a custom formatter.

    Args:
        name: Name to register under.
        cls: Formatter class.
    """
    _FORMATTERS[name] = cls
    # Clear cached instance if exists
    if name in _INSTANCES:
        del _INSTANCES[name]


def list_formatters() -> list[str]:
    """List available formatter names."""
    return list(_FORMATTERS.keys())


# =============================================================================
# Convenience Functions
# =============================================================================

def render(data: bytes, mode: RenderMode | str = RenderMode.CLI) -> str:
    """Render a raw record.

    Args:
        data: Raw record bytes.
        mode: RenderMode or registered formatter name.

    Returns:
        Rendered text; "" for an empty record.
    """
    name = mode.value if isinstance(mode, RenderMode) else mode
    return get_formatter(name).render(data)


def render_plain(data: bytes) -> str:
    """Render a raw record as a plain text stream."""
    return render(data, RenderMode.PLAIN)


def render_cli(data: bytes) -> str:
    """Render a raw record with console layout."""
    return render(data, RenderMode.CLI)
