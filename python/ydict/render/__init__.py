"""Record rendering module.

Decodes the RTF-like markup of .dat records into text:
- decoder: CP1250 and phonetic-font byte decoding
- scanner: single pass over the markup producing layout events
- formatters: plain and CLI layout policies

Usage:
    from ydict.render import render, render_plain, render_cli

    text = render_cli(raw_record)
    text = render(raw_record, "plain")
"""

from .decoder import decode_byte, decode_bytes
from .scanner import LineBreak, TextRun, scan
from .formatters import (
    Formatter,
    PlainFormatter,
    CliFormatter,
    render,
    render_plain,
    render_cli,
    get_formatter,
    register_formatter,
    list_formatters,
    is_pos_heading,
)

__all__ = [
    "decode_byte",
    "decode_bytes",
    "scan",
    "TextRun",
    "LineBreak",
    "Formatter",
    "PlainFormatter",
    "CliFormatter",
    "render",
    "render_plain",
    "render_cli",
    "get_formatter",
    "register_formatter",
    "list_formatters",
    "is_pos_heading",
]
