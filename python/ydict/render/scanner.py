r"""Scanner for the RTF-like markup of dictionary records.

Turns a record into a stream of events that the formatters lay out:
    - TextRun: decoded text plus the RenderState it was produced under
    - LineBreak: a \par, \line or raw newline outside hidden groups

Supported constructs:
    {  }        push / pop a copy of the current state
    \\ \{ \}    escaped literal bytes
    \'hh        byte given in hex
    \par \line  line break
    \pard       paragraph reset (clears \cf and \sa, no line break)
    \tab        tab character
    \cfN        style bucket
    \saN        left margin on/off
    \fN         font; \f1 is the phonetic font
    \qc         hide the rest of the group
    \uN         Unicode character, followed by one skipped fallback byte

Everything else is ignored. Malformed input never raises.
"""

from dataclasses import dataclass, replace
from typing import Iterator, Optional, Union

from ..schema import RenderState
from .decoder import PLACEHOLDER, decode_byte

ESCAPE = 0x5C           # "\"
GROUP_OPEN = 0x7B       # "{"
GROUP_CLOSE = 0x7D      # "}"
HEX_ESCAPE = 0x27       # "'"

LINE_BREAK_WORDS = {"par", "line"}
LEADING_WHITESPACE = {0x20, 0x09}


@dataclass(frozen=True)
class TextRun:
    """Decoded text and the state in force when it was read."""

    text: str
    state: RenderState


@dataclass(frozen=True)
class LineBreak:
    """End of the current output line."""


Event = Union[TextRun, LineBreak]


@dataclass(frozen=True)
class ControlWord:
    """A parsed \\word[N] control sequence."""

    name: str
    param: Optional[int] = None


def _is_alpha(byte: int) -> bool:
    return 0x61 <= byte <= 0x7A or 0x41 <= byte <= 0x5A


def _is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def _hex_value(byte: int) -> int:
    if _is_digit(byte):
        return byte - 0x30
    if 0x61 <= byte <= 0x66:
        return byte - 0x61 + 10
    if 0x41 <= byte <= 0x46:
        return byte - 0x41 + 10
    return -1


def parse_control_word(data: bytes, pos: int) -> tuple[ControlWord, int]:
    """Parse a control word starting right after the escape byte.

    Args:
        data: Record bytes.
        pos: Index of the first letter.

    Returns:
        Tuple of (control word, index of the next unconsumed byte). One
        space delimiter after the word is consumed.
    """
    end = len(data)
    start = pos
    while pos < end and _is_alpha(data[pos]):
        pos += 1
    name = data[start:pos].decode("ascii")

    param = None
    if pos < end and (data[pos] == 0x2D or _is_digit(data[pos])):
        negative = data[pos] == 0x2D
        if negative:
            pos += 1
        value = 0
        while pos < end and _is_digit(data[pos]):
            value = value * 10 + (data[pos] - 0x30)
            pos += 1
        param = -value if negative else value

    if pos < end and data[pos] == 0x20:
        pos += 1

    return ControlWord(name, param), pos


def unicode_char(param: int) -> str:
    """Convert a \\uN parameter to text.

    Negative values are the signed 16-bit form RTF writers use for code
    points above 0x7FFF.
    """
    if param < 0:
        param += 0x10000
    if param < 0 or param > 0x10FFFF or 0xD800 <= param <= 0xDFFF:
        return PLACEHOLDER
    return chr(param)


class _Scanner:
    """Single forward pass over one record."""

    def __init__(self, data: bytes):
        self.data = data
        self.stack: list[RenderState] = [RenderState()]
        self.line_started = False

    @property
    def state(self) -> RenderState:
        return self.stack[-1]

    def _update(self, **changes) -> None:
        self.stack[-1] = replace(self.stack[-1], **changes)

    def _text_byte(self, byte: int) -> Iterator[Event]:
        if self.state.hidden:
            return
        # Indentation comes from \saN, never from the text itself.
        if not self.line_started and byte in LEADING_WHITESPACE:
            return
        self.line_started = True
        yield TextRun(decode_byte(byte, self.state.phonetic), self.state)

    def _line_break(self) -> Iterator[Event]:
        if self.state.hidden:
            return
        self.line_started = False
        yield LineBreak()

    def _literal(self, byte: int) -> Iterator[Event]:
        # Raw or hex-escaped, LF breaks the line and CR is dropped.
        if byte == 0x0A:
            yield from self._line_break()
        elif byte != 0x0D:
            yield from self._text_byte(byte)

    def _control(self, word: ControlWord) -> Iterator[Event]:
        name, param = word.name, word.param

        if name in LINE_BREAK_WORDS:
            yield from self._line_break()
        elif name == "pard":
            self._update(cf=0, margin=False)
        elif name == "tab":
            yield from self._text_byte(0x09)
        elif name == "cf" and param is not None:
            self._update(cf=param)
        elif name == "sa" and param is not None:
            self._update(margin=param != 0)
        elif name == "f" and param is not None:
            self._update(phonetic=param == 1)
        elif name == "qc":
            self._update(hidden=True)
        elif name == "u" and param is not None:
            char = unicode_char(param)
            if char == "\n":
                yield from self._line_break()
            elif char != "\r" and not self.state.hidden:
                self.line_started = True
                yield TextRun(char, self.state)

    def events(self) -> Iterator[Event]:
        data = self.data
        end = len(data)
        i = 0

        while i < end:
            byte = data[i]

            if byte == GROUP_OPEN:
                self.stack.append(self.state)
                i += 1
                continue
            if byte == GROUP_CLOSE:
                if len(self.stack) > 1:
                    self.stack.pop()
                i += 1
                continue

            if byte != ESCAPE:
                yield from self._literal(byte)
                i += 1
                continue

            # Control sequence
            if i + 1 >= end:
                break
            nxt = data[i + 1]

            if nxt in (ESCAPE, GROUP_OPEN, GROUP_CLOSE):
                yield from self._text_byte(nxt)
                i += 2
                continue

            if nxt == HEX_ESCAPE:
                if i + 3 < end:
                    high = _hex_value(data[i + 2])
                    low = _hex_value(data[i + 3])
                    if high >= 0 and low >= 0:
                        yield from self._literal((high << 4) | low)
                        i += 4
                        continue

            # A malformed \' or a control symbol such as \~ parses as an
            # empty word, so only the backslash is consumed.
            word, i = parse_control_word(data, i + 1)
            yield from self._control(word)
            if word.name == "u" and word.param is not None and i < end:
                i += 1  # fallback character


def scan(data: bytes) -> Iterator[Event]:
    """Scan a raw record into layout events.

    Args:
        data: Raw record bytes from the .dat file.

    Yields:
        TextRun and LineBreak events in record order.
    """
    yield from _Scanner(data).events()
