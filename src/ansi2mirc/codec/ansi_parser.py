"""ANSI escape sequence interpreter with virtual terminal emulation."""

import logging
from dataclasses import dataclass, field

from ansi2mirc.core.cell import Style
from ansi2mirc.core.color import DEFAULT_BG, DEFAULT_FG, Color
from ansi2mirc.core.constants import (
    CR,
    EOF_MARKER,
    ESC,
    LEFT_BRACKET,
    LF,
    MAX_PARAM_DIGITS,
    MAX_PARAMS,
    MAX_SEQUENCE_LENGTH,
    QUESTION,
    SEMICOLON,
    TAB,
    TAB_WIDTH,
)
from ansi2mirc.core.errors import (
    CursorRestoreError,
    NumberTooLargeError,
    ParseError,
    SequenceTooLongError,
    UnexpectedEndError,
)
from ansi2mirc.core.options import ConvertOptions
from ansi2mirc.core.screen import Screen

logger = logging.getLogger(__name__)

# Command letters of the supported CSI subset
COMMANDS = frozenset(b"mJhHsuABCD")

# SGR codes found in period art files that never changed the display
IGNORED_SGR = frozenset({8, 48, 53, 55})


@dataclass
class CsiSequence:
    """Parameters collected between CSI and the command letter."""
    params: list[int] = field(default_factory=list)
    semicolons: int = 0
    private: bool = False

    def describe(self, command: str) -> str:
        prefix = "?" if self.private else ""
        return f"CSI {prefix}{';'.join(map(str, self.params))} {command}"


def _clamp(value: int, upper: int) -> int:
    return max(0, min(value, upper))


class AnsiInterpreter:
    """
    Stateful interpreter that plays a CP437/ANSI byte stream onto a Screen.

    Tracks the cursor, the current graphic rendition and a single saved
    cursor slot. Only the narrow CSI subset used by DOS-era art is honored;
    anything else raises a ParseError.
    """

    def __init__(
        self,
        options: ConvertOptions | None = None,
        screen: Screen | None = None,
    ):
        self.options = options or ConvertOptions()
        self.screen = screen or Screen()

        # Terminal state
        self.row = 0
        self.col = 0
        self.fg: int = DEFAULT_FG
        self.bg: int = DEFAULT_BG
        self.style = Style.NONE
        self.wrapping = True

        # Saved cursor position, None until CSI s
        self.saved: tuple[int, int] | None = None

        self.warnings: list[str] = []

    def feed(self, data: bytes) -> Screen:
        """Interpret a complete input and return the resulting screen."""
        stop_on_eof = self.options.stop_on_eof_marker
        pos = 0
        while pos < len(data):
            byte = data[pos]
            if byte == ESC:
                end = self._read_sequence(data, pos)
                if end is None:
                    break
                pos = end
                continue

            if byte == EOF_MARKER and stop_on_eof:
                break
            if byte == LF:
                self.row = min(self.screen.rows - 1, self.row + 1)
                self.col = 0
            elif byte == CR:
                self.col = 0
            elif byte == TAB and self.options.expand_tabs:
                next_stop = (self.col + TAB_WIDTH) // TAB_WIDTH * TAB_WIDTH
                self.col = min(self.screen.cols - 1, next_stop)
            else:
                self._put_glyph(byte)
            pos += 1
        return self.screen

    def _put_glyph(self, glyph: int) -> None:
        """Write a glyph at the cursor and advance one column."""
        self.screen.write(self.row, self.col, glyph, self.fg, self.bg, self.style)
        cols = self.screen.cols
        if self.wrapping:
            self.col += 1
            self.row = min(self.screen.rows - 1, self.row + self.col // cols)
            self.col %= cols
        else:
            self.col = min(cols - 1, self.col + 1)

    def _read_sequence(self, data: bytes, start: int) -> int | None:
        """
        Parse and apply the escape sequence beginning at ``data[start]``.

        Returns the position just past the command letter, or None when an
        EOF marker inside the sequence ends the input.
        """
        pos = start + 1
        if pos >= len(data):
            raise UnexpectedEndError("end of input after ESC", offset=start)
        if data[pos] != LEFT_BRACKET:
            raise ParseError(f"unknown sequence ESC 0x{data[pos]:02x}", offset=pos)

        seq = CsiSequence()
        digits = bytearray()
        overflow_at: int | None = None
        length = 0
        while True:
            pos += 1
            if pos >= len(data):
                raise UnexpectedEndError("end of input inside CSI sequence", offset=pos - 1)
            byte = data[pos]
            length += 1
            if length >= MAX_SEQUENCE_LENGTH:
                raise SequenceTooLongError(
                    f"sequence reached max length {MAX_SEQUENCE_LENGTH}", offset=pos
                )
            if byte == EOF_MARKER and self.options.stop_on_eof_marker:
                if overflow_at is not None:
                    raise NumberTooLargeError("number too large", offset=overflow_at)
                return None

            if 0x30 <= byte <= 0x39:
                digits.append(byte)
                if len(digits) == MAX_PARAM_DIGITS + 1:
                    overflow_at = pos
                continue

            # Overflowing fields are reported when the field closes
            if digits:
                if overflow_at is not None:
                    raise NumberTooLargeError("number too large", offset=overflow_at)
                if len(seq.params) < MAX_PARAMS:
                    seq.params.append(int(digits))
                digits.clear()

            if byte == QUESTION:
                if seq.params:
                    raise ParseError("invalid sequence CSI ... ; ?", offset=pos)
                seq.private = True
            elif byte == SEMICOLON:
                seq.semicolons += 1
            else:
                self._handle_csi(byte, seq, pos)
                return pos + 1

    def _handle_csi(self, command: int, seq: CsiSequence, pos: int) -> None:
        """Apply a complete CSI sequence."""
        if command not in COMMANDS:
            raise ParseError(
                f"unknown sequence CSI <params> 0x{command:02x}", offset=pos
            )
        cmd = chr(command)
        if seq.private and cmd != 'h':
            raise ParseError(f"invalid {seq.describe(cmd)}", offset=pos)

        params = seq.params
        if cmd == 'm':
            self._handle_sgr(params or [0], pos)
        elif cmd == 'J':
            # Only "erase entire display"
            if params != [2]:
                raise ParseError(f"unsupported {seq.describe(cmd)}", offset=pos)
            self.screen.clear()
            self.row = 0
            self.col = 0
        elif cmd == 'h':
            # Only "enable autowrap"
            if not seq.private or params != [7]:
                raise ParseError(
                    f"expected CSI ?7 h, got {seq.describe(cmd)}", offset=pos
                )
            self.wrapping = True
        elif cmd == 'H':
            self._cursor_position(seq, pos)
        elif cmd == 's' or cmd == 'u':
            if params:
                raise ParseError(f"invalid {seq.describe(cmd)}", offset=pos)
            if cmd == 's':
                self.saved = (self.row, self.col)
            elif self.saved is None:
                raise CursorRestoreError("CSI u before a CSI s", offset=pos)
            else:
                self.row, self.col = self.saved
        else:
            self._move_cursor(cmd, seq, pos)

    def _cursor_position(self, seq: CsiSequence, pos: int) -> None:
        """CUP: 1-based row;col, clamped to the grid."""
        params = seq.params
        max_row = self.screen.rows - 1
        max_col = self.screen.cols - 1
        if not params:
            self.row = 0
            self.col = 0
        elif len(params) == 1:
            # A lone value after a semicolon is the column
            if seq.semicolons == 0:
                self.row = _clamp(params[0] - 1, max_row)
                self.col = 0
            else:
                self.row = 0
                self.col = _clamp(params[0] - 1, max_col)
        elif len(params) == 2:
            self.row = _clamp(params[0] - 1, max_row)
            self.col = _clamp(params[1] - 1, max_col)
        else:
            raise ParseError(f"unsupported {seq.describe('H')}", offset=pos)

    def _move_cursor(self, cmd: str, seq: CsiSequence, pos: int) -> None:
        """CUU/CUD/CUF/CUB: relative moves that stop at the grid edges."""
        if len(seq.params) > 1:
            raise ParseError(
                f"expected 0-1 parameters, got {len(seq.params)} for CSI ... {cmd}",
                offset=pos,
            )
        delta = seq.params[0] if seq.params else 1
        if cmd == 'A':
            self.row = max(0, self.row - delta)
        elif cmd == 'B':
            self.row = min(self.screen.rows - 1, self.row + delta)
        elif cmd == 'C':
            self.col = min(self.screen.cols - 1, self.col + delta)
        elif cmd == 'D':
            self.col = max(0, self.col - delta)

    def _handle_sgr(self, codes: list[int], pos: int) -> None:
        """Handle SGR (Select Graphic Rendition) parameters, left to right."""
        for code in codes:
            if code == 0:
                self.style = Style.NONE
                self.fg = DEFAULT_FG
                self.bg = DEFAULT_BG
            # Style codes replace the flag set rather than adding to it
            elif code == 1:
                self.style = Style.BOLD
            elif code == 4:
                self.style = Style.UNDERLINE
            elif code == 5:
                self.style = Style.BLINK
            elif code == 7:
                self.style = Style.INVERSE
            elif 30 <= code <= 37:
                self.fg = Color.from_sgr(code)
            elif code == 39:
                self.fg = DEFAULT_FG
            elif 40 <= code <= 47:
                self.bg = Color.from_sgr(code)
            elif code in IGNORED_SGR:
                pass
            else:
                self._warn(f"invalid SGR code {code} at byte {pos}, ignoring")

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)


def interpret(data: bytes, options: ConvertOptions | None = None) -> Screen:
    """Play ``data`` onto a fresh screen."""
    return AnsiInterpreter(options).feed(data)
