"""Convert ANSI art to mIRC-colored text."""

from pathlib import Path

from ansi2mirc.codec.ansi_parser import AnsiInterpreter
from ansi2mirc.codec.cp437 import translate_screen
from ansi2mirc.core.options import ConvertOptions
from ansi2mirc.core.screen import Screen
from ansi2mirc.render.mirc import MircRenderer
from ansi2mirc.render.normalize import normalize_screen


def build_screen(data: bytes, options: ConvertOptions | None = None) -> Screen:
    """
    Interpret, translate and normalize ``data`` into a finished screen.

    Raises ConversionError if the input leaves the supported dialect.
    """
    screen = AnsiInterpreter(options).feed(data)
    translate_screen(screen)
    normalize_screen(screen)
    screen.check()
    return screen


def convert_bytes(data: bytes, options: ConvertOptions | None = None) -> str:
    """Convert CP437/ANSI bytes to ASCII text with mIRC color codes."""
    options = options or ConvertOptions()
    screen = build_screen(data, options)
    return MircRenderer(options.row_window).render(screen)


def convert_file(path: str | Path, options: ConvertOptions | None = None) -> str:
    """Convert an ANSI art file on disk."""
    return convert_bytes(Path(path).read_bytes(), options)
