"""
ansi2mirc: convert DOS ANSI art to mIRC-colored text

Plays CP437 text and ANSI escape sequences onto a virtual 80-column
screen, folds the result down to ASCII, and renders it with mIRC
color codes.

Quick Start:
    >>> import ansi2mirc
    >>> print(ansi2mirc.convert_file("artwork.ans"), end="")

Pipeline:
    - Interpret the byte stream onto a 1024x80 Screen
    - Translate CP437 glyphs to ASCII stand-ins
    - Normalize bold/inverse flags into plain colors
    - Render rows with coalesced mIRC color codes
"""

__version__ = "0.1.0"

# Core types
from ansi2mirc.core.cell import DEFAULT_CELL, Cell, Style
from ansi2mirc.core.color import Color
from ansi2mirc.core.options import ConvertOptions
from ansi2mirc.core.screen import Screen
from ansi2mirc.core.errors import ConversionError, ParseError

# Pipeline stages
from ansi2mirc.codec.ansi_parser import AnsiInterpreter
from ansi2mirc.render.mirc import MircRenderer

# Convenience functions
from ansi2mirc.convert import build_screen, convert_bytes, convert_file

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Color",
    "DEFAULT_CELL",
    "Screen",
    "Style",
    "ConvertOptions",
    # Errors
    "ConversionError",
    "ParseError",
    # Stages
    "AnsiInterpreter",
    "MircRenderer",
    # Conversion
    "build_screen",
    "convert_bytes",
    "convert_file",
]
