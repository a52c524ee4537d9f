"""Decoding of CP437/ANSI input."""

from ansi2mirc.codec.ansi_parser import AnsiInterpreter, interpret
from ansi2mirc.codec.cp437 import CP437_TO_ASCII, cp437_to_ascii, translate_screen

__all__ = [
    "AnsiInterpreter",
    "interpret",
    "CP437_TO_ASCII",
    "cp437_to_ascii",
    "translate_screen",
]
