"""Core data structures for the screen grid."""

from ansi2mirc.core.cell import DEFAULT_CELL, Cell, Style
from ansi2mirc.core.color import Color
from ansi2mirc.core.screen import Screen

__all__ = ["Cell", "Color", "DEFAULT_CELL", "Screen", "Style"]
