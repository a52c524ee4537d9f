"""Normalization and mIRC rendering of the screen grid."""

from ansi2mirc.render.mirc import MIRC_PALETTE, MircRenderer
from ansi2mirc.render.normalize import normalize_cell, normalize_screen

__all__ = ["MIRC_PALETTE", "MircRenderer", "normalize_cell", "normalize_screen"]
