"""Cell - atomic unit of the screen grid."""

from dataclasses import dataclass, field
from enum import Flag, auto

from ansi2mirc.core.color import DEFAULT_BG, DEFAULT_FG


class Style(Flag):
    """Graphic rendition flags carried by a cell until normalization."""
    NONE = 0
    BOLD = auto()
    UNDERLINE = auto()
    BLINK = auto()
    INVERSE = auto()
    BG_BOLD = auto()


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A single character cell with color and style.

    ``glyph`` is a single byte value. ``fg``/``bg`` hold a base color (0-7)
    until normalization resolves them to 0-15 and clears ``style``.
    """
    glyph: int = 0x20
    fg: int = DEFAULT_FG
    bg: int = DEFAULT_BG
    style: Style = Style.NONE
    # Only DEFAULT_CELL sets this, so no interpreter write can equal it.
    unchanged: bool = field(default=False, repr=False)

    def replace(self, **changes) -> "Cell":
        """Return a copy with some fields changed."""
        return Cell(
            glyph=changes.get("glyph", self.glyph),
            fg=changes.get("fg", self.fg),
            bg=changes.get("bg", self.bg),
            style=changes.get("style", self.style),
        )

    def is_default(self) -> bool:
        """Check if this is the never-written sentinel."""
        return self.unchanged

    @property
    def char(self) -> str:
        return chr(self.glyph)


DEFAULT_CELL = Cell(unchanged=True)
