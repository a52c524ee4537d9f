"""Color representation for ANSI art."""

from enum import IntEnum

BRIGHT = 8


class Color(IntEnum):
    """The 8 ECMA-48 base colors, in SGR order (30-37 fg, 40-47 bg)."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7

    @classmethod
    def from_sgr(cls, code: int) -> "Color":
        """Create a Color from an SGR code (30-37 or 40-47)."""
        if 30 <= code <= 37:
            return cls(code - 30)
        elif 40 <= code <= 47:
            return cls(code - 40)
        raise ValueError(f"Invalid SGR color code: {code}")


DEFAULT_FG = Color.WHITE
DEFAULT_BG = Color.BLACK


def brighten(color: int) -> int:
    """Return the bright variant (8-15) of a color."""
    return color | BRIGHT
