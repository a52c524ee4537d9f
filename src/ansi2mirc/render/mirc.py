"""Render a normalized screen as text with mIRC color codes."""

from typing import Iterator

from ansi2mirc.core.cell import Cell
from ansi2mirc.core.color import DEFAULT_BG, DEFAULT_FG
from ansi2mirc.core.constants import MIRC_COLOR, ROWS
from ansi2mirc.core.screen import Screen


# Resolved color (0-7 base, 8-15 bright) -> mIRC color index
MIRC_PALETTE: tuple[int, ...] = (
    1,   # 0 - Black
    4,   # 1 - Red
    3,   # 2 - Green
    8,   # 3 - Yellow/Brown
    2,   # 4 - Blue
    6,   # 5 - Magenta (purple)
    11,  # 6 - Cyan
    15,  # 7 - White (light grey)
    14,  # 8 - Bright Black (grey)
    13,  # 9 - Bright Red (pink)
    9,   # 10 - Bright Green
    8,   # 11 - Bright Yellow
    12,  # 12 - Bright Blue
    13,  # 13 - Bright Magenta (pink)
    10,  # 14 - Bright Cyan (teal)
    0,   # 15 - Bright White
)


class MircRenderer:
    """
    Render a Screen to lines of text with inline mIRC color codes.

    Optimizes output by only emitting a color code when the colors change.
    Trailing unwritten rows and cells are not emitted.
    """

    def __init__(self, row_window: tuple[int, int] = (0, ROWS)):
        start, end = row_window
        if start < 0 or end < 0:
            raise ValueError(f"row window must be non-negative, got {start}-{end}")
        self.start, self.end = start, end

    def render(self, screen: Screen) -> str:
        """Render screen to a string, one newline-terminated line per row."""
        return "".join(f"{line}\n" for line in self.render_lines(screen))

    def render_lines(self, screen: Screen) -> Iterator[str]:
        """Yield the rows inside the window, without line terminators."""
        stop = min(self.end, screen.last_content_row() + 1)
        for row in range(self.start, stop):
            yield self.render_row(screen.row(row))

    def render_row(self, cells: list[Cell]) -> str:
        """Render a single row of cells."""
        last_col = len(cells) - 1
        while last_col >= 0 and cells[last_col].is_default():
            last_col -= 1

        parts: list[str] = []
        # Rows start out in the default colors, so those need no code
        last_fg = MIRC_PALETTE[DEFAULT_FG]
        last_bg = MIRC_PALETTE[DEFAULT_BG]
        for cell in cells[:last_col + 1]:
            fg = MIRC_PALETTE[cell.fg]
            bg = MIRC_PALETTE[cell.bg]
            if bg != last_bg:
                parts.append(f"{MIRC_COLOR}{fg:02d},{bg:02d}")
            elif fg != last_fg:
                parts.append(f"{MIRC_COLOR}{fg:02d}")
            last_fg, last_bg = fg, bg
            parts.append(cell.char)
        return "".join(parts)
