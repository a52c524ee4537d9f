"""Resolve style flags into concrete colors."""

from ansi2mirc.core.cell import Cell, Style
from ansi2mirc.core.color import brighten
from ansi2mirc.core.screen import Screen


def normalize_cell(cell: Cell) -> Cell:
    """
    Fold a cell's style flags into its colors.

    Bold brightens the foreground, BG_BOLD the background, and inverse
    swaps the two afterwards. Underline and blink have no mIRC form and
    are dropped. The result carries no flags.
    """
    if cell.is_default():
        return cell
    fg, bg, style = cell.fg, cell.bg, cell.style
    if style & Style.BOLD:
        fg = brighten(fg)
    if style & Style.BG_BOLD:
        bg = brighten(bg)
    if style & Style.INVERSE:
        fg, bg = bg, fg
    return Cell(cell.glyph, int(fg), int(bg))


def normalize_screen(screen: Screen) -> Screen:
    """Normalize every cell of ``screen`` in place."""
    screen.map_cells(normalize_cell)
    return screen
