"""CP437 (IBM PC) to ASCII translation."""

from ansi2mirc.core.cell import Cell, Style
from ansi2mirc.core.screen import Screen

# Line drawing collapses to roguelike boxes:  +---+
# accented letters fold to their base letter.  |   |
CP437_TO_ASCII: bytes = b"".join((
    b" @@*xA***o*6QfM*",   # 0x00
    b"><$!PS_$^v><_-Av",   # 0x10
    b" !\"#$%&'()*+,-./",  # 0x20
    b"0123456789:;<=>?",   # 0x30
    b"@ABCDEFGHIJKLMNO",   # 0x40
    b"PQRSTUVWXYZ[\\]^_",  # 0x50
    b"`abcdefghijklmno",   # 0x60
    b"pqrstuvwxyz{|}~^",   # 0x70
    b"CueaaaaceeeiiiAA",   # 0x80
    b"E%AooouuyOUcLYPf",   # 0x90
    b"aiounN~^?++XK!<>",   # 0xA0
    b"#@#|++++++|+++++",   # 0xB0
    b"++++-++++++++=++",   # 0xC0
    b"+++++++++++ m||\"",  # 0xD0
    b"aBrnEqurI0*o*0En",   # 0xE0
    b"=+><lj%=*..jn2# ",   # 0xF0
))

# Shading has no ASCII form and is approximated with colors instead:
# dense shade, full block and the inverse smiley toggle inverse plus bright
# background, medium shade toggles bold.
INVERT_GLYPHS = frozenset({0x02, 0xB2, 0xDB})
MEDIUM_SHADE = 0xB1


def translate_cell(cell: Cell) -> Cell:
    """Replace a cell's glyph with its ASCII stand-in."""
    if cell.is_default():
        return cell
    style = cell.style
    if cell.glyph in INVERT_GLYPHS:
        style ^= Style.BG_BOLD | Style.INVERSE
    elif cell.glyph == MEDIUM_SHADE:
        style ^= Style.BOLD
    return cell.replace(glyph=CP437_TO_ASCII[cell.glyph], style=style)


def translate_screen(screen: Screen) -> Screen:
    """Translate every cell of ``screen`` in place."""
    screen.map_cells(translate_cell)
    return screen


def cp437_to_ascii(data: bytes) -> str:
    """Translate raw CP437 bytes to ASCII text, ignoring attributes."""
    return data.translate(CP437_TO_ASCII).decode("ascii")
