"""Tests for core data structures."""

import pytest

from ansi2mirc.core.cell import DEFAULT_CELL, Cell, Style
from ansi2mirc.core.color import Color, brighten
from ansi2mirc.core.constants import COLS, ROWS
from ansi2mirc.core.errors import ConversionError, InternalConsistencyError
from ansi2mirc.core.options import ConvertOptions
from ansi2mirc.core.screen import Screen


class TestCell:
    """Tests for Cell and the default sentinel."""

    def test_written_cell_defaults(self) -> None:
        cell = Cell(ord('A'))
        assert cell.glyph == 0x41
        assert cell.char == 'A'
        assert cell.fg == Color.WHITE
        assert cell.bg == Color.BLACK
        assert cell.style == Style.NONE

    def test_default_cell_only_equals_itself(self) -> None:
        lookalike = Cell(0x20, Color.WHITE, Color.BLACK)
        assert lookalike != DEFAULT_CELL
        assert DEFAULT_CELL == DEFAULT_CELL
        assert DEFAULT_CELL.is_default() is True
        assert lookalike.is_default() is False

    def test_replace_drops_default_marker(self) -> None:
        cell = DEFAULT_CELL.replace(glyph=ord('x'))
        assert cell.glyph == ord('x')
        assert cell != DEFAULT_CELL

    def test_cells_are_immutable(self) -> None:
        cell = Cell(ord('A'))
        with pytest.raises(AttributeError):
            cell.glyph = ord('B')  # type: ignore[misc]

    def test_style_flags_combine(self) -> None:
        style = Style.BOLD | Style.INVERSE
        assert style & Style.BOLD
        assert not style & Style.BLINK
        assert style ^ Style.INVERSE == Style.BOLD


class TestColor:
    """Tests for Color."""

    def test_base_colors(self) -> None:
        assert Color.BLACK == 0
        assert Color.RED == 1
        assert Color.WHITE == 7

    def test_from_sgr(self) -> None:
        assert Color.from_sgr(31) is Color.RED
        assert Color.from_sgr(44) is Color.BLUE
        with pytest.raises(ValueError):
            Color.from_sgr(38)

    def test_brighten(self) -> None:
        assert brighten(Color.RED) == 9
        assert brighten(Color.WHITE) == 15
        assert brighten(9) == 9


class TestScreen:
    """Tests for Screen."""

    def test_default_geometry(self) -> None:
        screen = Screen()
        assert screen.rows == ROWS == 1024
        assert screen.cols == COLS == 80

    def test_new_screen_is_all_default(self) -> None:
        screen = Screen(rows=3, cols=4)
        assert all(cell is DEFAULT_CELL for row in screen.iter_rows() for cell in row)
        assert screen.last_content_row() == -1

    def test_write_and_read(self) -> None:
        screen = Screen(rows=3, cols=4)
        screen.write(1, 2, ord('Q'), Color.RED, Color.BLUE, Style.BOLD)
        cell = screen.read(1, 2)
        assert cell == Cell(ord('Q'), Color.RED, Color.BLUE, Style.BOLD)
        assert screen[1, 2] is cell
        assert screen.last_content_row() == 1

    def test_clear(self) -> None:
        screen = Screen(rows=3, cols=4)
        screen.write(2, 3, ord('Z'), Color.GREEN, Color.BLACK)
        screen.clear()
        assert screen.read(2, 3) is DEFAULT_CELL
        assert screen.last_content_row() == -1

    def test_map_cells(self) -> None:
        screen = Screen(rows=2, cols=2)
        screen.write(0, 0, ord('a'), Color.WHITE, Color.BLACK)
        screen.map_cells(lambda c: c if c == DEFAULT_CELL else c.replace(glyph=ord('b')))
        assert screen.read(0, 0).char == 'b'
        assert screen.read(1, 1) is DEFAULT_CELL

    def test_check_passes_on_valid_grid(self) -> None:
        screen = Screen(rows=2, cols=2)
        screen.write(0, 1, 0x00, Color.BLACK, Color.BLACK)
        screen.write(1, 0, ord('x'), 15, 8)
        screen.check()

    def test_check_rejects_bad_cells(self) -> None:
        screen = Screen(rows=2, cols=2)
        screen[1, 1] = Cell(glyph=300)
        with pytest.raises(InternalConsistencyError, match="row 1, col 1"):
            screen.check()

    def test_check_rejects_foreign_values(self) -> None:
        screen = Screen(rows=2, cols=2)
        screen[0, 0] = 0  # type: ignore[assignment]
        with pytest.raises(ConversionError):
            screen.check()


class TestConvertOptions:
    """Tests for ConvertOptions."""

    def test_defaults(self) -> None:
        options = ConvertOptions()
        assert options.expand_tabs is False
        assert options.stop_on_eof_marker is True
        assert options.row_window == (0, ROWS)

    def test_negative_window_rejected(self) -> None:
        with pytest.raises(ValueError):
            ConvertOptions(row_window=(-1, 5))
