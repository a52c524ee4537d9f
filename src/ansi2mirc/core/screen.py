"""Screen - fixed-size grid of cells filled in by the interpreter."""

from typing import Callable, Iterator

from ansi2mirc.core.cell import DEFAULT_CELL, Cell, Style
from ansi2mirc.core.constants import COLS, ROWS
from ansi2mirc.core.errors import InternalConsistencyError


class Screen:
    """
    A ROWS x COLS grid of Cells, indexed by (row, col) from zero.

    The grid never changes size. Cells are immutable, so a cleared grid
    shares the single DEFAULT_CELL instance.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        self.rows = rows
        self.cols = cols
        self._buffer: list[list[Cell]] = []
        self.clear()

    def clear(self) -> None:
        """Reset every cell to DEFAULT_CELL."""
        self._buffer = [[DEFAULT_CELL] * self.cols for _ in range(self.rows)]

    def write(
        self,
        row: int,
        col: int,
        glyph: int,
        fg: int,
        bg: int,
        style: Style = Style.NONE,
    ) -> None:
        """Overwrite the cell at (row, col). Callers keep row/col in range."""
        self._buffer[row][col] = Cell(glyph, fg, bg, style)

    def read(self, row: int, col: int) -> Cell:
        return self._buffer[row][col]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: screen[row, col]."""
        row, col = pos
        return self._buffer[row][col]

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        row, col = pos
        self._buffer[row][col] = cell

    def row(self, row: int) -> list[Cell]:
        """Get the cells of one row."""
        return self._buffer[row]

    def iter_rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows, top to bottom."""
        yield from self._buffer

    def map_cells(self, func: Callable[[Cell], Cell]) -> None:
        """Replace every cell with ``func(cell)``."""
        self._buffer = [[func(cell) for cell in row] for row in self._buffer]

    def last_content_row(self) -> int:
        """Index of the last row holding a written cell, or -1 if none."""
        for row in range(self.rows - 1, -1, -1):
            if any(cell != DEFAULT_CELL for cell in self._buffer[row]):
                return row
        return -1

    def check(self) -> None:
        """
        Verify every cell is DEFAULT_CELL or a well-formed record.

        Raises InternalConsistencyError on the first bad cell.
        """
        for row, cells in enumerate(self._buffer):
            for col, cell in enumerate(cells):
                if cell == DEFAULT_CELL:
                    continue
                if (
                    not isinstance(cell, Cell)
                    or cell.unchanged
                    or not 0 <= cell.glyph <= 0xFF
                    or not 0 <= cell.fg <= 15
                    or not 0 <= cell.bg <= 15
                ):
                    raise InternalConsistencyError(
                        f"inconsistent cell {cell!r} at row {row}, col {col}"
                    )
