"""Conversion options supplied by the caller."""

from dataclasses import dataclass

from ansi2mirc.core.constants import ROWS


@dataclass(frozen=True)
class ConvertOptions:
    """
    Settings for one conversion run.

    ``row_window`` selects the output rows: start inclusive, end exclusive.
    """
    expand_tabs: bool = False
    stop_on_eof_marker: bool = True
    row_window: tuple[int, int] = (0, ROWS)

    def __post_init__(self) -> None:
        start, end = self.row_window
        if start < 0 or end < 0:
            raise ValueError(f"row window must be non-negative, got {start}-{end}")
