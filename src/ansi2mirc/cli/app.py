"""Typer CLI application."""

import logging
import re
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ansi2mirc.convert import convert_bytes
from ansi2mirc.core.constants import ROWS
from ansi2mirc.core.errors import ConversionError
from ansi2mirc.core.options import ConvertOptions

ROW_WINDOW_PATTERN = re.compile(r'^(\d+)-(\d+)$')


def parse_row_window(value: str | None) -> tuple[int, int]:
    """Parse a START-END row window; no value means the whole screen."""
    if value is None:
        return (0, ROWS)
    match = ROW_WINDOW_PATTERN.match(value)
    if not match:
        raise typer.BadParameter(
            "expected START-END (0-indexed, START inclusive, END exclusive)"
        )
    return int(match.group(1)), int(match.group(2))


def setup_logging(console: Console) -> None:
    """Send library warnings to stderr through rich."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi2mirc",
        help="Convert CP437 ANSI art to ASCII text with mIRC color codes.",
        add_completion=False,
        rich_markup_mode="rich",
        context_settings={"help_option_names": ["-h", "--help"]},
    )
    console = Console(stderr=True)

    @app.command()
    def convert(
        rows: Annotated[Optional[str], typer.Argument(
            metavar="[START-END]",
            help="Rows to print; START is inclusive and END is exclusive",
        )] = None,
        expand_tabs: Annotated[bool, typer.Option(
            "--expand-tabs", "-t", help="Expand tabs to 8 spaces like DOS does",
        )] = False,
        include_eof: Annotated[bool, typer.Option(
            "--include-eof", "-z", help="Don't stop reading at an EOF marker (^Z, 0x1a)",
        )] = False,
        file: Annotated[Optional[Path], typer.Option(
            "--file", "-f", help="Read FILE instead of stdin", exists=True, dir_okay=False,
        )] = None,
    ) -> None:
        """Convert ANSI art from stdin (or FILE) and print it to stdout."""
        setup_logging(console)
        options = ConvertOptions(
            expand_tabs=expand_tabs,
            stop_on_eof_marker=not include_eof,
            row_window=parse_row_window(rows),
        )
        data = file.read_bytes() if file else sys.stdin.buffer.read()

        try:
            text = convert_bytes(data, options)
        except ConversionError as exc:
            console.print(f"error: {exc}", style="red", markup=False, highlight=False)
            raise typer.Exit(1)

        typer.echo(text, nl=False)

    return app
