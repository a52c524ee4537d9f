"""Command line interface for ansi2mirc."""

from ansi2mirc.cli.app import create_app

__all__ = ["create_app"]
