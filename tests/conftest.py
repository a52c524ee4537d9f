"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path
from typing import Optional

import pytest

from ansi2mirc.codec.ansi_parser import AnsiInterpreter
from ansi2mirc.core.options import ConvertOptions


def get_test_art_dir() -> Optional[Path]:
    """
    Get external art directory from environment or default locations.

    Set ANSI2MIRC_TEST_DIR environment variable to specify a custom location.
    """
    if env_path := os.environ.get("ANSI2MIRC_TEST_DIR"):
        path = Path(env_path).expanduser()
        if path.exists():
            return path

    defaults = [
        Path.home() / "ansi-art",
        Path.home() / "Documents" / "ansi-art",
    ]
    for default in defaults:
        if default.exists() and list(default.glob("*.ans"))[:1]:
            return default

    return None


@pytest.fixture
def feed():
    """Run bytes through a fresh interpreter and return it."""
    def _feed(data: bytes, **options) -> AnsiInterpreter:
        interpreter = AnsiInterpreter(ConvertOptions(**options))
        interpreter.feed(data)
        return interpreter
    return _feed


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Generate test cases from the external art directory."""
    if "ans_file" in metafunc.fixturenames:
        art_dir = get_test_art_dir()
        files = sorted(art_dir.glob("*.ans"))[:50] if art_dir else []
        metafunc.parametrize("ans_file", files, ids=lambda p: p.name)
