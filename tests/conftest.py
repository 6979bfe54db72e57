"""Shared fixtures for ansi-svg tests."""

from pathlib import Path

import pytest

from ansi_svg.core.constants import ESC, RESET

SAMPLE_SESSION = (
    f"{ESC}[1;32muser@host{RESET}:{ESC}[34m~/src{RESET}$ ls\n"
    f"{ESC}[38;2;255;128;0morange{RESET}  <plain> & 'quoted'\n"
    f"{ESC}[2K{ESC}[3mitalic carries\n"
    "over the newline\n"
)


@pytest.fixture
def sample_text() -> str:
    """A short terminal session with colors, styles and a cursor sequence."""
    return SAMPLE_SESSION


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """The sample session written to a UTF-8 file."""
    path = tmp_path / "session.log"
    path.write_text(SAMPLE_SESSION, encoding="utf-8")
    return path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    path = tmp_path / "empty.log"
    path.write_text("", encoding="utf-8")
    return path
