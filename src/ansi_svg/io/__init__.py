"""File I/O for terminal capture files."""

from ansi_svg.io.reader import load, load_text
from ansi_svg.io.writer import save
from ansi_svg.io.convert import convert

__all__ = ["load", "load_text", "save", "convert"]
