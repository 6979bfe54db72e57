"""Exceptions raised by ansi-svg."""

from pathlib import Path


class AnsiSvgError(Exception):
    """Base class for ansi-svg errors."""


class ConversionError(AnsiSvgError):
    """
    An input or output file could not be opened, read or written.

    ``role`` is ``"input"`` or ``"output"`` so callers can report which
    side of the conversion failed.
    """

    def __init__(self, path: str | Path, role: str):
        self.path = Path(path)
        self.role = role
        super().__init__(f"Cannot open {role} file: {path}")
