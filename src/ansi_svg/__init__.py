"""
ansi-svg: render ANSI-colored terminal output as SVG

Turns captured terminal text (SGR colors, bold, italic, 256-color and
24-bit true color) into a static SVG image of the rendered output.

Quick Start:
    >>> import ansi_svg
    >>> doc = ansi_svg.load("session.log")
    >>> doc.save("session.svg")

    $ ansi-svg session.log session.svg

Features:
    - Tokenizes CSI escape sequences, dropping the ones that are not SGR
    - 16-color, 256-color and true-color foregrounds
    - Bold and italic text
    - Style carried across lines like a real terminal
    - SVG output with preserved whitespace, or plain text
"""

__version__ = "0.1.0"

# Core types
from ansi_svg.core.color import Color, ColorDepth
from ansi_svg.core.style import Style
from ansi_svg.core.span import Span, Line
from ansi_svg.core.document import AnsiDocument

# Parsing
from ansi_svg.codec.ansi_parser import AnsiParser, parse_lines

# Errors
from ansi_svg.errors import AnsiSvgError, ConversionError

# Convenience functions
from ansi_svg.io.reader import load, load_text
from ansi_svg.io.writer import save
from ansi_svg.io.convert import convert

__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "ColorDepth",
    "Style",
    "Span",
    "Line",
    "AnsiDocument",
    # Parsing
    "AnsiParser",
    "parse_lines",
    # Errors
    "AnsiSvgError",
    "ConversionError",
    # I/O
    "load",
    "load_text",
    "save",
    "convert",
]
