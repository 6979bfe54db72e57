"""Core data structures for styled terminal text."""

from ansi_svg.core.color import Color, ColorDepth
from ansi_svg.core.style import Style
from ansi_svg.core.span import Span, Line
from ansi_svg.core.document import AnsiDocument

__all__ = ["Color", "ColorDepth", "Style", "Span", "Line", "AnsiDocument"]
