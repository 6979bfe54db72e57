"""Renderers for outputting parsed terminal text to various formats."""

from ansi_svg.render.svg import SvgRenderer, escape_text
from ansi_svg.render.text import TextRenderer

__all__ = ["SvgRenderer", "TextRenderer", "escape_text"]
