"""Render parsed terminal output to SVG."""

import re

from ansi_svg.core.constants import DEFAULT_BG_HEX
from ansi_svg.core.document import AnsiDocument
from ansi_svg.core.span import Line, Span

SVG_NS = "http://www.w3.org/2000/svg"

FONT_SIZE = 16
MARGIN = 20     # added to both canvas dimensions
TEXT_X = 10     # left edge of every line

_XML_ESCAPES = (
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('"', '&quot;'),
    ("'", '&apos;'),
)

# C0 controls that XML 1.0 does not allow, even as character references
_XML_INVALID = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def escape_text(text: str) -> str:
    """
    Escape the five XML special characters and drop control characters
    XML cannot carry (stray ESC, BEL from OSC titles and the like).
    """
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return _XML_INVALID.sub("", text)


class SvgRenderer:
    """
    Render an AnsiDocument to an SVG document string.

    Each line becomes one ``<text>`` element with preserved whitespace;
    each span becomes a ``<tspan>`` carrying only fill, font-weight and
    font-style. Canvas size is an estimate from the longest line.
    """

    def __init__(
        self,
        font_size: int = FONT_SIZE,
        font_family: str = "monospace",
        background: str = DEFAULT_BG_HEX,
    ):
        self.font_size = font_size
        self.font_family = font_family
        self.background = background

    @property
    def char_width(self) -> float:
        return self.font_size * 0.6

    @property
    def line_height(self) -> int:
        return self.font_size + 4

    def canvas_size(self, doc: AnsiDocument) -> tuple[int, int]:
        """Return ``(width, height)`` of the SVG canvas."""
        width = int(doc.width * self.char_width + MARGIN)
        height = int(doc.height * self.line_height + MARGIN)
        return width, height

    def render(self, doc: AnsiDocument) -> str:
        """Render document to SVG string."""
        width, height = self.canvas_size(doc)
        out: list[str] = [
            f'<svg xmlns="{SVG_NS}" width="{width}" height="{height}" version="1.1">',
            f'  <rect width="100%" height="100%" fill="{escape_text(self.background)}"/>',
        ]

        y = self.line_height
        for line in doc.lines:
            out.append(self._render_line(line, y))
            y += self.line_height

        out.append('</svg>')
        return '\n'.join(out) + '\n'

    def _render_line(self, line: Line, y: int) -> str:
        spans = ''.join(self._render_span(span) for span in line)
        return (
            f'  <text x="{TEXT_X}" y="{y}" font-family="{escape_text(self.font_family)}" '
            f'font-size="{self.font_size}px" xml:space="preserve">{spans}</text>'
        )

    def _render_span(self, span: Span) -> str:
        style = span.style
        return (
            f'<tspan fill="{style.fill}" font-weight="{style.font_weight}" '
            f'font-style="{style.font_style}">{escape_text(span.text)}</tspan>'
        )
