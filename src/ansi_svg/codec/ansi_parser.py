"""ANSI parser: turns lines of terminal output into styled spans."""

import logging

from ansi_svg.codec.sgr import apply_sgr_string
from ansi_svg.codec.tokenizer import tokenize_line
from ansi_svg.core.color import ColorDepth
from ansi_svg.core.document import AnsiDocument
from ansi_svg.core.span import Line, Span
from ansi_svg.core.style import Style

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """
    Split text into lines the way a line reader would.

    Lines end at ``\\n`` only. One ``\\r`` right before it (CRLF) is
    dropped; a lone ``\\r`` stays in the text. A trailing newline does
    not start an extra line and empty text has no lines at all.
    """
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


class AnsiParser:
    """
    Stateful ANSI parser producing one Line per input line.

    The current style carries over from one line to the next. Only SGR
    sequences change it; other CSI sequences (cursor movement, erase,
    mode changes) are dropped from the text and otherwise ignored.
    """

    def __init__(self, color_depth: ColorDepth = ColorDepth.TRUE_COLOR):
        self.color_depth = color_depth
        self.style = Style.DEFAULT
        self.lines: list[Line] = []
        self.discarded = 0

    def feed(self, text: str) -> list[Line]:
        """Process a block of text and return the lines it produced."""
        return [self.feed_line(line) for line in split_lines(text)]

    def feed_line(self, line: str) -> Line:
        """Process one line (without its newline)."""
        spans: list[Span] = []

        for text, sequence in tokenize_line(line):
            # Text before a sequence uses the style in effect before it
            if text:
                spans.append(Span(text, self.style))

            if sequence is None:
                continue
            if sequence.is_sgr:
                self.style = apply_sgr_string(self.style, sequence.params, self.color_depth)
            else:
                self.discarded += 1

        result = Line(tuple(spans))
        self.lines.append(result)
        return result

    def reset(self) -> None:
        """Forget parsed lines and return to the default style."""
        self.style = Style.DEFAULT
        self.lines = []
        self.discarded = 0

    def get_document(self, **kwargs) -> AnsiDocument:
        """Get the parsed lines as a document."""
        logger.debug(
            "Parsed %d lines, discarded %d non-SGR sequences",
            len(self.lines), self.discarded,
        )
        return AnsiDocument(
            lines=tuple(self.lines),
            color_depth=self.color_depth,
            **kwargs,
        )


def parse_lines(
    text: str,
    color_depth: ColorDepth = ColorDepth.TRUE_COLOR,
) -> list[Line]:
    """Parse a block of text into styled lines."""
    return AnsiParser(color_depth=color_depth).feed(text)
