"""Span and Line - styled runs of text making up one output row."""

from dataclasses import dataclass
from typing import Iterator

from ansi_svg.core.style import Style


@dataclass(frozen=True, slots=True)
class Span:
    """A maximal run of literal text sharing one style."""
    text: str
    style: Style = Style.DEFAULT

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True)
class Line:
    """
    One row of output: the spans produced from a single input line.

    Concatenating the span texts reproduces the input line with every
    escape sequence removed.
    """
    spans: tuple[Span, ...] = ()

    def __iter__(self) -> Iterator[Span]:
        return iter(self.spans)

    def __len__(self) -> int:
        """Character count of the line."""
        return sum(len(span) for span in self.spans)

    @property
    def text(self) -> str:
        return ''.join(span.text for span in self.spans)
