"""Split a line of terminal output into literal text and escape sequences."""

import re
from dataclasses import dataclass
from typing import Iterator, NamedTuple

from ansi_svg.core.constants import CSI


# CSI sequences: ESC [ params final-byte. An ESC [ that does not complete
# this pattern is not a match and stays in the literal text.
CSI_PATTERN = re.compile(re.escape(CSI) + r'([0-9;?]*)([A-Za-z])')


@dataclass(frozen=True, slots=True)
class EscapeSequence:
    """A recognized CSI sequence: raw parameter string and final byte."""
    params: str
    command: str

    @property
    def is_sgr(self) -> bool:
        """True for Select Graphic Rendition (``m``) sequences."""
        return self.command == 'm'

    def __str__(self) -> str:
        return f"{CSI}{self.params}{self.command}"


class Segment(NamedTuple):
    """Literal text followed by the escape sequence that ends it, if any."""
    text: str
    sequence: EscapeSequence | None


def tokenize_line(line: str) -> Iterator[Segment]:
    """
    Yield ``(text, sequence)`` segments covering the whole line.

    Every literal character is kept, in order. Each recognized sequence
    ends a segment; the last segment carries the text after the final
    sequence and ``None``. Segment text may be empty.
    """
    pos = 0
    for match in CSI_PATTERN.finditer(line):
        yield Segment(line[pos:match.start()], EscapeSequence(match.group(1), match.group(2)))
        pos = match.end()
    yield Segment(line[pos:], None)


def strip_sequences(line: str) -> str:
    """Remove every recognized escape sequence from a line."""
    return CSI_PATTERN.sub('', line)
