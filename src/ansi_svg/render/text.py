"""Render parsed terminal output to plain text (strip colors)."""

from ansi_svg.core.document import AnsiDocument


class TextRenderer:
    """Render an AnsiDocument to plain text without any styling."""

    def __init__(self, preserve_whitespace: bool = True):
        self.preserve_whitespace = preserve_whitespace

    def render(self, doc: AnsiDocument) -> str:
        """Render document to plain text, one row per line."""
        lines: list[str] = []

        for line in doc.lines:
            text = line.text
            if not self.preserve_whitespace:
                text = text.rstrip()
            lines.append(text)

        return '\n'.join(lines)
