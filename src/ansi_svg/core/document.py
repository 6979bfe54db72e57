"""AnsiDocument - parsed terminal output ready for rendering."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from ansi_svg.core.color import ColorDepth
from ansi_svg.core.span import Line


@dataclass
class AnsiDocument:
    """
    Represents a complete parsed terminal capture.

    Holds the styled lines produced by the parser along with where they
    came from. Width and height are derived from the lines and only used
    to size the output canvas.
    """
    lines: tuple[Line, ...] = ()
    source_path: Path | None = None
    encoding: str = "utf-8"
    color_depth: ColorDepth = ColorDepth.TRUE_COLOR

    @classmethod
    def load(cls, path: str | Path, **kwargs) -> "AnsiDocument":
        """Load and parse a text file from disk."""
        from ansi_svg.io.reader import load
        return load(path, **kwargs)

    def save(self, path: str | Path, **kwargs) -> None:
        """Render this document to SVG and write it to disk."""
        from ansi_svg.io.writer import save
        save(self, path, **kwargs)

    def render_to_svg(self, **kwargs) -> str:
        """Render to an SVG document string."""
        from ansi_svg.render.svg import SvgRenderer
        return SvgRenderer(**kwargs).render(self)

    def render_to_text(self) -> str:
        """Render to plain text (no colors)."""
        from ansi_svg.render.text import TextRenderer
        return TextRenderer().render(self)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def title(self) -> str:
        """Get title from the source filename."""
        if self.source_path:
            return self.source_path.stem
        return "Untitled"

    @property
    def width(self) -> int:
        """Maximum character count across lines."""
        return max((len(line) for line in self.lines), default=0)

    @property
    def height(self) -> int:
        """Number of lines."""
        return len(self.lines)
