"""Style - the SGR attributes carried by a span of text."""

from dataclasses import dataclass, field, replace
from typing import ClassVar

from ansi_svg.core.color import Color


@dataclass(frozen=True, slots=True)
class Style:
    """
    Foreground color, weight and slant of a run of text.

    Always fully defined. The interpreter replaces it wholesale on reset
    or derives a new one with a single attribute changed.
    """
    fg: Color = field(default_factory=lambda: Color.DEFAULT_FG)
    bold: bool = False
    italic: bool = False

    DEFAULT: ClassVar["Style"]

    @property
    def font_weight(self) -> str:
        return "bold" if self.bold else "normal"

    @property
    def font_style(self) -> str:
        return "italic" if self.italic else "normal"

    @property
    def fill(self) -> str:
        return self.fg.to_hex()

    def with_fg(self, fg: Color) -> "Style":
        return replace(self, fg=fg)

    def with_bold(self, bold: bool) -> "Style":
        return replace(self, bold=bold)

    def with_italic(self, italic: bool) -> "Style":
        return replace(self, italic=italic)

    def is_default(self) -> bool:
        """Check if this is the reset style (white, normal, normal)."""
        return self == Style.DEFAULT


Style.DEFAULT = Style()
