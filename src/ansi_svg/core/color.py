"""Color representation for terminal text."""

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import ClassVar

from ansi_svg.core.constants import (
    ANSI_COLORS_HEX,
    COLORS_16,
    CUBE_LEVELS,
    DEFAULT_FG_HEX,
)

_HEX_PATTERN = re.compile(r"#?([0-9A-Fa-f]{6})")


class ColorDepth(Enum):
    """Extended-color support of the SGR interpreter."""
    STANDARD_16 = "16"      # SGR 30-37, 90-97 only
    EXTENDED_256 = "256"    # adds SGR 38;5;n
    TRUE_COLOR = "rgb"      # adds SGR 38;2;r;g;b

    @property
    def supports_256(self) -> bool:
        return self is not ColorDepth.STANDARD_16

    @property
    def supports_rgb(self) -> bool:
        return self is ColorDepth.TRUE_COLOR


@dataclass(frozen=True)
class Color:
    """
    An RGB foreground color.

    Components are stored as given. Values outside 0-255 coming from a
    true-color sequence are kept and rendered with as many hex digits as
    they need.
    """
    r: int
    g: int
    b: int

    WHITE: ClassVar["Color"]
    DEFAULT_FG: ClassVar["Color"]

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Create a Color from a ``#RRGGBB`` string."""
        match = _HEX_PATTERN.fullmatch(text)
        if not match:
            raise ValueError(f"Expected #RRGGBB color, got {text!r}")
        value = match.group(1)
        return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))

    @classmethod
    def from_sgr(cls, code: int) -> "Color":
        """Create a Color from an SGR foreground code (30-37, 90-97)."""
        try:
            return ANSI_COLORS[code]
        except KeyError:
            raise ValueError(f"Invalid SGR color code: {code}") from None

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color palette index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return PALETTE_256[index]

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB components (no clamping)."""
        return cls(r, g, b)

    def to_hex(self) -> str:
        """Return the color as an upper-case ``#RRGGBB`` string."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.to_hex()


def _palette_entry(index: int) -> Color:
    if index < 8:
        return Color.from_hex(ANSI_COLORS_HEX[30 + index])
    if index < 16:
        return Color.from_hex(ANSI_COLORS_HEX[90 + index - 8])
    if index < 232:
        v = index - 16
        return Color(CUBE_LEVELS[v // 36], CUBE_LEVELS[(v // 6) % 6], CUBE_LEVELS[v % 6])
    grey = 8 + (index - 232) * 10
    return Color(grey, grey, grey)


# SGR code -> Color (immutable, process-wide)
ANSI_COLORS: MappingProxyType[int, Color] = MappingProxyType({
    code: Color.from_hex(value) for code, value in ANSI_COLORS_HEX.items()
})

# xterm 256-color palette
PALETTE_256: tuple[Color, ...] = tuple(_palette_entry(i) for i in range(256))

# Named access to the 16 standard colors
NAMED_COLORS: MappingProxyType[str, Color] = MappingProxyType({
    name: PALETTE_256[index] for name, index in COLORS_16.items()
})

Color.WHITE = Color.from_hex(DEFAULT_FG_HEX)
Color.DEFAULT_FG = Color.WHITE
