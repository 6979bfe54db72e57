"""
SGR (Select Graphic Rendition) interpreter.

A pure transition function from the current Style and an SGR parameter
list to the next Style. Malformed and unsupported parameters are no-ops;
nothing raises.
"""

from typing import Sequence

from ansi_svg.core.color import ANSI_COLORS, PALETTE_256, Color, ColorDepth
from ansi_svg.core.style import Style

# SGR codes
RESET = 0
BOLD = 1
ITALIC = 3
NORMAL_WEIGHT = 22
NOT_ITALIC = 23
EXTENDED_FG = 38

# Sub-modes of SGR 38
MODE_256 = 5
MODE_RGB = 2


def _parse_param(token: str) -> int | None:
    """Parse one parameter; empty is 0, anything non-numeric is None."""
    if not token:
        return 0
    if not token.isascii() or not token.isdigit():
        return None
    return int(token)


def parse_params(params: str) -> list[int | None]:
    """
    Split an SGR parameter string on ``;``.

    Empty slots (``ESC[m``, ``ESC[;1m``, ``ESC[1;m``) become 0. Tokens
    that are not non-negative integers become None and are skipped by
    ``apply_sgr``.
    """
    return [_parse_param(token) for token in params.split(';')]


def _extended_fg(
    params: Sequence[int | None],
    i: int,
    depth: ColorDepth,
) -> tuple[Color, int] | None:
    """
    Decode ``38;5;n`` or ``38;2;r;g;b`` starting at the 38 at index ``i``.

    Returns the color and the number of parameters consumed after the 38,
    or None when the sequence is incomplete, malformed or not enabled at
    this depth.
    """
    mode = params[i + 1] if i + 1 < len(params) else None

    if mode == MODE_RGB and depth.supports_rgb:
        components = params[i + 2:i + 5]
        if len(components) == 3 and None not in components:
            r, g, b = components
            return Color.from_rgb(r, g, b), 4
    elif mode == MODE_256 and depth.supports_256:
        index = params[i + 2] if i + 2 < len(params) else None
        if index is not None and 0 <= index <= 255:
            return PALETTE_256[index], 2

    return None


def apply_sgr(
    style: Style,
    params: Sequence[int | None],
    depth: ColorDepth = ColorDepth.TRUE_COLOR,
) -> Style:
    """
    Apply SGR parameters left to right and return the resulting Style.

    Later parameters override earlier ones on the same attribute. A reset
    (0) discards everything before it; codes after it apply on top of the
    defaults.
    """
    i = 0
    while i < len(params):
        p = params[i]

        if p is None:
            pass
        elif p == RESET:
            style = Style.DEFAULT
        elif p == BOLD:
            style = style.with_bold(True)
        elif p == ITALIC:
            style = style.with_italic(True)
        elif p == NORMAL_WEIGHT:
            style = style.with_bold(False)
        elif p == NOT_ITALIC:
            style = style.with_italic(False)
        elif p in ANSI_COLORS:
            style = style.with_fg(ANSI_COLORS[p])
        elif p == EXTENDED_FG:
            decoded = _extended_fg(params, i, depth)
            if decoded is not None:
                color, consumed = decoded
                style = style.with_fg(color)
                i += consumed

        i += 1

    return style


def apply_sgr_string(
    style: Style,
    params: str,
    depth: ColorDepth = ColorDepth.TRUE_COLOR,
) -> Style:
    """Parse a raw parameter string and apply it."""
    return apply_sgr(style, parse_params(params), depth)
