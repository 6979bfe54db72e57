"""One-shot file conversion: ANSI text in, SVG out."""

from pathlib import Path

from ansi_svg.core.color import ColorDepth
from ansi_svg.errors import ConversionError
from ansi_svg.io.reader import load
from ansi_svg.io.writer import save


def convert(
    source: str | Path,
    dest: str | Path,
    encoding: str = "utf-8",
    color_depth: ColorDepth = ColorDepth.TRUE_COLOR,
    **render_options,
) -> None:
    """
    Convert an ANSI text file to an SVG file.

    Raises:
        ConversionError: the input could not be read or the output could
            not be written. ``role`` says which.
    """
    try:
        doc = load(source, encoding=encoding, color_depth=color_depth)
    except OSError as exc:
        raise ConversionError(source, "input") from exc

    try:
        save(doc, dest, **render_options)
    except OSError as exc:
        raise ConversionError(dest, "output") from exc
