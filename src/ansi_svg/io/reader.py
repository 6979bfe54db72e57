"""Load terminal output files."""

import logging
from pathlib import Path

from ansi_svg.codec.ansi_parser import AnsiParser
from ansi_svg.core.color import ColorDepth
from ansi_svg.core.document import AnsiDocument

logger = logging.getLogger(__name__)


def load(
    path: str | Path,
    encoding: str = "utf-8",
    color_depth: ColorDepth = ColorDepth.TRUE_COLOR,
) -> AnsiDocument:
    """
    Load a text file containing ANSI escape sequences from disk.

    The whole file is read before parsing. Undecodable bytes are replaced
    rather than rejected. Newlines are left untranslated so a lone ``\\r``
    (progress output) stays inside its line.
    """
    path = Path(path)

    with open(path, 'r', encoding=encoding, errors='replace', newline='') as f:
        text = f.read()
    logger.debug("Read %d characters from %s", len(text), path)

    return load_text(text, color_depth=color_depth, source_path=path, encoding=encoding)


def load_text(
    text: str,
    color_depth: ColorDepth = ColorDepth.TRUE_COLOR,
    source_path: Path | None = None,
    encoding: str = "utf-8",
) -> AnsiDocument:
    """Parse ANSI text already in memory."""
    parser = AnsiParser(color_depth=color_depth)
    parser.feed(text)

    return parser.get_document(source_path=source_path, encoding=encoding)
