"""Save parsed terminal output as SVG."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ansi_svg.core.document import AnsiDocument

logger = logging.getLogger(__name__)


def save(
    doc: "AnsiDocument",
    path: str | Path,
    **render_options,
) -> None:
    """
    Render a document to SVG and write it to disk.

    Rendering finishes before the file is opened, so a document that
    fails to render never touches the output path. If writing fails
    after the file was opened, the partial file is removed and the error
    propagates.
    """
    path = Path(path)

    from ansi_svg.render.svg import SvgRenderer
    content = SvgRenderer(**render_options).render(doc)

    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        try:
            f.write(content)
            f.flush()
        except OSError:
            f.close()
            path.unlink(missing_ok=True)
            raise
    logger.debug("Wrote %d characters to %s", len(content), path)
