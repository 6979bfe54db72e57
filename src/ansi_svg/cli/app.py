"""Typer CLI application."""

import codecs
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ansi_svg.core.color import Color, ColorDepth
from ansi_svg.core.constants import DEFAULT_BG_HEX
from ansi_svg.errors import ConversionError


class DepthChoice(str, Enum):
    """Values accepted by ``--depth``."""
    STANDARD_16 = "16"
    EXTENDED_256 = "256"
    TRUE_COLOR = "rgb"


def _check_encoding(value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError:
        raise typer.BadParameter(f"Unknown encoding: {value}") from None
    return value


def _check_color(value: str) -> str:
    try:
        return Color.from_hex(value).to_hex()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from None


def _configure_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-svg",
        help="Convert ANSI-colored terminal output to an SVG image.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(highlight=False, soft_wrap=True)
    err_console = Console(stderr=True, highlight=False, soft_wrap=True)

    @app.command()
    def convert(
        source: Annotated[Path, typer.Argument(help="Input text file with ANSI escape sequences")],
        dest: Annotated[Path, typer.Argument(help="Output SVG file")],
        depth: Annotated[DepthChoice, typer.Option("--depth", "-d", help="Extended color support")] = DepthChoice.TRUE_COLOR,
        encoding: Annotated[str, typer.Option("--encoding", "-e", help="Input text encoding", callback=_check_encoding)] = "utf-8",
        font_size: Annotated[int, typer.Option("--font-size", min=1, help="Font size in SVG units")] = 16,
        background: Annotated[str, typer.Option("--background", "-b", help="Canvas color (#RRGGBB)", callback=_check_color)] = DEFAULT_BG_HEX,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log parsing details to stderr")] = False,
    ) -> None:
        """Convert SOURCE (ANSI text) to DEST (SVG)."""
        from ansi_svg.io.convert import convert as convert_file

        _configure_logging(verbose, err_console)

        try:
            convert_file(
                source,
                dest,
                encoding=encoding,
                color_depth=ColorDepth(depth.value),
                font_size=font_size,
                background=background,
            )
        except ConversionError as exc:
            err_console.print(f"[red]Error:[/] {escape(str(exc))}")
            raise typer.Exit(1)

        console.print(f"Successfully converted {escape(str(source))} to {escape(str(dest))}")

    return app
