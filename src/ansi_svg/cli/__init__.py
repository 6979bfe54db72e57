"""Command-line interface for ansi-svg."""

from ansi_svg.cli.app import create_app
from ansi_svg.cli.main import main

__all__ = ["create_app", "main"]
