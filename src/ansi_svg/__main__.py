"""Allow ``python -m ansi_svg``."""

from ansi_svg.cli.main import main

main()
