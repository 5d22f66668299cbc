"""Entry-point for launching the CLI application."""
from __future__ import annotations

import logging

from .presentation.cli.app import main as cli_main
from .presentation.cli.render import debug_enabled


def _configure_logging() -> None:
    level = logging.DEBUG if debug_enabled() else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")


def main() -> None:
    """Run the CLI presentation layer."""
    _configure_logging()
    cli_main()


if __name__ == "__main__":
    main()
