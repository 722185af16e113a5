"""Logging for the CLI.

Core modules log through `logging.getLogger(__name__)`; this installs a Rich
handler on stderr so log records never mix with the menu output on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING", *, verbose: bool = False) -> None:
    effective = "DEBUG" if verbose else level.upper()
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=effective,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
