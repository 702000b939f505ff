"""
cinex.logging - Centralized logging configuration.

The package logs under the ``cinex`` logger. Decode diagnostics are
returned to the caller rather than logged as warnings; the logger carries
progress detail (DEBUG) and genuine failures.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("cinex")


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the cinex package.

    Log records go to stderr through Rich so they never interleave with
    command output on stdout. Calling this again only changes the level.

    Args:
        verbose: If True, enable DEBUG level logging; otherwise WARNING level
    """
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if any(isinstance(h, RichHandler) for h in logger.handlers):
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
