"""
Logging configuration for incomenorm.

Library modules only create loggers (`logging.getLogger(__name__)`); handlers
are installed once by the application entry point through `configure_logging`.
Output goes through Rich so log lines match the CLI's console rendering.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import AppSettings

__all__ = ["configure_logging"]


def configure_logging(settings: Optional[AppSettings] = None) -> None:
    """
    Configure the `incomenorm` logger from application settings.

    Parameters
    ----------
    settings : AppSettings, optional
        Loaded from the environment when omitted. `debug=True` forces DEBUG.

    Calling this again replaces the previously installed handler.
    """
    settings = settings or AppSettings()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)

    logger = logging.getLogger("incomenorm")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=settings.debug,
        rich_tracebacks=settings.debug,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
