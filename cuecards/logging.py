"""
Logging setup shared by the API and the CLI.

Modules get their logger with:
    from cuecards.logging import get_logger
    logger = get_logger(__name__)

configure_logging() is called once at startup (FastAPI app, CLI entry point).
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: Optional[str] = None,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stderr,
) -> None:
    """
    Configure the root logging handler.

    Safe to call more than once; a second call only changes the level.
    """
    if level is None:
        from cuecards.settings import get_settings
        level = get_settings().LOG_LEVEL

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level.upper() if isinstance(level, str) else level)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger. Configuration lives in configure_logging()."""
    return logging.getLogger(name)
