"""Centralized logging configuration.

Library modules log through ``logging.getLogger(__name__)``; the CLI and the
API factory call :func:`setup_logging` once to route records through rich.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(level: str = "INFO", console: Optional[Console] = None) -> None:
    """
    Configure the root logger with a rich handler.

    Args:
        level: Minimum log level name
        console: Console to render to (stderr by default)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Replace handlers installed by an earlier call
    for handler in list(root_logger.handlers):
        if isinstance(handler, RichHandler):
            root_logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="[%X]"))
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
