"""
Logging configuration for the TrackGuide parser.

Library modules only create loggers with logging.getLogger(__name__) and
emit DEBUG records. Handlers are installed by applications (the CLI) via
setup_logging().
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from trackguide.config import get_settings


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Configure the root logger with a Rich console handler on stderr.

    Args:
        log_level: Logging level name (defaults to settings)
    """
    settings = get_settings()
    log_level = (log_level or settings.log_level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=settings.dev_mode,
    )
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).debug("Logging configured at %s", log_level)
