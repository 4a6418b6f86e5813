"""Logging setup utilities for lightconsole.

Attaches handlers to the ``lightconsole`` logger only; loggers of other
libraries (httpx, pydantic) keep their own configuration.
"""

from __future__ import annotations

import logging
import sys

from lightconsole.config.settings import LoggingConfig


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure logging for the lightconsole application.

    Sets up the 'lightconsole' logger with the specified level, format,
    and optional file handler. Handlers from a previous call are replaced.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).
    """
    if config is None:
        config = LoggingConfig()

    app_logger = logging.getLogger("lightconsole")
    app_logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    # File handler (optional)
    if config.file:
        file_handler = logging.FileHandler(config.file)
        file_handler.setFormatter(formatter)
        app_logger.addHandler(file_handler)

    app_logger.debug("Logging initialized at %s level", config.level)
