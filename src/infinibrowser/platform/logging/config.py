"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Expose the package logger and an opt-in helper that attaches Rich output.
Why: Keep handler formatting separate from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import RequestRichHandler

LOGGER_NAME: Final[str] = "infinibrowser"


def _clear_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def reset_logger() -> logging.Logger:
    """Restore the import-time state: a silent logger that propagates to the host."""

    logger = logging.getLogger(LOGGER_NAME)
    _clear_handlers(logger)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logger.addHandler(logging.NullHandler())
    return logger


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Attach Rich console output, and optionally a rotating log file.

    Nothing is printed until an application calls this. The configured
    logger stops propagating so records are not emitted twice when the
    host also configures the root logger.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    _clear_handlers(logger)

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = RequestRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


logger: Final[logging.Logger] = reset_logger()


__all__ = ["LOGGER_NAME", "logger", "reset_logger", "setup_logger"]
