"""Logger bootstrap for the ``audiocc`` logger.

Where: platform/logging/config.py
What: Attach the Rich processing console and an optional rotating log file.
Why: Workers log from several threads, so one configured logger serves the whole run.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from audiocc.config.paths import default_log_file
from audiocc.platform.filesystem import ensure_directory

from .handlers import ProcessingRichHandler

LOGGER_NAME: Final[str] = "audiocc"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

_FILE_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s [%(threadName)s] %(message)s"
_MAX_BYTES: Final[int] = 10 * 1024 * 1024
_BACKUPS: Final[int] = 5


def _rotating_file(log_file: Path, level: int) -> RotatingFileHandler:
    path = Path(log_file).expanduser().resolve()
    _ = ensure_directory(path.parent)
    handler = RotatingFileHandler(path, maxBytes=_MAX_BYTES, backupCount=_BACKUPS, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the ``audiocc`` logger, replacing any earlier handlers.

    Args:
        log_file: Rotating log file; None keeps output on the console only.
        console_level: Threshold for the Rich console.
        file_level: Threshold for the log file.
    """

    configured = logging.getLogger(LOGGER_NAME)
    configured.setLevel(logging.DEBUG)
    for handler in list(configured.handlers):
        handler.close()
        configured.removeHandler(handler)

    console_handler = ProcessingRichHandler(console=Console(soft_wrap=True))
    console_handler.setLevel(console_level)
    configured.addHandler(console_handler)
    if log_file is not None:
        configured.addHandler(_rotating_file(log_file, file_level))
    return configured


logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "logger", "setup_logger"]
