"""Logging setup for the server and the CLI."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from spellsp.config import LogLevel, settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_DETAILED = (
    "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
)

# Chatty at DEBUG/INFO: pygls logs every JSON-RPC message, httpx every request
NOISY_LOGGERS = ("pygls", "httpx", "httpcore")


def setup_logging(level: LogLevel | None = None) -> None:
    """Configure the root logger from settings.

    Console records go to stderr since stdout carries the language server
    stream. A rotating log file is added when LOG_FILE_ENABLED is set.
    ``level`` overrides LOG_LEVEL.
    """
    root_logger = logging.getLogger()
    root_level = getattr(logging, level or settings.log_level)
    root_logger.setLevel(root_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    if settings.log_file_enabled:
        log_path = settings.resolved_log_file_path
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=log_path,
            maxBytes=settings.log_file_max_bytes,
            backupCount=settings.log_file_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED))
        root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(root_level, logging.WARNING))
