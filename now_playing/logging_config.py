"""Logging setup for the Now Playing API.

Records go to two places: a rotating JSON file (``now_playing.log``, 10MB x 5)
for machines and stdout for people. Context travels in ``extra`` fields, and
every call site sets an ``event_type``.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger.json import JsonFormatter

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "now_playing.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Install the file and console handlers on the root logger.

    Existing root handlers are replaced, so calling this twice is safe.

    Args:
        log_level: Console threshold and root level; the JSON file always gets DEBUG and up
        log_dir: Where the JSON log lives (created if needed)
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    file_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
    )
    file_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    # Spotify calls are already logged by the client's event hooks
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **extra_fields: Any) -> None:
    """Log ``message`` at ``level`` with ``extra_fields`` attached to the record.

    The JSON formatter turns each extra field into a top-level key. Field names
    must not clash with LogRecord attributes (``message``, ``filename``, ...).
    """
    getattr(logger, level.lower())(message, extra=extra_fields)
