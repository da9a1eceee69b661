"""Logging for Registrar.

The ``registrar`` logger tree and the ``uvicorn`` server logger share one
rotating log file and, optionally, the console. Every handler masks student
email addresses and passport numbers before a record is written.
"""

from __future__ import annotations

import logging
import os
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "registrar.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "registrar"
SERVER_LOGGER = "uvicorn"

_EMAIL_PATTERN = re.compile(r"[\w.+-]+@[\w-]+(\.[\w-]+)+")
_PASSPORT_PATTERN = re.compile(r"\b[A-Z][0-9]{7}\b")


def sanitize_for_log(text: str) -> str:
    """Replace email addresses with [EMAIL] and passport numbers with [PASSPORT]."""
    text = _EMAIL_PATTERN.sub("[EMAIL]", text)
    return _PASSPORT_PATTERN.sub("[PASSPORT]", text)


class PersonalDataFilter(logging.Filter):
    """Masks student personal data in each record's rendered message."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = sanitize_for_log(record.getMessage())
        record.args = None
        return True


def _build_handlers(
    log_path: Path,
    level: int,
    max_bytes: int,
    backup_count: int,
    console: bool,
) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(PersonalDataFilter())
    return handlers


def _attach(logger: logging.Logger, handlers: list[logging.Handler], level: int) -> None:
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Configure the registrar and uvicorn loggers.

    Calling it again replaces the previous handlers.

    Args:
        log_dir: Log directory, created if missing. Falls back to
            REGISTRAR_LOG_DIR, then "logs".
        log_file: File name inside log_dir.
        max_bytes: Size at which the file is rotated.
        backup_count: Rotated files kept.
        level: Level name. Falls back to REGISTRAR_LOG_LEVEL, then INFO.
            Unknown names mean INFO.
        console: Also write to stderr.

    Returns:
        The ``registrar`` logger.
    """
    log_dir = Path(log_dir or os.environ.get("REGISTRAR_LOG_DIR", DEFAULT_LOG_DIR))
    log_dir.mkdir(parents=True, exist_ok=True)
    level = level or os.environ.get("REGISTRAR_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    log_path = log_dir / log_file
    handlers = _build_handlers(log_path, log_level, max_bytes, backup_count, console)

    logger = logging.getLogger(ROOT_LOGGER)
    _attach(logger, handlers, log_level)
    _attach(logging.getLogger(SERVER_LOGGER), handlers, log_level)

    logger.info("Registrar logging initialized (level=%s, file=%s)", level, log_path)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a component, under the ``registrar.`` prefix."""
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
