"""Structured logging for the statistics engine and dashboard layer.

Records go to the console in a human-readable form and to a rotating file
as one JSON object per line. The ``habit_id`` and ``user_id`` context passed
through ``extra`` becomes top-level JSON keys, so one habit's records can be
filtered out of the file without parsing nested blocks.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, MutableMapping

from .config import BaseConfig

ROOT_LOGGER_NAME = "habitstats"
LOG_FILENAME = "habitstats.log"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5
CONTEXT_KEYS = ("habit_id", "user_id")

# Attributes every LogRecord carries; anything else arrived via ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """Format log records as JSON, promoting habit context to top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        extras = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        for key in CONTEXT_KEYS:
            if key in extras:
                payload[key] = extras.pop(key)

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            payload["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "traceback": self.formatException(record.exc_info),
            }

        if extras:
            payload["extra"] = extras

        return json.dumps(payload, default=str)


class HabitLogAdapter(logging.LoggerAdapter):
    """Logger adapter that stamps every record with a habit and user id.

    Per-call ``extra`` is merged over the bound context instead of replacing it.
    """

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def habit_logger(logger: logging.Logger, *, habit_id: int | None, user_id: int) -> HabitLogAdapter:
    """Bind ``habit_id`` and ``user_id`` to ``logger``."""
    return HabitLogAdapter(logger, {"habit_id": habit_id, "user_id": user_id})


def log_file_path(config: BaseConfig) -> Path:
    """Return the JSON log file location under ``DATA_DIR/logs``."""
    return Path(config.DATA_DIR) / "logs" / LOG_FILENAME


def _console_handler(dev_mode: bool) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO if dev_mode else logging.WARNING)
    if dev_mode:
        fmt = "[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s"
        datefmt = "%H:%M:%S"
    else:
        fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        datefmt = "%Y-%m-%d %H:%M:%S"
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    return handler


def _file_handler(path: Path) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.INFO)
    handler.setFormatter(JSONFormatter())
    return handler


def setup_logging(config: BaseConfig) -> logging.Logger:
    """Configure console and rotating JSON file logging for the package.

    Calling it again replaces the handlers of the previous call.

    Args:
        config: Application configuration with DATA_DIR and DEV_MODE

    Returns:
        The configured ``habitstats`` logger
    """
    log_file = log_file_path(config)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if config.DEV_MODE else logging.INFO)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(config.DEV_MODE))
    logger.addHandler(_file_handler(log_file))

    logger.info(
        "Logging initialized",
        extra={
            "dev_mode": config.DEV_MODE,
            "log_file": str(log_file),
            "window_days": config.STATS_WINDOW_DAYS,
            "min_weekday_samples": config.BEST_WEEKDAY_MIN_SAMPLES,
        },
    )

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``habitstats``, e.g. ``services.dashboard``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
