"""Process-wide logging setup.

One stdout handler on the root logger. ``LOG_FORMAT=json`` switches to one
JSON object per line for log shippers; anything passed through ``extra=``
ends up under the ``extra`` key.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Any

from accubooks.core.config import settings

PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Attributes every LogRecord carries; anything else was passed via ``extra=``
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

# Chatty libraries stay at WARNING unless the app itself runs at DEBUG
_QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "multipart")


class JsonFormatter(logging.Formatter):
    def __init__(self, service: str, env: str):
        super().__init__()
        self.service = service
        self.env = env

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "service": self.service,
            "env": self.env,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if not key.startswith("_") and key not in _RESERVED_ATTRS
        }
        if extra:
            payload["extra"] = extra
        return json.dumps(payload, default=str)


def build_formatter(log_format: str) -> logging.Formatter:
    if log_format.lower() == "json":
        return JsonFormatter(service=settings.APP_NAME, env=settings.ENV)
    return logging.Formatter(PLAIN_FORMAT)


def init_logging(level: int | None = None) -> None:
    """Install the stdout handler once; later calls are no-ops."""
    root = logging.getLogger()
    if root.handlers:
        return
    effective_level = level or getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(settings.LOG_FORMAT))
    root.setLevel(effective_level)
    root.addHandler(handler)
    if effective_level > logging.DEBUG:
        for name in _QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
