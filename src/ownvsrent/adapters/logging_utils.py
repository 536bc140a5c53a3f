# src/ownvsrent/adapters/logging_utils.py
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .config import config


class JsonLogFormatter(logging.Formatter):
    """
    Render a record as a single JSON line.

    Structured fields go in `extra={"context": {...}}` and are merged at the
    top level, e.g. logger.warning("scenario rejected", extra={"context": {"fields": [...]}}).
    """

    def _base(self, record: logging.LogRecord) -> dict[str, Any]:
        return {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "env": config.ENV,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

    def format(self, record: logging.LogRecord) -> str:
        payload = self._base(record)
        context = getattr(record, "context", None)
        if isinstance(context, dict):
            payload.update({k: v for k, v in context.items() if k not in payload})
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        # break-even may be None, frame values may be numpy scalars
        return json.dumps(payload, default=str)


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(JsonLogFormatter())
    logger.addHandler(stream)
    logger.setLevel((level or config.LOG_LEVEL).upper())
    logger.propagate = False
    return logger
