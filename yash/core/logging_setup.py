"""Logging configuration helpers.

Updates:
    v0.1.0 - 2025-11-09 - Structured JSON logging scoped to the ``yash`` logger.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any

LOGGER_NAME = "yash"
LOG_LEVEL_ENV = "YASH_LOG_LEVEL"

_configured = False
_handler: logging.Handler | None = None

_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)


class JsonFormatter(logging.Formatter):
    """Formatter that emits one JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        payload.update(_extract_extra_fields(record))

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(config: dict[str, Any] | None = None) -> None:
    """Attach a JSON stream handler to the ``yash`` logger.

    Calling it again is a no-op. The application's root logger is left alone.

    Args:
        config (dict[str, Any] | None): Optional settings. Supports ``level``;
            falls back to ``YASH_LOG_LEVEL`` and then ``WARNING``.
    """

    global _configured, _handler
    if _configured:
        return

    config = config or {}
    level_name = str(
        config.get("level") or os.environ.get(LOG_LEVEL_ENV) or "WARNING"
    ).upper()
    level = getattr(logging, level_name, logging.WARNING)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.addHandler(handler)

    _handler = handler
    _configured = True


def _extract_extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if not key.startswith("_") and key not in _RESERVED_ATTRS
    }


def set_runtime_level(level_name: str) -> None:
    """Adjust the ``yash`` logging level at runtime.

    Args:
        level_name (str): Level name such as ``DEBUG`` or ``INFO``.

    Raises:
        ValueError: If the level name is not recognized by the logging module.
    """

    if not level_name:
        return
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {level_name}")

    logging.getLogger(LOGGER_NAME).setLevel(level)
    if _handler:
        _handler.setLevel(level)


__all__ = ["JsonFormatter", "configure_logging", "set_runtime_level"]
