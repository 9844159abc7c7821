from __future__ import annotations

"""Structured JSON logging for the subtitle builder.

Logs are emitted as single-line JSON objects carrying the service name and an
event name. ``Path`` values are rendered as plain strings.
"""

import json
import logging
import os
from pathlib import PurePath
from typing import Any

from shared.config import settings


SERVICE_NAME = "voice_srt"

# Configure root logger for JSON output. Only the JSON message body is printed.
_LEVEL = getattr(logging, os.getenv("LOG_LEVEL", settings.LOG_LEVEL).upper(), logging.INFO)
logging.basicConfig(level=_LEVEL, format="%(message)s")


def _plain(value: Any) -> Any:
    """Return ``value`` in a form ``json.dumps`` accepts."""
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def _log(level: int, event: str, **fields: object) -> None:
    data: dict[str, Any] = {"service": SERVICE_NAME, "event": event}
    for key, value in fields.items():
        data[key] = _plain(value)
    logging.log(level, json.dumps(data, ensure_ascii=False))


def log_info(event: str, **fields: object) -> None:
    """Emit an informational JSON log line."""
    _log(logging.INFO, event, **fields)


def log_warn(event: str, **fields: object) -> None:
    """Emit a warning-level JSON log line."""
    _log(logging.WARNING, event, **fields)


def log_error(event: str, **fields: object) -> None:
    """Emit an error JSON log line."""
    _log(logging.ERROR, event, **fields)


def log_debug(event: str, **fields: object) -> None:
    """Emit a debug-level JSON log line."""
    _log(logging.DEBUG, event, **fields)


__all__ = ["log_info", "log_warn", "log_error", "log_debug", "SERVICE_NAME"]
