"""Logging utilities for permcore.

This module provides:
- Logging configuration from PermcoreConfig
- Safe, length-bounded previews of raw permission strings
- A formatter producing JSON or plain-text lines
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .config import LogLevel, PermcoreConfig

_RESERVED_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName",
    }
)


def safe_preview(value: Any, limit: int = 240) -> str:
    """Create a safe, length-bounded preview of a value for logging.

    Permission strings come from callers and may be arbitrarily long, so
    they are collapsed to a single line and truncated before being logged.

    Args:
        value: The value to preview (any type)
        limit: Maximum length of the preview (default: 240)

    Returns:
        A truncated single-line string representation
    """
    if value is None:
        return ""

    if isinstance(value, str):
        s = value
    elif isinstance(value, (dict, list, tuple)):
        try:
            s = json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            s = str(value)
    else:
        s = str(value)

    s = " ".join(s.split())

    if len(s) > limit:
        return s[: limit - 1] + "…"

    return s


class PermcoreFormatter(logging.Formatter):
    """Formatter emitting structured JSON or plain-text log lines.

    Extra fields passed via ``extra=`` are included (previewed) in JSON
    output and appended as ``key=value`` pairs in plain text.
    """

    def __init__(self, json_format: bool = False, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extras = {
            key: safe_preview(value)
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if self.json_format:
            log_data.update(extras)
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            log_data["level"],
            log_data["logger"],
            f": {log_data['message']}",
        ]
        parts.extend(f"{key}={value}" for key, value in extras.items())
        line = " ".join(parts)
        if "exception" in log_data:
            line = f"{line}\n{log_data['exception']}"
        return line


def setup_logging(config: Optional[PermcoreConfig] = None) -> None:
    """Configure the root logger from a PermcoreConfig.

    Args:
        config: PermcoreConfig instance (if None, loads from environment)
    """
    if config is None:
        from .config import load_config_from_env

        config = load_config_from_env()

    level_map = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
    }
    log_level = level_map.get(config.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(PermcoreFormatter(json_format=config.log_json))
    root_logger.addHandler(console_handler)


__all__ = [
    "safe_preview",
    "PermcoreFormatter",
    "setup_logging",
]
