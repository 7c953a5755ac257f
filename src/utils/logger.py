"""Logging setup for Dinezzy Recipe Service.

Two output formats, picked by environment:
- LOG_TYPE: text (colored, one line per record) or json (one object per line). Default: text
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR. Default: INFO

Analytics events are logged with `extra={"event": ..., "session_id": ...}`;
both formatters surface those fields so pipeline runs can be followed in logs.
"""

import json
import logging
import os
import sys
from typing import Any, Optional


# Record attributes copied into JSON output when a caller passes them via `extra=`
EXTRA_FIELDS = ("event", "session_id", "flow")

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = ("google.genai", "google_genai", "httpx")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log shipping."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, ensure_ascii=False)


class RichTextFormatter(logging.Formatter):
    """Colored single-line output for local development.

    Records carrying an analytics event are tagged with it, e.g.
    `[fallback_used] Analytics: ...`.
    """

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    ICONS = {
        "DEBUG": "🔍",
        "INFO": "ℹ️",
        "WARNING": "⚠️",
        "ERROR": "❌",
        "CRITICAL": "🔥",
    }

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        color = self.COLORS.get(level, self.COLORS["RESET"])
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")

        event = getattr(record, "event", None)
        tag = f"[{event}] " if event else ""
        line = (
            f"{color}{self.ICONS.get(level, '')} {timestamp} {level:<8} "
            f"{record.name:<12} {tag}{record.getMessage()}{self.COLORS['RESET']}"
        )

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str, level: Optional[str] = None, log_type: Optional[str] = None) -> logging.Logger:
    """Return a logger writing to stdout in the configured format.

    Configuration happens once per name; later calls return the same logger
    untouched.

    Args:
        name: Logger name.
        level: Overrides LOG_LEVEL.
        log_type: Overrides LOG_TYPE ("text" or "json").

    Returns:
        Configured logger instance.
    """
    instance = logging.getLogger(name)
    if instance.handlers:
        return instance

    resolved_level = _resolve_level(level)
    use_json = (log_type or os.getenv("LOG_TYPE", "text")).lower() == "json"

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(resolved_level)
    handler.setFormatter(JSONFormatter() if use_json else RichTextFormatter())

    instance.setLevel(resolved_level)
    instance.addHandler(handler)
    instance.propagate = False
    return instance


def quiet_library_loggers(level: int = logging.WARNING) -> None:
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level)


# Service-wide logger
logger = get_logger("dinezzy")
quiet_library_loggers()
