"""Structured Logging — JSON lines carrying the acting user and the entities a log line is about.

Invariants:
    - Every line has timestamp, level, logger and message
    - Domain ids (user_id, target_user_id, message_id, photo_id, resource_id) and request
      fields (path, error_code, total_count) appear only when set via `extra=`
    - setup_logging() is idempotent: calling it again replaces its handler

Design Decisions:
    - stdlib logging with a custom formatter, no logging dependency
    - SQLAlchemy engine logs get their own level so DATABASE_ECHO stays opt-in noise
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "user_id", "target_user_id", "message_id", "photo_id", "resource_id",
    "error_code", "path", "total_count",
)

_HANDLER_NAME = "dating-api"


def _extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines for local development, extras appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _extras(record)
        if extras:
            line += " " + " ".join(f"{k}={v}" for k, v in extras.items())
        return line


def setup_logging(
    level: str = "INFO", fmt: str = "json", sql_level: str = "WARNING",
) -> logging.Handler:
    """Install the application handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("sqlalchemy.engine").setLevel(
        getattr(logging, sql_level.upper(), logging.WARNING),
    )
    return handler
