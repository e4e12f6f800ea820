"""
JSON logging for feature flag evaluation.

Each record becomes one JSON line. Records from the providers carry the
value source (``cookie`` / ``userAgent``) and the flag being evaluated, so
"why was betaUI off for this request?" can be answered by filtering logs.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

# Attributes passed through ``extra=`` that become top-level JSON fields
CONTEXT_FIELDS = ("provider", "flag")


class JSONFormatter(logging.Formatter):
    """
    Render log records as single-line JSON.

    Example:
        >>> logger.warning(
        ...     "Failed to extract cookie value for betaUI: boom",
        ...     extra={"provider": "cookie", "flag": "betaUI"},
        ... )
        {"timestamp": "...Z", "level": "WARNING", ..., "provider": "cookie", "flag": "betaUI"}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(UTC).replace(tzinfo=None).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def setup_logging(level: str = "INFO", stream: TextIO | None = None):
    """
    Route all logging through one JSON handler.

    Called by ``create_app``; level usually comes from ``LOG_LEVEL``.

    Args:
        level: Log level name, case-insensitive (DEBUG shows every flag check)
        stream: Output stream (stdout if None)
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JSONFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # TestClient and uvicorn pull these in
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(f"Feature flag logging configured at {level.upper()}")
