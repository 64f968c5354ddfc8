# Copyright (c) 2026 Beaker Store Contributors. All Rights Reserved.

"""
Structured Logging — JSON format with series/request context.

All store loggers live under the ``beaker`` namespace, so a host can tune
or redirect them without touching its own root logger.
"""

from __future__ import annotations

import json
import logging
import sys

LOGGER_NAMESPACE = "beaker"


class StructuredFormatter(logging.Formatter):
    """JSON log formatter with series/request context."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }
        # Attach context if available
        for key in ("series", "request"):
            val = getattr(record, key, None)
            if val:
                log_entry[key] = val

        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False)


def _to_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def apply_log_level(level: str) -> None:
    """Set the level of the ``beaker`` logger tree (unknown names fall back to INFO)."""
    logging.getLogger(LOGGER_NAMESPACE).setLevel(_to_level(level))


def setup_logging(level: str = "INFO") -> None:
    """Send ``beaker`` logs to stdout as JSON lines instead of the root handlers."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(_to_level(level))
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
