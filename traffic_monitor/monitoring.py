"""Logging setup driven by ObservabilityConfig.

Components log through ``logging.getLogger(__name__)`` and attach
context with ``extra={...}``. The JSON formatter keeps those extras;
the plain formatter shows only the message.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("traffic_monitor")

# Attributes every LogRecord carries; anything else came in via ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}

# Never emitted, whatever a caller passes in ``extra``.
_REDACTED_KEYS = frozenset({"api_key", "X-Goog-Api-Key", "headers"})


def record_extras(record: logging.LogRecord) -> Dict[str, Any]:
    """Return the ``extra`` fields attached to a record."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RESERVED_ATTRS and key not in _REDACTED_KEYS
    }


class JsonFormatter(logging.Formatter):
    """One JSON object per line, extras included."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        payload.update(record_extras(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a single handler to the package logger.

    Calling this again replaces the previous handler rather than
    stacking a new one.

    Args:
        config: Optional override; defaults to the application config.

    Returns:
        The configured package logger.
    """
    config = config or get_config().observability

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(config.level.upper())
    logger.propagate = False
    return logger
