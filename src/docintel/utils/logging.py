"""Shared logging configuration for DocIntel."""

import logging
import json
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for better parsing."""

    def format(self, record):
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(name: str = "docintel", level=None) -> logging.Logger:
    """Set up structured logging.

    Level defaults to ``settings.LOG_LEVEL``. Calling this twice for the same
    logger does not stack handlers.
    """
    if level is None:
        from ..config import settings
        level = settings.LOG_LEVEL

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)

    return logger
