"""
JSON logging for the Calculator project.
Every record goes to stdout as one JSON object per line.
"""

import json
import os
import sys
import logging
from datetime import datetime, timezone

LOGGER_NAME = "Calculator"


def resolve_level(value: str | None, default: int = logging.INFO) -> int:
    """Map a level name such as "debug" or "20" to a logging level, else default."""
    if not value:
        return default
    value = value.strip().upper()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value)
    return level if isinstance(level, int) else default


logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(resolve_level(os.getenv("CALCULATOR_LOG_LEVEL")))
handler = logging.StreamHandler(sys.stdout)
logger.addHandler(handler)

class JsonFormatter(logging.Formatter):
    """Render a record as JSON, carrying over any fields passed via `extra`."""

    # Attributes every LogRecord has; anything else came from `extra`
    RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
        'message', 'asctime'
    }

    def format(self, record):
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
        }
        for key, value in vars(record).items():
            if key in self.RESERVED or key.startswith('_'):
                continue
            try:
                json.dumps(value)
            except (TypeError, ValueError):
                value = str(value)
            payload[key] = value
        return json.dumps(payload)

handler.setFormatter(JsonFormatter())

def get_logger(component: str = "SYSTEM"):
    return ComponentLogger(component)

class ComponentLogger:
    def __init__(self, component):
        self.component = component
        self.logger = logging.getLogger(LOGGER_NAME)

    def _log(self, level, msg, **kwargs):
        extra = {"component": self.component}
        extra.update(kwargs)
        self.logger.log(level, msg, extra=extra)

    def debug(self, msg, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg, **kwargs):
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)
