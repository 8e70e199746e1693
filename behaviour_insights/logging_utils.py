"""
Logging setup for the insight engine and its HTTP adapter.

Everything logs under the ``behaviour_insights`` namespace to stdout, as one
JSON object per line or as plain text. ``InsightConfig`` picks the level and
the format. Engine modules log through child loggers
(``logging.getLogger(__name__)``), which reach the handler installed here.
"""

from __future__ import annotations

import json
import logging
import sys
from logging import Logger
from typing import Optional

from .config import InsightConfig

ROOT_LOGGER = "behaviour_insights"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def get_logger(name: str = ROOT_LOGGER, config: Optional[InsightConfig] = None) -> Logger:
    """Return ``name``, installing the configured stdout handler the first time."""
    config = config or InsightConfig()
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(config.log_level)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonFormatter() if config.json_logs else logging.Formatter(PLAIN_FORMAT))

    logger.addHandler(handler)
    logger.propagate = False
    return logger
