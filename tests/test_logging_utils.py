"""Tests for the stdout logging setup."""

import json
import logging
import sys

from behaviour_insights.config import InsightConfig
from behaviour_insights.logging_utils import PLAIN_FORMAT, JsonFormatter, get_logger


def _record(msg="Built report for %d transactions", args=(3,)):
    return logging.LogRecord("behaviour_insights.test", logging.INFO, __file__, 1, msg, args, None)


class TestJsonFormatter:
    """Each record is one JSON object per line."""

    def test_fields(self):
        payload = json.loads(JsonFormatter().format(_record()))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "behaviour_insights.test"
        assert payload["message"] == "Built report for 3 transactions"
        assert payload["time"]
        assert "exc_info" not in payload

    def test_exception_text(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
        payload = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in payload["exc_info"]

    def test_non_ascii_kept(self):
        line = JsonFormatter().format(_record("Spent %s", ("₹50.00",)))
        assert "₹50.00" in line


class TestGetLogger:
    """Level and format come from InsightConfig."""

    def test_plain_debug_logger(self):
        logger = get_logger("behaviour_insights.tests.plain", InsightConfig(json_logs=False, log_level="DEBUG"))
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        (handler,) = logger.handlers
        assert not isinstance(handler.formatter, JsonFormatter)
        assert handler.formatter._fmt == PLAIN_FORMAT

    def test_json_by_default(self):
        logger = get_logger("behaviour_insights.tests.json")
        assert logger.level == logging.INFO
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)

    def test_handler_installed_once(self):
        name = "behaviour_insights.tests.once"
        first = get_logger(name, InsightConfig(log_level="WARNING"))
        second = get_logger(name, InsightConfig(log_level="DEBUG"))
        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.WARNING
