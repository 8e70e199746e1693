from datetime import datetime

import pytest

from behaviour_insights.config import InsightConfig
from behaviour_insights.feed import build_feed, parse_transactions


@pytest.fixture
def config():
    return InsightConfig(json_logs=False)


@pytest.fixture
def now():
    # Day 10 of a 30-day month
    return datetime(2024, 4, 10, 12, 0)


@pytest.fixture
def make_feed():
    def _make(records):
        accepted, _ = parse_transactions(records)
        return build_feed(accepted)
    return _make
