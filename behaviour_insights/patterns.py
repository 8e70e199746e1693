from datetime import datetime
from typing import List

import pandas as pd

from .config import InsightConfig
from .feed import dated, expenses
from .formatting import DEFAULT_CONFIG, format_currency
from .models import BudgetSummary

NO_PATTERNS_MESSAGE = "No spending patterns yet. Add a few transactions to see AI insights."
MAX_HIGHLIGHTS = 3
MIN_REPEATS = 2


def merchant_day_signatures(feed: pd.DataFrame) -> pd.DataFrame:
    """Total and count of dated expenses per (Merchant, Weekday), in first-seen order."""

    spend = dated(expenses(feed))
    if spend.empty:
        return pd.DataFrame(columns=["Merchant", "Weekday", "total", "count"])

    return (
        spend.groupby(["Merchant", "Weekday"], sort=False)["Amount"]
        .agg(total="sum", count="count")
        .reset_index()
    )


def _merchant_pattern(feed, config):
    signatures = merchant_day_signatures(feed)
    repeats = signatures[signatures["count"] >= MIN_REPEATS]
    if repeats.empty:
        return None

    # idxmax keeps the first-seen signature on ties
    top = repeats.loc[repeats["count"].astype(int).idxmax()]
    avg = top["total"] / top["count"]
    return f"You often spend {format_currency(avg, config)} at {top['Merchant']} on {top['Weekday']}s."


def _peak_day(feed, config):
    spend = dated(expenses(feed))
    if spend.empty:
        return None

    day_totals = spend.groupby("Weekday", sort=False)["Amount"].sum()
    top_day = day_totals.idxmax()
    return f"Your highest spending day is {top_day} ({format_currency(day_totals[top_day], config)})."


def _daily_average(summary, now, config):
    if not summary.monthly_expenses:
        return None
    daily_avg = summary.monthly_expenses / max(now.day, 1)
    return f"Average daily spend this month: {format_currency(daily_avg, config)}."


def detect_patterns(
    feed: pd.DataFrame,
    summary: BudgetSummary,
    now: datetime,
    config: InsightConfig = DEFAULT_CONFIG,
) -> List[str]:
    """
    Describe recurring and notable spending behaviour.

    Highlights keep a fixed order (merchant pattern, peak day, daily average)
    and any stage with nothing to say is skipped.
    """

    if expenses(feed).empty:
        return [NO_PATTERNS_MESSAGE]

    highlights = [
        _merchant_pattern(feed, config),
        _peak_day(feed, config),
        _daily_average(summary, now, config),
    ]
    return [h for h in highlights if h][:MAX_HIGHLIGHTS]
