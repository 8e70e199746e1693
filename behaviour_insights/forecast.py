from datetime import datetime

import pandas as pd

from .config import InsightConfig
from .formatting import DEFAULT_CONFIG, format_currency
from .models import BudgetSummary, Forecast


def forecast_month_end(
    summary: BudgetSummary,
    now: datetime,
    config: InsightConfig = DEFAULT_CONFIG,
) -> Forecast:
    """Extrapolate month-to-date spend to month end at the current daily burn rate."""

    day_of_month = max(now.day, 1)
    days_in_month = int(pd.Timestamp(now).days_in_month)

    daily_burn = summary.monthly_expenses / day_of_month if summary.monthly_expenses else 0.0
    projected_spend = daily_burn * days_in_month

    budget = summary.monthly_budget
    if budget:
        overspend = max(0.0, projected_spend - budget)
        fill = projected_spend / budget * 100
        if overspend > 0:
            alert = f"On track to overspend by {format_currency(overspend, config)}."
        else:
            alert = "Spending is within your monthly budget."
    else:
        overspend = None
        fill = summary.monthly_expenses / max(summary.monthly_income or 1, 1) * 100
        alert = "Set a monthly budget to unlock alerts."

    return Forecast(
        daily_burn=float(daily_burn),
        projected_spend=float(projected_spend),
        overspend=overspend,
        day_of_month=day_of_month,
        days_in_month=days_in_month,
        fill_percent=float(min(max(fill, 0.0), 100.0)),
        alert=alert,
    )
