"""
Recommendations built on top of the forecast and the category breakdown.

Every suggestion uses the same flat heuristic: trimming the biggest spend
category by ``OPPORTUNITY_RATE``. With no category breakdown the outputs fall
back to empty lists, ``None`` or a "set a budget" prompt.
"""

from typing import List, Optional, Sequence

from .config import InsightConfig
from .formatting import DEFAULT_CONFIG, format_currency, format_trend_delta, round_half_up
from .models import (
    BudgetSummary,
    CategorySpend,
    Forecast,
    OpportunityItem,
    PriorityAction,
    ProgressTracker,
    SavingsGoal,
    Scenario,
    VitalSign,
)

OPPORTUNITY_RATE = 0.10
MAX_TRACKERS = 3


def top_category(category_spending: Sequence[CategorySpend]) -> Optional[CategorySpend]:
    """The breakdown arrives sorted by amount, so the first entry is the largest."""
    return category_spending[0] if category_spending else None


def opportunity_items(top: Optional[CategorySpend], config: InsightConfig = DEFAULT_CONFIG) -> List[OpportunityItem]:
    if top is None:
        return []
    savings = top.amount * OPPORTUNITY_RATE
    return [
        OpportunityItem(
            id=1,
            label=f"Cut {top.name} by {OPPORTUNITY_RATE:.0%}",
            savings=savings,
            savings_formatted=format_currency(savings, config),
        )
    ]


def priority_action(top: Optional[CategorySpend], config: InsightConfig = DEFAULT_CONFIG) -> Optional[PriorityAction]:
    if top is None:
        return None
    savings = top.amount * OPPORTUNITY_RATE
    return PriorityAction(
        title=f"Reduce {top.name} spend",
        detail=f"You are already at {format_currency(top.amount, config)} in {top.name} this month.",
        impact=f"Save {format_currency(savings, config)}",
        current_spend=top.amount,
        savings=savings,
    )


def scenarios(
    forecast: Forecast,
    top: Optional[CategorySpend],
    config: InsightConfig = DEFAULT_CONFIG,
) -> List[Scenario]:
    """Exactly two what-if cards: staying the course, then adjusting."""

    keep_going = Scenario(
        id=1,
        title="If you continue",
        detail=f"Spending hits {format_currency(forecast.projected_spend, config)} by month-end.",
        tone="scenario-dark",
        amount=forecast.projected_spend,
    )

    if top is not None:
        savings = top.amount * OPPORTUNITY_RATE
        adjust = Scenario(
            id=2,
            title=f"If you adjust {top.name}",
            detail=f"Save about {format_currency(savings, config)} this month.",
            tone="scenario-success",
            amount=savings,
        )
    else:
        adjust = Scenario(
            id=2,
            title="If you set a budget",
            detail="Create a budget to unlock projections.",
            tone="scenario-success",
        )

    return [keep_going, adjust]


def goal_progress(goal: SavingsGoal) -> int:
    if goal.progress is not None:
        progress = round_half_up(goal.progress)
    elif goal.target_amount:
        progress = round_half_up(goal.current_amount / goal.target_amount * 100)
    else:
        progress = 0
    return min(100, max(0, progress))


def progress_trackers(goals: Sequence[SavingsGoal], config: InsightConfig = DEFAULT_CONFIG) -> List[ProgressTracker]:
    return [
        ProgressTracker(
            id=goal.id,
            label=goal.name or "",
            impact=f"Target {format_currency(goal.target_amount, config)}",
            target_amount=goal.target_amount,
            progress=goal_progress(goal),
        )
        for goal in goals[:MAX_TRACKERS]
    ]


def available_now(summary: BudgetSummary) -> float:
    if summary.budget_left is not None:
        return summary.budget_left
    if summary.total_balance is not None:
        return summary.total_balance
    return 0.0


def vital_signs(
    summary: BudgetSummary,
    forecast: Forecast,
    goals: Sequence[SavingsGoal],
    config: InsightConfig = DEFAULT_CONFIG,
) -> List[VitalSign]:
    """The four headline cards, always in the same order."""

    trend_delta = format_trend_delta(summary.expense_trend)
    spending_up = summary.expense_trend > 0
    income_covers = summary.monthly_income >= summary.monthly_expenses
    committed = sum(goal.monthly_contribution for goal in goals)
    available = available_now(summary)

    return [
        VitalSign(
            id="available",
            label="Available Now",
            amount=available,
            value=format_currency(available, config),
            delta=trend_delta,
            trend="down" if spending_up else "up",
        ),
        VitalSign(
            id="burn",
            label="Daily Burn",
            amount=forecast.daily_burn,
            value=format_currency(forecast.daily_burn, config),
            delta=trend_delta,
            trend="up" if spending_up else "down",
        ),
        VitalSign(
            id="income",
            label="Income Pulse",
            amount=summary.monthly_income,
            value=format_currency(summary.monthly_income, config),
            delta="+Healthy" if income_covers else "-Lagging",
            trend="up" if income_covers else "down",
        ),
        VitalSign(
            id="bills",
            label="Committed (30d)",
            amount=committed,
            value=format_currency(committed, config),
            delta="+Active goals" if committed else "0",
            trend="up" if committed else "down",
        ),
    ]


def snapshot_fill(summary: BudgetSummary, goals: Sequence[SavingsGoal]) -> float:
    """Share of available funds against available plus committed contributions, 0-100."""

    available = available_now(summary)
    committed = sum(goal.monthly_contribution for goal in goals)
    if available + committed <= 0:
        return 0.0
    return float(min(max(available / (available + committed) * 100, 0.0), 100.0))
