from datetime import datetime
from typing import Iterable, List, Mapping, Optional

from pydantic import ValidationError

from .config import InsightConfig, load_config
from .feed import build_feed, parse_transactions
from .forecast import forecast_month_end
from .health import classify_pulse
from .logging_utils import get_logger
from .models import BudgetSummary, CategorySpend, InsightReport, SavingsGoal
from .patterns import detect_patterns
from .recommendations import (
    opportunity_items,
    priority_action,
    progress_trackers,
    scenarios,
    snapshot_fill,
    top_category,
    vital_signs,
)
from .tagging import auto_tag, confidence_score


def _validate_each(model, records, logger) -> List:
    """Validate a list of records, skipping (and logging) malformed entries."""
    valid = []
    for record in records or []:
        if isinstance(record, model):
            valid.append(record)
            continue
        try:
            valid.append(model.model_validate(record))
        except ValidationError as exc:
            logger.debug("Skipping malformed %s: %s", model.__name__, exc.errors()[0]["msg"])
    return valid


def _summary(summary, logger) -> BudgetSummary:
    if isinstance(summary, BudgetSummary):
        return summary
    try:
        return BudgetSummary.model_validate(summary or {})
    except ValidationError as exc:
        logger.warning("Ignoring malformed budget summary: %s", exc.errors()[0]["msg"])
        return BudgetSummary()


def build_insight_report(
    transactions: Iterable,
    summary: Optional[Mapping] = None,
    savings_goals: Optional[Iterable] = None,
    category_spending: Optional[Iterable] = None,
    now: Optional[datetime] = None,
    config: Optional[InsightConfig] = None,
) -> InsightReport:
    """
    Turn a transaction history and a budget/goal snapshot into an InsightReport.

    ``now`` is sampled once (when not injected) and shared by every stage, so
    a call straddling midnight cannot mix two different days. Malformed
    records never raise: they are dropped and, for transactions, their ids
    are listed in ``excluded_transaction_ids``.
    """

    config = config or load_config()
    logger = get_logger(config=config)
    zone = config.zone
    if config.timezone and zone is None:
        logger.warning("Unknown timezone %r; using system local time.", config.timezone)
    if now is None:
        now = datetime.now(zone) if zone else datetime.now()

    accepted, excluded = parse_transactions(transactions)
    budget = _summary(summary, logger)
    goals = _validate_each(SavingsGoal, savings_goals, logger)
    categories = _validate_each(CategorySpend, category_spending, logger)

    feed = build_feed(accepted, now.tzinfo or zone)

    highlights = detect_patterns(feed, budget, now, config)
    forecast = forecast_month_end(budget, now, config)
    score = confidence_score(feed)
    tagged = auto_tag(feed, score, config)

    pulse = classify_pulse(budget.budget_used_percentage)

    top = top_category(categories)
    report = InsightReport(
        generated_at=now,
        vital_signs=vital_signs(budget, forecast, goals, config),
        snapshot_fill_percent=snapshot_fill(budget, goals),
        pattern_highlights=highlights,
        auto_tagged=tagged,
        confidence_score=score,
        pulse_status=pulse.status,
        pulse_message=pulse.message,
        pulse_tone=pulse.tone,
        forecast=forecast,
        opportunity_items=opportunity_items(top, config),
        priority_action=priority_action(top, config),
        scenarios=scenarios(forecast, top, config),
        progress_trackers=progress_trackers(goals, config),
        excluded_transaction_ids=excluded,
    )

    if excluded:
        logger.debug("Excluded %d malformed transactions from analysis.", len(excluded))
    logger.debug(
        "Built insight report: %d transactions, pulse=%s", len(feed), pulse.status.value
    )
    return report


def build_report_from_dashboard(
    dashboard: Optional[Mapping],
    transactions: Iterable,
    now: Optional[datetime] = None,
    config: Optional[InsightConfig] = None,
) -> InsightReport:
    """Accept the dashboard summary payload (``stats``, ``savingsGoals``, ``categorySpending``)."""

    dashboard = dashboard or {}
    return build_insight_report(
        transactions,
        summary=dashboard.get("stats"),
        savings_goals=dashboard.get("savingsGoals"),
        category_spending=dashboard.get("categorySpending"),
        now=now,
        config=config,
    )
