"""Input snapshots and the insight report, as immutable pydantic models.

Field names are snake_case in Python and camelCase on the wire, so the
models accept the dashboard collaborator's JSON as-is.
"""

from __future__ import annotations

import math
from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

RecordId = Union[str, int, None]
Trend = Literal["up", "down"]


def _to_number(value, default):
    """Coerce loosely-typed numeric input, falling back to ``default``."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str) and not value.strip():
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


class _Model(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        # Numeric ids, names and descriptions are shown as text rather than rejected
        coerce_numbers_to_str=True,
    )


# --- Inputs ---

class Transaction(_Model):
    id: RecordId = None
    type: Optional[str] = None
    amount: float = Field(
        0.0, ge=0, allow_inf_nan=False, description="Non-negative finite amount; direction comes from type"
    )
    category: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    payment_method: Optional[str] = None

    @field_validator("amount", mode="before")
    @classmethod
    def _missing_amount(cls, value):
        # Absent amounts count as zero; anything else present must parse.
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0.0
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        try:
            parsed = pd.to_datetime(value)
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValueError(f"unparseable date: {value!r}") from exc
        if parsed is pd.NaT:
            return None
        if not isinstance(parsed, pd.Timestamp):
            raise ValueError(f"unparseable date: {value!r}")
        return parsed.to_pydatetime()


class BudgetSummary(_Model):
    monthly_income: float = 0.0
    monthly_expenses: float = 0.0
    expense_trend: float = 0.0
    monthly_budget: Optional[float] = None
    budget_used_percentage: Optional[float] = None
    total_balance: Optional[float] = None
    budget_left: Optional[float] = None

    @field_validator("monthly_income", "monthly_expenses", "expense_trend", mode="before")
    @classmethod
    def _zero_default(cls, value):
        return _to_number(value, 0.0)

    @field_validator(
        "monthly_budget", "budget_used_percentage", "total_balance", "budget_left", mode="before"
    )
    @classmethod
    def _optional_number(cls, value):
        return _to_number(value, None)


class SavingsGoal(_Model):
    id: RecordId = None
    name: Optional[str] = ""
    target_amount: float = 0.0
    current_amount: float = 0.0
    monthly_contribution: float = 0.0
    progress: Optional[float] = None

    @field_validator("target_amount", "current_amount", "monthly_contribution", mode="before")
    @classmethod
    def _zero_default(cls, value):
        return _to_number(value, 0.0)

    @field_validator("progress", mode="before")
    @classmethod
    def _optional_number(cls, value):
        return _to_number(value, None)


class CategorySpend(_Model):
    name: str
    amount: float = 0.0

    @field_validator("amount", mode="before")
    @classmethod
    def _zero_default(cls, value):
        return _to_number(value, 0.0)


# --- Outputs ---

class PulseStatus(str, Enum):
    HEALTHY = "Healthy"
    WATCHFUL = "Watchful"
    NEEDS_ATTENTION = "NeedsAttention"


class VitalSign(_Model):
    id: str
    label: str
    amount: float
    value: str
    delta: str
    trend: Trend


class TaggedTransaction(_Model):
    id: RecordId = None
    merchant: str
    code: str
    amount: float
    amount_formatted: str
    category: str
    tone: str
    confidence: int


class Forecast(_Model):
    daily_burn: float
    projected_spend: float
    overspend: Optional[float] = Field(None, description="None when no monthly budget is set")
    day_of_month: int
    days_in_month: int
    fill_percent: float = Field(..., ge=0, le=100)
    alert: str


class OpportunityItem(_Model):
    id: int
    label: str
    savings: float
    savings_formatted: str


class PriorityAction(_Model):
    title: str
    detail: str
    impact: str
    current_spend: float
    savings: float


class Scenario(_Model):
    id: int
    title: str
    detail: str
    tone: str
    amount: Optional[float] = None


class ProgressTracker(_Model):
    id: RecordId = None
    label: str
    impact: str
    target_amount: float
    progress: int = Field(..., ge=0, le=100)


class InsightReport(_Model):
    generated_at: datetime
    vital_signs: List[VitalSign]
    snapshot_fill_percent: float = Field(0.0, ge=0, le=100, description="Available vs committed bar width")
    pattern_highlights: List[str]
    auto_tagged: List[TaggedTransaction]
    confidence_score: Optional[int] = Field(None, ge=0, le=100)
    pulse_status: PulseStatus
    pulse_message: str
    pulse_tone: str
    forecast: Forecast
    opportunity_items: List[OpportunityItem]
    priority_action: Optional[PriorityAction] = None
    scenarios: List[Scenario]
    progress_trackers: List[ProgressTracker]
    excluded_transaction_ids: List[RecordId] = Field(default_factory=list)
