from typing import NamedTuple, Optional

from .models import PulseStatus


class PulseBand(NamedTuple):
    lower_bound: float
    status: PulseStatus
    tone: str
    message: str


# Scanned top-down; a value on a boundary belongs to the band starting there
PULSE_BANDS = (
    PulseBand(90, PulseStatus.NEEDS_ATTENTION, "danger", "Spending is above your budget pace."),
    PulseBand(70, PulseStatus.WATCHFUL, "warning", "You are approaching your budget limits."),
    PulseBand(float("-inf"), PulseStatus.HEALTHY, "healthy", "Spending is on pace with your budget."),
)


def classify_pulse(budget_used_percentage: Optional[float]) -> PulseBand:
    used = budget_used_percentage or 0
    for band in PULSE_BANDS:
        if used >= band.lower_bound:
            return band
    return PULSE_BANDS[-1]
