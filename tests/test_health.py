"""Tests for the budget pulse classifier."""

import pytest

from behaviour_insights.health import PULSE_BANDS, classify_pulse
from behaviour_insights.models import PulseStatus


class TestClassifyPulse:
    """Thresholds at 70 and 90 belong to the band that starts there."""

    @pytest.mark.parametrize(
        "used,status",
        [
            (None, PulseStatus.HEALTHY),
            (0, PulseStatus.HEALTHY),
            (69.9, PulseStatus.HEALTHY),
            (70, PulseStatus.WATCHFUL),
            (89.99, PulseStatus.WATCHFUL),
            (90, PulseStatus.NEEDS_ATTENTION),
            (95, PulseStatus.NEEDS_ATTENTION),
            (250, PulseStatus.NEEDS_ATTENTION),
            (-5, PulseStatus.HEALTHY),
        ],
    )
    def test_status(self, used, status):
        assert classify_pulse(used).status == status

    def test_messages_and_tones(self):
        assert classify_pulse(95).message == "Spending is above your budget pace."
        assert classify_pulse(75).message == "You are approaching your budget limits."
        assert classify_pulse(10).message == "Spending is on pace with your budget."
        assert [b.tone for b in PULSE_BANDS] == ["danger", "warning", "healthy"]

    def test_status_values(self):
        assert PulseStatus.NEEDS_ATTENTION.value == "NeedsAttention"
        assert {b.status for b in PULSE_BANDS} == set(PulseStatus)
