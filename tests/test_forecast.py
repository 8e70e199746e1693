"""Tests for the month-end forecast."""

from datetime import datetime

import pytest

from behaviour_insights.forecast import forecast_month_end
from behaviour_insights.models import BudgetSummary


class TestForecastMonthEnd:
    """Tests for daily burn, projection and overspend."""

    def test_overspend_example(self, now, config):
        forecast = forecast_month_end(
            BudgetSummary(monthly_expenses=3000, monthly_budget=2500), now, config
        )
        assert forecast.day_of_month == 10
        assert forecast.days_in_month == 30
        assert forecast.daily_burn == pytest.approx(300)
        assert forecast.projected_spend == pytest.approx(9000)
        assert forecast.overspend == pytest.approx(6500)
        assert forecast.fill_percent == 100
        assert forecast.alert == "On track to overspend by ₹6,500.00."

    def test_within_budget(self, now, config):
        forecast = forecast_month_end(
            BudgetSummary(monthly_expenses=1000, monthly_budget=5000), now, config
        )
        assert forecast.projected_spend == pytest.approx(3000)
        assert forecast.overspend == 0
        assert forecast.fill_percent == pytest.approx(60)
        assert forecast.alert == "Spending is within your monthly budget."

    def test_no_budget_leaves_overspend_undefined(self, now, config):
        forecast = forecast_month_end(
            BudgetSummary(monthly_expenses=1000, monthly_income=4000), now, config
        )
        assert forecast.overspend is None
        assert forecast.fill_percent == pytest.approx(25)
        assert forecast.alert == "Set a monthly budget to unlock alerts."

    def test_no_expenses(self, now, config):
        forecast = forecast_month_end(BudgetSummary(), now, config)
        assert forecast.daily_burn == 0
        assert forecast.projected_spend == 0
        assert forecast.fill_percent == 0

    def test_first_day_of_month(self, config):
        forecast = forecast_month_end(
            BudgetSummary(monthly_expenses=310), datetime(2024, 1, 1, 0, 5), config
        )
        assert forecast.daily_burn == pytest.approx(310)
        assert forecast.projected_spend == pytest.approx(310 * 31)

    def test_leap_february(self, config):
        forecast = forecast_month_end(BudgetSummary(monthly_expenses=290), datetime(2024, 2, 29), config)
        assert forecast.days_in_month == 29
        assert forecast.projected_spend == pytest.approx(290)

    @pytest.mark.parametrize("budget", [1, 500, 2999.99, 3000, 10_000])
    def test_overspend_never_negative(self, now, config, budget):
        forecast = forecast_month_end(
            BudgetSummary(monthly_expenses=1000, monthly_budget=budget), now, config
        )
        assert forecast.overspend >= 0
        if forecast.projected_spend <= budget:
            assert forecast.overspend == 0
