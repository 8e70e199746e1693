"""Tests for the FastAPI adapter."""

import pytest
from fastapi.testclient import TestClient

from behaviour_insights.api import app


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestInsightsEndpoint:
    """Tests for POST /insights."""

    def test_report_uses_camel_case(self, client):
        response = client.post(
            "/insights",
            json={
                "transactions": [
                    {"id": "a", "type": "expense", "amount": 200, "description": "Cafe", "date": "2024-01-01T10:00:00"},
                    {"id": "b", "type": "expense", "amount": 220, "description": "Cafe", "date": "2024-01-08T10:00:00"},
                    {"id": "c", "type": "expense", "amount": -1, "description": "Refund"},
                ],
                "stats": {"monthlyExpenses": 3000, "monthlyBudget": 2500, "budgetUsedPercentage": 70},
                "savingsGoals": [],
                "categorySpending": [{"name": "Dining", "amount": 420}],
                "now": "2024-04-10T12:00:00",
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["pulseStatus"] == "Watchful"
        assert body["excludedTransactionIds"] == ["c"]
        assert body["forecast"]["overspend"] == pytest.approx(6500)
        assert body["priorityAction"]["title"] == "Reduce Dining spend"
        assert len(body["vitalSigns"]) == 4
        assert body["patternHighlights"][-1] == "Average daily spend this month: ₹300.00."

    def test_empty_body_gives_placeholder_report(self, client):
        response = client.post("/insights", json={"now": "2024-04-10T12:00:00"})
        assert response.status_code == 200
        body = response.json()
        assert body["confidenceScore"] is None
        assert body["priorityAction"] is None
        assert body["scenarios"][1]["title"] == "If you set a budget"

    def test_structurally_invalid_body_is_rejected(self, client):
        response = client.post("/insights", json={"transactions": "nope"})
        assert response.status_code == 422
