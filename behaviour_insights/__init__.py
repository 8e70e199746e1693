"""Behaviour Insights package.

This package contains the analytics engine behind a personal finance
tracker's AI analysis page.  See ``insights.build_insight_report`` for the
entry point and ``api`` for the HTTP adapter.
"""

from .insights import build_insight_report, build_report_from_dashboard
from .models import InsightReport, PulseStatus

__all__ = ["build_insight_report", "build_report_from_dashboard", "InsightReport", "PulseStatus"]
