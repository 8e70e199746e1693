"""Stateless HTTP adapter exposing the insight engine over FastAPI."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import FastAPI
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .config import load_config
from .insights import build_insight_report
from .logging_utils import get_logger
from .models import InsightReport

config = load_config()
logger = get_logger("behaviour_insights.api", config)

app = FastAPI(title="Behaviour Insights Server", version="0.1.0")


class InsightRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    # Records stay loose here; the engine excludes malformed ones itself
    transactions: List[Dict[str, Any]] = Field(default_factory=list)
    stats: Dict[str, Any] = Field(default_factory=dict)
    savings_goals: List[Dict[str, Any]] = Field(default_factory=list)
    category_spending: List[Dict[str, Any]] = Field(default_factory=list)
    now: Optional[datetime] = Field(None, description="Override the sampled clock")


@app.post("/insights", response_model=InsightReport)
async def insights(req: InsightRequest):
    report = build_insight_report(
        req.transactions,
        summary=req.stats,
        savings_goals=req.savings_goals,
        category_spending=req.category_spending,
        now=req.now,
        config=config,
    )
    logger.info(
        "Insight report for %d transactions (%d excluded)",
        len(req.transactions),
        len(report.excluded_transaction_ids),
    )
    return report


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("behaviour_insights.api:app", host=config.host, port=config.port)
