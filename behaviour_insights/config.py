from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

GROUPINGS = ("indian", "international")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class InsightConfig:
    currency_symbol: str = "₹"
    number_grouping: str = "indian"
    timezone: Optional[str] = None
    log_level: str = "INFO"
    json_logs: bool = True
    host: str = "0.0.0.0"
    port: int = 8001

    @property
    def zone(self) -> Optional[ZoneInfo]:
        """Resolve the configured IANA zone, or None when unset or unknown."""
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            return None


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_config() -> InsightConfig:
    """Load configuration from the environment (and `.env`) with safe defaults."""
    grouping = os.getenv("INSIGHTS_NUMBER_GROUPING", "indian").strip().lower()
    if grouping not in GROUPINGS:
        grouping = "indian"

    log_level = os.getenv("INSIGHTS_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        log_level = "INFO"

    try:
        port = int(os.getenv("INSIGHTS_PORT", "8001"))
    except ValueError:
        port = 8001

    return InsightConfig(
        currency_symbol=os.getenv("INSIGHTS_CURRENCY_SYMBOL", "₹"),
        number_grouping=grouping,
        timezone=os.getenv("INSIGHTS_TIMEZONE") or None,
        log_level=log_level,
        json_logs=_env_flag("INSIGHTS_JSON_LOGS", True),
        host=os.getenv("INSIGHTS_HOST", "0.0.0.0"),
        port=port,
    )
