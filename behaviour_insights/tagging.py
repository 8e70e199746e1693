from typing import List, Optional

import pandas as pd

from .config import InsightConfig
from .feed import UNCATEGORIZED
from .formatting import DEFAULT_CONFIG, format_currency, round_half_up
from .models import TaggedTransaction

AUTO_TAG_LIMIT = 4

# Display bounds for the per-transaction confidence heuristic
CATEGORIZED_FLOOR = 70
CATEGORIZED_CEILING = 95
CATEGORIZED_FALLBACK = 80
UNCATEGORIZED_FLOOR = 50
UNCATEGORIZED_FALLBACK = 70
UNCATEGORIZED_PENALTY = 20


def confidence_score(feed: pd.DataFrame) -> Optional[int]:
    """Share of transactions that carry a category, as a 0-100 integer.

    Returns None for an empty feed so "no data" stays distinct from 0%.
    """
    if feed.empty:
        return None
    with_category = int(feed["Category"].notna().sum())
    return round_half_up(100 * with_category / len(feed))


def transaction_confidence(category: Optional[str], score: Optional[int]) -> int:
    if category and category != UNCATEGORIZED:
        base = CATEGORIZED_FALLBACK if score is None else score
        return min(CATEGORIZED_CEILING, max(CATEGORIZED_FLOOR, round_half_up(base)))
    base = UNCATEGORIZED_FALLBACK if score is None else score
    return max(UNCATEGORIZED_FLOOR, round_half_up(base - UNCATEGORIZED_PENALTY))


def _code(row) -> str:
    for value in (row["PaymentMethod"], row["Description"], row["Category"]):
        if isinstance(value, str) and value:
            return value
    return "N/A"


def auto_tag(
    feed: pd.DataFrame,
    score: Optional[int],
    config: InsightConfig = DEFAULT_CONFIG,
) -> List[TaggedTransaction]:
    """Tag the most recent transactions; the feed is assumed newest-first."""

    tagged = []
    for _, row in feed.head(AUTO_TAG_LIMIT).iterrows():
        tagged.append(
            TaggedTransaction(
                id=row["Id"],
                merchant=row["Merchant"],
                code=_code(row),
                amount=float(row["Amount"]),
                amount_formatted=format_currency(row["Amount"], config),
                category=row["Label"],
                tone=row["Tone"],
                confidence=transaction_confidence(row["Label"], score),
            )
        )
    return tagged
