"""
Feed normalization.

Turns caller-supplied transaction records into a pandas DataFrame that the
pattern, forecast and tagging stages read from. Each row carries a
canonical merchant label, a display tone and the local weekday.
"""

import logging
import re
from datetime import datetime, tzinfo
from typing import Iterable, List, Optional, Tuple

import pandas as pd
from pydantic import ValidationError

from .models import RecordId, Transaction

logger = logging.getLogger(__name__)

UNCATEGORIZED = "Uncategorized"
UNKNOWN_MERCHANT = "Unknown"
DEFAULT_TONE = "emerald"

CATEGORY_TONES = {
    "groceries": "emerald",
    "food": "emerald",
    "savings": "emerald",
    "dining": "rose",
    "health": "rose",
    "entertainment": "violet",
    "education": "violet",
    "shopping": "violet",
    "transport": "sky",
    "travel": "sky",
}

FEED_COLUMNS = [
    "Id",
    "Type",
    "Amount",
    "Category",
    "Label",
    "Description",
    "PaymentMethod",
    "Merchant",
    "Tone",
    "Date",
    "Weekday",
]

_WHITESPACE = re.compile(r"\s+")


def normalize_merchant(transaction: Transaction) -> str:
    """Description, else category, else "Unknown", with whitespace collapsed."""
    raw = (transaction.description or transaction.category or UNKNOWN_MERCHANT).strip()
    if not raw:
        return UNKNOWN_MERCHANT
    return _WHITESPACE.sub(" ", raw)


def category_tone(category: Optional[str], merchant: Optional[str] = None) -> str:
    for key in (category, merchant):
        if key and key.lower() in CATEGORY_TONES:
            return CATEGORY_TONES[key.lower()]
    return DEFAULT_TONE


def parse_transactions(records: Iterable) -> Tuple[List[Transaction], List[RecordId]]:
    """
    Validate raw records, keeping input order.

    Records with a negative or non-numeric amount, or a date that cannot be
    parsed, are left out. Their ids come back in the second list so the
    caller can report them.
    """

    accepted = []
    excluded = []
    for record in records or []:
        if isinstance(record, Transaction):
            accepted.append(record)
            continue
        try:
            accepted.append(Transaction.model_validate(record))
        except ValidationError as exc:
            record_id = record.get("id") if isinstance(record, dict) else None
            logger.debug("Excluding transaction %r: %s", record_id, exc.errors()[0]["msg"])
            excluded.append(record_id)
    return accepted, excluded


def _local_naive(value: Optional[datetime], zone: Optional[tzinfo]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is not None:
        # astimezone(None) converts to system local time
        value = value.astimezone(zone).replace(tzinfo=None)
    return value


def build_feed(transactions: List[Transaction], zone: Optional[tzinfo] = None) -> pd.DataFrame:
    """
    Prepares the transactions for analysis, one row per record in input order.

    ``Category`` keeps the raw value (None when absent) while ``Label`` falls
    back to "Uncategorized".
    """

    rows = []
    for t in transactions:
        merchant = normalize_merchant(t)
        label = t.category or UNCATEGORIZED
        rows.append(
            {
                "Id": t.id,
                "Type": t.type,
                "Amount": float(t.amount or 0),
                "Category": t.category or None,
                "Label": label,
                "Description": t.description,
                "PaymentMethod": t.payment_method,
                "Merchant": merchant,
                "Tone": category_tone(label, merchant),
                "Date": _local_naive(t.date, zone),
            }
        )

    df = pd.DataFrame(rows, columns=FEED_COLUMNS)
    # Keep caller ids as-is (no int64/NaN coercion)
    df["Id"] = pd.Series([t.id for t in transactions], index=df.index, dtype=object)
    df["Amount"] = pd.to_numeric(df["Amount"]).astype(float)
    df["Date"] = pd.to_datetime(df["Date"].astype(object))
    df["Weekday"] = df["Date"].dt.day_name()
    return df


def expenses(feed: pd.DataFrame) -> pd.DataFrame:
    return feed[feed["Type"] == "expense"]


def dated(feed: pd.DataFrame) -> pd.DataFrame:
    """Rows that can be bucketed by day."""
    return feed.dropna(subset=["Date"])
