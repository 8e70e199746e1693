import math
from decimal import ROUND_HALF_UP, Context, Decimal

from .config import InsightConfig

DEFAULT_CONFIG = InsightConfig()

# Enough digits to quantize any finite float to cents
_CENTS = Context(prec=400, rounding=ROUND_HALF_UP)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def _group_indian(whole: str) -> str:
    # 1234567 -> 12,34,567
    if len(whole) <= 3:
        return whole
    head, tail = whole[:-3], whole[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(amount, config: InsightConfig = DEFAULT_CONFIG) -> str:
    """Format amount with the configured symbol and 2 decimal places.

    Args:
        amount: The amount to format; None counts as zero
        config: Supplies the currency symbol and digit grouping

    Returns:
        Formatted currency string, e.g. "₹1,23,456.70" or "-₹50.00"
    """
    amount = float(amount or 0)
    if not math.isfinite(amount):
        amount = 0.0
    sign = "-" if amount < 0 else ""
    # Decimal(float) is exact, so a tie like 125.125 rounds up to .13
    cents = Decimal(abs(amount)).quantize(Decimal("0.01"), context=_CENTS)
    whole, frac = f"{cents:f}".split(".")
    if config.number_grouping == "international":
        whole = f"{int(whole):,}"
    else:
        whole = _group_indian(whole)
    return f"{sign}{config.currency_symbol}{whole}.{frac}"


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` (12.0 -> "12", 12.5 -> "12.5")."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_trend_delta(trend: float) -> str:
    if not trend:
        return "0%"
    prefix = "+" if trend > 0 else ""
    return f"{prefix}{format_number(trend)}%"
