"""Spending totals over confirmed expense records."""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal

from chatledger.services.categories import DEFAULT_CATEGORY
from chatledger.services.router import ConfirmedRecord, TargetCollection

# Number of categories listed in a summary
TOP_CATEGORIES = 5


@dataclass
class SpendingSummary:
    today: Decimal = Decimal("0")
    this_week: Decimal = Decimal("0")  # the last seven days, including today
    by_category: list[tuple[str, Decimal]] = field(default_factory=list)  # largest first


def summarize_spending(records: Iterable[ConfirmedRecord], now: datetime) -> SpendingSummary:
    """Total expense records for today, the last week and per category.

    Records from other collections are ignored. ``now`` must be comparable
    with the records' ``created_at`` (both aware or both naive).
    """
    summary = SpendingSummary()
    totals: dict[str, Decimal] = defaultdict(Decimal)
    week_ago = now - timedelta(days=7)

    for record in records:
        if record.target is not TargetCollection.EXPENSES or record.amount is None:
            continue
        if record.created_at.date() == now.date():
            summary.today += record.amount
        if record.created_at >= week_ago:
            summary.this_week += record.amount
        totals[record.category or DEFAULT_CATEGORY] += record.amount

    # sorted() is stable, so equal totals keep first-seen order
    summary.by_category = sorted(totals.items(), key=lambda item: item[1], reverse=True)[
        :TOP_CATEGORIES
    ]
    return summary
