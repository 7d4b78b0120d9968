"""Common transformation utilities shared by aggregation and exports."""

from collections.abc import Iterable
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, TypeAlias

import pandas as pd

if TYPE_CHECKING:
    from jurisync.domains.contracts.models import Contract

MonthKey: TypeAlias = str  # "YYYY-MM"

FRAME_COLUMNS = [
    "id", "status", "priority", "value", "responsible",
    "start_date", "end_date", "start_month", "end_month",
]


def month_key(moment: datetime) -> MonthKey:
    return moment.astimezone(timezone.utc).strftime("%Y-%m")


def trailing_months(now: datetime, count: int = 12) -> list[tuple[MonthKey, str]]:
    """Return ``(key, label)`` pairs for the ``count`` months ending at ``now``'s month, oldest first."""
    current = now.astimezone(timezone.utc)
    months = []
    for i in range(count - 1, -1, -1):
        year, month_index = divmod(current.year * 12 + current.month - 1 - i, 12)
        first_day = date(year, month_index + 1, 1)
        months.append((first_day.strftime("%Y-%m"), first_day.strftime("%b %Y")))
    return months


def contracts_to_frame(contracts: Iterable["Contract"]) -> pd.DataFrame:
    """Flatten contracts into a DataFrame for aggregation.

    ``value`` keeps its Decimal objects and the dates stay ``datetime``
    objects (object dtype), so sums are exact and far-future end dates such
    as 9999-12-31 stay representable.
    """
    contracts = list(contracts)
    return pd.DataFrame({
        "id": pd.Series([c.id for c in contracts], dtype=object),
        "status": pd.Series([str(c.status) for c in contracts], dtype=object),
        "priority": pd.Series([str(c.priority) for c in contracts], dtype=object),
        "value": pd.Series([c.value for c in contracts], dtype=object),
        "responsible": pd.Series([c.internal_responsible for c in contracts], dtype=object),
        "start_date": pd.Series([c.start_date for c in contracts], dtype=object),
        "end_date": pd.Series([c.end_date for c in contracts], dtype=object),
        "start_month": pd.Series([month_key(c.start_date) for c in contracts], dtype=object),
        "end_month": pd.Series([month_key(c.end_date) for c in contracts], dtype=object),
    }, columns=FRAME_COLUMNS)
