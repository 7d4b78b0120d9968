"""Build dashboard statistics and chart series from contract collections."""

from collections.abc import Iterable
from datetime import datetime, timezone
from decimal import Decimal

import pandas as pd

from jurisync.domains.contracts.models import (
    ChartData,
    Contract,
    DashboardStats,
    MonthlyPoint,
    PriorityBucket,
    StatusBucket,
)
from jurisync.utils.formatting import CENTS
from jurisync.utils.transforms import contracts_to_frame, month_key, trailing_months
from jurisync.utils.types import (
    PRIORITY_COLORS,
    STATUS_COLORS,
    ContractPriority,
    ContractStatus,
)

ZERO = Decimal("0")
CHART_MONTHS = 12


def _sum_values(values: pd.Series) -> Decimal:
    return sum(values, ZERO)


def _status_counts(frame: pd.DataFrame) -> dict[ContractStatus, int]:
    counts = frame["status"].value_counts()
    return {status: int(counts.get(str(status), 0)) for status in ContractStatus}


def _resolve_now(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def aggregate_stats(contracts: Iterable[Contract], now: datetime | None = None) -> DashboardStats:
    """Compute dashboard counters and value totals.

    ``monthly_value`` sums contracts whose end date falls anywhere in the
    calendar month of ``now``.
    """
    frame = contracts_to_frame(contracts)
    current_month = month_key(_resolve_now(now))

    counts = _status_counts(frame)
    total = len(frame)
    total_value = _sum_values(frame["value"])
    monthly_value = _sum_values(frame.loc[frame["end_month"] == current_month, "value"])
    average = (total_value / total).quantize(CENTS) if total else ZERO

    by_responsible = frame.groupby("responsible").size()

    return DashboardStats(
        total_contracts=total,
        active_contracts=counts[ContractStatus.ACTIVE],
        expiring_soon_contracts=counts[ContractStatus.EXPIRING_SOON],
        expired_contracts=counts[ContractStatus.EXPIRED],
        total_value=total_value,
        monthly_value=monthly_value,
        average_contract_value=average,
        contracts_by_responsible={str(k): int(v) for k, v in by_responsible.items()},
    )


def _build_monthly_series(
    frame: pd.DataFrame,
    month_column: str,
    now: datetime,
) -> list[MonthlyPoint]:
    """Bucket contracts by exact ``YYYY-MM`` match over the trailing window."""
    points = []
    for key, label in trailing_months(now, CHART_MONTHS):
        bucket = frame[frame[month_column] == key]
        points.append(MonthlyPoint(
            month=key,
            label=label,
            contracts=len(bucket),
            value=_sum_values(bucket["value"]),
        ))
    return points


def chart_series(contracts: Iterable[Contract], now: datetime | None = None) -> ChartData:
    """Status distribution plus the two trailing-12-month series."""
    frame = contracts_to_frame(contracts)
    now = _resolve_now(now)

    counts = _status_counts(frame)
    by_status = [
        StatusBucket(status=s, label=s.label, count=counts[s], color=STATUS_COLORS[s])
        for s in ContractStatus
    ]

    priority_counts = frame["priority"].value_counts()
    by_priority = [
        PriorityBucket(priority=p, count=int(priority_counts.get(str(p), 0)), color=PRIORITY_COLORS[p])
        for p in ContractPriority
    ]

    return ChartData(
        contracts_by_status=by_status,
        monthly_evolution=_build_monthly_series(frame, "start_month", now),
        financial_by_month=_build_monthly_series(frame, "end_month", now),
        contracts_by_priority=by_priority,
    )
