"""Named export configurations for common reporting needs."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from jurisync.domains.exports.models import ExportFormat, ExportOptions
from jurisync.utils.types import DateRange


def all_contracts(now: datetime | None = None) -> ExportOptions:
    return ExportOptions(format=ExportFormat.CSV)


def active_only(now: datetime | None = None) -> ExportOptions:
    return ExportOptions(
        format=ExportFormat.CSV,
        include_active=True,
        include_expiring_soon=False,
        include_expired=False,
    )


def expiring_contracts(now: datetime | None = None) -> ExportOptions:
    """Everything needing attention: expiring soon plus already expired."""
    return ExportOptions(
        format=ExportFormat.CSV,
        include_active=False,
        include_expiring_soon=True,
        include_expired=True,
    )


def current_month_range(now: datetime) -> DateRange:
    """The calendar month containing ``now`` (UTC), first to last instant."""
    current = now.astimezone(timezone.utc)
    start = current.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    next_month = (start + timedelta(days=32)).replace(day=1)
    return DateRange(start=start, end=next_month - timedelta(microseconds=1))


def monthly_report(now: datetime | None = None) -> ExportOptions:
    now = now or datetime.now(timezone.utc)
    return ExportOptions(format=ExportFormat.PDF, date_range=current_month_range(now))


PRESETS: dict[str, Callable[[datetime | None], ExportOptions]] = {
    "all": all_contracts,
    "active": active_only,
    "expiring": expiring_contracts,
    "monthly": monthly_report,
}
