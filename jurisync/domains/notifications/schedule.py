"""Daily expiry check: which contracts get a notice today."""

from collections.abc import Iterable
from datetime import datetime

from rich.console import Console

from jurisync.domains.contracts.models import Contract
from jurisync.domains.contracts.status import days_until_expiry
from jurisync.domains.notifications.dispatch import Transport, dispatch_all
from jurisync.domains.notifications.models import DispatchResult, NotificationPolicy
from jurisync.domains.notifications.templates import DEFAULT_POLICY

console = Console()


def due_for_notification(
    contracts: Iterable[Contract],
    now: datetime,
    policy: NotificationPolicy = DEFAULT_POLICY,
) -> list[Contract]:
    """Contracts exactly ``reminder_days`` or ``warning_days`` from expiry.

    This is a point-in-time trigger: a day missed by the scheduler is not
    caught up later.
    """
    triggers = policy.trigger_days
    return [c for c in contracts if days_until_expiry(c.end_date, now) in triggers]


async def run_daily_check(
    contracts: Iterable[Contract],
    transport: Transport,
    now: datetime,
    base_url: str | None = None,
    policy: NotificationPolicy = DEFAULT_POLICY,
) -> DispatchResult:
    due = due_for_notification(contracts, now, policy)
    if not due:
        console.print("  No contracts due for notification today")
        return DispatchResult()

    result = await dispatch_all(due, transport, now, base_url, policy)
    color = "green" if result.failed == 0 else "yellow"
    console.print(
        f"  [{color}]Daily notifications sent: {result.sent} successful, "
        f"{result.failed} failed[/{color}]"
    )
    return result
