"""Sequential, best-effort notification dispatch.

Each send is awaited before the next one starts. A transport may return a
falsy result or raise; both count as a failure for that notice only, and the
batch carries on. Nothing is retried within a batch.
"""

import asyncio
import random
from collections.abc import Iterable
from datetime import datetime
from typing import Protocol

from rich.console import Console

from jurisync.domains.contracts.models import Contract
from jurisync.domains.notifications.models import (
    DispatchResult,
    EmailNotification,
    NotificationPolicy,
)
from jurisync.domains.notifications.templates import DEFAULT_POLICY, render

console = Console()


class Transport(Protocol):
    async def send(self, notification: EmailNotification) -> bool: ...


class FaultInjector(Protocol):
    def should_fail(self, notification: EmailNotification) -> bool: ...


class NoFaults:
    def should_fail(self, notification: EmailNotification) -> bool:
        return False


class RandomFaults:
    """Fails a fixed share of sends; pass ``seed`` for a reproducible sequence."""

    def __init__(self, rate: float = 0.05, seed: int | None = None) -> None:
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"Failure rate must be within [0, 1], got {rate}")
        self.rate = rate
        self._rng = random.Random(seed)

    def should_fail(self, notification: EmailNotification) -> bool:
        return self._rng.random() < self.rate


class SimulatedTransport:
    """Stand-in mail transport: waits ``delay`` seconds, then reports the outcome."""

    def __init__(self, delay: float = 0.0, faults: FaultInjector | None = None) -> None:
        self.delay = delay
        self.faults = faults or NoFaults()
        self.outbox: list[EmailNotification] = []

    async def send(self, notification: EmailNotification) -> bool:
        await asyncio.sleep(self.delay)
        if self.faults.should_fail(notification):
            return False

        self.outbox.append(notification)
        console.print(
            f"  Email notification sent: to={notification.to} "
            f"contract={notification.contract_id} type={notification.type}"
        )
        return True


async def dispatch_all(
    contracts: Iterable[Contract],
    transport: Transport,
    now: datetime,
    base_url: str | None = None,
    policy: NotificationPolicy = DEFAULT_POLICY,
) -> DispatchResult:
    """Render one notice per contract and send them one after another."""
    notifications = [render(c, now, base_url, policy) for c in contracts]
    result = DispatchResult(notifications=notifications)

    for notification in notifications:
        try:
            delivered = await transport.send(notification)
        except Exception as exc:
            console.print(f"  [red]Failed to send notification for {notification.contract_id}: {exc}[/red]")
            result.failed += 1
            continue

        if delivered:
            result.sent += 1
        else:
            console.print(f"  [yellow]Notification for {notification.contract_id} was not delivered[/yellow]")
            result.failed += 1

    return result
