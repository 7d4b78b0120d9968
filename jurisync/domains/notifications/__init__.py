"""Notifications domain: expiry triggers, e-mail rendering, and dispatch."""

from jurisync.domains.notifications.dispatch import (
    NoFaults,
    RandomFaults,
    SimulatedTransport,
    Transport,
    dispatch_all,
)
from jurisync.domains.notifications.models import (
    DispatchResult,
    EmailNotification,
    NotificationPolicy,
    NotificationType,
)
from jurisync.domains.notifications.schedule import due_for_notification, run_daily_check
from jurisync.domains.notifications.templates import render
