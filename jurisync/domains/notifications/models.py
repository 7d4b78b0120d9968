"""Notification value objects and the expiry trigger policy."""

from dataclasses import dataclass, field
from enum import StrEnum

from jurisync.utils.types import ContractID


class NotificationType(StrEnum):
    EXPIRY_REMINDER = "expiry_reminder"
    EXPIRY_WARNING = "expiry_warning"


@dataclass(frozen=True)
class NotificationPolicy:
    reminder_days: int = 7
    warning_days: int = 0
    base_url: str = "http://localhost:8080"

    @property
    def trigger_days(self) -> frozenset[int]:
        return frozenset({self.reminder_days, self.warning_days})


@dataclass(frozen=True)
class EmailNotification:
    to: str
    subject: str
    body: str
    contract_id: ContractID
    type: NotificationType

    def to_payload(self) -> dict[str, str]:
        return {
            "to": self.to,
            "subject": self.subject,
            "body": self.body,
            "contractId": self.contract_id,
            "type": str(self.type),
        }


@dataclass
class DispatchResult:
    sent: int = 0
    failed: int = 0
    notifications: list[EmailNotification] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return self.sent + self.failed
