"""Shared type definitions for the contract engine."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from typing import TypeAlias


Record: TypeAlias = dict[str, object]
RecordBatch: TypeAlias = list[Record]
ContractID: TypeAlias = str
Money: TypeAlias = Decimal


class ContractStatus(StrEnum):
    ACTIVE = "active"
    EXPIRING_SOON = "expiring_soon"
    EXPIRED = "expired"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


class ContractPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


STATUS_LABELS = {
    ContractStatus.ACTIVE: "Ativo",
    ContractStatus.EXPIRING_SOON: "Vencendo em Breve",
    ContractStatus.EXPIRED: "Vencido",
}

STATUS_COLORS = {
    ContractStatus.ACTIVE: "#22c55e",
    ContractStatus.EXPIRING_SOON: "#eab308",
    ContractStatus.EXPIRED: "#ef4444",
}

PRIORITY_COLORS = {
    ContractPriority.LOW: "#94a3b8",
    ContractPriority.MEDIUM: "#3b82f6",
    ContractPriority.HIGH: "#f97316",
    ContractPriority.CRITICAL: "#dc2626",
}


@dataclass(frozen=True)
class DateRange:
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Date range starts after it ends: {self.start} > {self.end}")

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end
