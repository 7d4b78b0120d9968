"""Contract lifecycle: status derivation from the end date."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from jurisync.domains.contracts.models import Contract, ContractHistoryEntry
from jurisync.utils.types import ContractStatus

ONE_DAY = timedelta(days=1)
SYSTEM_AUTHOR = "Sistema"


@dataclass(frozen=True)
class LifecyclePolicy:
    expiring_soon_days: int = 7


DEFAULT_POLICY = LifecyclePolicy()


def days_until_expiry(end_date: datetime, now: datetime) -> int:
    """Whole days until ``end_date``, rounded up (ceil of the day fraction)."""
    return -((now - end_date) // ONE_DAY)


def classify(
    end_date: datetime,
    now: datetime,
    policy: LifecyclePolicy = DEFAULT_POLICY,
) -> ContractStatus:
    """Map an end date to a lifecycle status. Due today is still expiring soon."""
    match days_until_expiry(end_date, now):
        case d if d < 0:
            return ContractStatus.EXPIRED
        case d if d <= policy.expiring_soon_days:
            return ContractStatus.EXPIRING_SOON
        case _:
            return ContractStatus.ACTIVE


def _status_change_entry(contract: Contract, new_status: ContractStatus, now: datetime) -> ContractHistoryEntry:
    return ContractHistoryEntry(
        id=f"{contract.id}-status-{now:%Y%m%d%H%M%S}",
        contract_id=contract.id,
        action="Status atualizado",
        author=SYSTEM_AUTHOR,
        timestamp=now,
        field="status",
        old_value=str(contract.status),
        new_value=str(new_status),
    )


def recompute_all(
    contracts: Iterable[Contract],
    now: datetime,
    track_history: bool = False,
    policy: LifecyclePolicy = DEFAULT_POLICY,
) -> list[Contract]:
    """Return copies of ``contracts`` with their cached status refreshed.

    With ``track_history`` a contract whose status actually changed also gets
    a ``Status atualizado`` history entry, so running twice adds nothing new.
    """
    refreshed = []
    for contract in contracts:
        status = classify(contract.end_date, now, policy)
        if status == contract.status:
            refreshed.append(contract)
            continue

        if track_history:
            entry = _status_change_entry(contract, status, now)
            refreshed.append(replace(
                contract,
                status=status,
                history=(*contract.history, entry),
                updated_at=now,
            ))
        else:
            refreshed.append(contract.with_status(status))
    return refreshed
