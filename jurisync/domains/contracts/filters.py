"""Dashboard filtering and sorting over contract collections."""

from collections.abc import Callable, Iterable
from enum import StrEnum
from typing import TypeAlias

from jurisync.domains.contracts.models import Contract, ContractFilters
from jurisync.utils.types import ContractStatus

Predicate: TypeAlias = Callable[[Contract], bool]
SortKey: TypeAlias = str | float | int

# Table ordering puts the most urgent contracts first
STATUS_RANK = {
    ContractStatus.EXPIRED: 0,
    ContractStatus.EXPIRING_SOON: 1,
    ContractStatus.ACTIVE: 2,
}


class SortField(StrEnum):
    NAME = "name"
    CONTRACTING_COMPANY = "contracting_company"
    INTERNAL_RESPONSIBLE = "internal_responsible"
    END_DATE = "end_date"
    VALUE = "value"
    STATUS = "status"

    def key(self, contract: Contract) -> SortKey:
        match self:
            case SortField.NAME:
                return contract.name.lower()
            case SortField.CONTRACTING_COMPANY:
                return contract.contracting_company.lower()
            case SortField.INTERNAL_RESPONSIBLE:
                return contract.internal_responsible.lower()
            case SortField.END_DATE:
                return contract.end_date.timestamp()
            case SortField.VALUE:
                return float(contract.value)
            case SortField.STATUS:
                return STATUS_RANK[contract.status]


def searchable_text(contract: Contract) -> str:
    return " ".join([
        contract.name,
        contract.contracting_company,
        contract.contracted_party,
        contract.internal_responsible,
    ]).lower()


def build_predicates(filters: ContractFilters) -> list[Predicate]:
    """Turn the present filter fields into predicates; absent fields add none."""
    predicates: list[Predicate] = []

    if filters.status is not None:
        predicates.append(lambda c: c.status == filters.status)

    if filters.search:
        needle = filters.search.lower()
        predicates.append(lambda c: needle in searchable_text(c))

    # Window overlap: the filter window must touch the contract's own window
    if filters.start_date is not None:
        predicates.append(lambda c: filters.start_date <= c.end_date)
    if filters.end_date is not None:
        predicates.append(lambda c: filters.end_date >= c.start_date)

    if filters.responsible:
        predicates.append(lambda c: c.internal_responsible == filters.responsible)
    if filters.contracting_company:
        predicates.append(lambda c: c.contracting_company == filters.contracting_company)
    if filters.priority is not None:
        predicates.append(lambda c: c.priority == filters.priority)
    if filters.tags:
        wanted = set(filters.tags)
        predicates.append(lambda c: not wanted.isdisjoint(c.tags))

    return predicates


def filter_contracts(contracts: Iterable[Contract], filters: ContractFilters) -> list[Contract]:
    """Keep contracts satisfying every present predicate."""
    predicates = build_predicates(filters)
    return [c for c in contracts if all(p(c) for p in predicates)]


def sort_contracts(
    contracts: Iterable[Contract],
    field: SortField = SortField.END_DATE,
    descending: bool = False,
) -> list[Contract]:
    return sorted(contracts, key=field.key, reverse=descending)
