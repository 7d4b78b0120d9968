"""Contracts domain: status derivation, filtering, and dashboard aggregation."""

from datetime import datetime

from jurisync.domains.contracts.aggregate import aggregate_stats, chart_series
from jurisync.domains.contracts.filters import SortField, filter_contracts, sort_contracts
from jurisync.domains.contracts.ingest import load_contracts, parse_records, save_contracts
from jurisync.domains.contracts.models import (
    ChartData,
    Contract,
    ContractFilters,
    DashboardStats,
)
from jurisync.domains.contracts.status import classify, days_until_expiry, recompute_all
from jurisync.utils.io import ContractStore


def validate(store: ContractStore) -> dict:
    """Validate that stored contract records are readable and well-formed."""
    try:
        records = store.load()
        contracts = parse_records(records)
        return {"status": "ok", "row_count": len(contracts)}
    except (ValueError, OSError) as exc:
        return {"status": "error", "message": str(exc)}


def run(
    store: ContractStore,
    now: datetime,
    filters: ContractFilters | None = None,
) -> dict:
    """Load contracts, refresh statuses and build the dashboard views."""
    contracts = load_contracts(store, now)
    filtered = filter_contracts(contracts, filters or ContractFilters())

    return {
        "contracts": contracts,
        "filtered": sort_contracts(filtered),
        "stats": aggregate_stats(filtered, now),
        "charts": chart_series(filtered, now),
    }
