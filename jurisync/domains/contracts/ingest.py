"""Load contracts from the backing store, falling back to the seed portfolio."""

from collections.abc import Iterable
from datetime import datetime
from decimal import InvalidOperation

import pandas as pd
from rich.console import Console

from jurisync.domains.contracts.models import CONTRACT_RECORD_SCHEMA, Contract
from jurisync.domains.contracts.seed import seed_contracts
from jurisync.domains.contracts.status import recompute_all
from jurisync.utils.io import ContractStore
from jurisync.utils.types import RecordBatch
from jurisync.utils.validators import validate_dataframe, validate_required_keys

console = Console()

REQUIRED_KEYS = list(CONTRACT_RECORD_SCHEMA.columns)


class MalformedRecordError(ValueError):
    """A stored record does not have the expected contract shape."""


def parse_records(records: RecordBatch) -> list[Contract]:
    """Validate stored records and convert them to contracts.

    Raises ``MalformedRecordError`` with every problem found.
    """
    match validate_required_keys(records, REQUIRED_KEYS):
        case {"valid": False, "errors": errs}:
            raise MalformedRecordError("; ".join(errs[:5]))

    if records:
        match validate_dataframe(pd.DataFrame(records), CONTRACT_RECORD_SCHEMA):
            case {"valid": False, "errors": errs}:
                raise MalformedRecordError("; ".join(errs[:5]))

    try:
        return [Contract.from_record(record) for record in records]
    except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
        raise MalformedRecordError(f"Could not parse stored contract: {exc}") from exc


def load_contracts(store: ContractStore, now: datetime) -> list[Contract]:
    """Load, parse and refresh statuses; an empty or broken store yields the seed data."""
    try:
        records = store.load()
        if not records:
            console.print("  [yellow]Store is empty, using sample contracts[/yellow]")
            return recompute_all(seed_contracts(now), now)
        contracts = parse_records(records)
    except (ValueError, OSError) as exc:  # includes MalformedRecordError and bad JSON
        console.print(f"  [yellow]Error loading contracts from storage: {exc}[/yellow]")
        console.print("  [yellow]Falling back to sample contracts[/yellow]")
        return recompute_all(seed_contracts(now), now)

    console.print(f"  Loaded {len(contracts):,} contracts")
    return recompute_all(contracts, now)


def save_contracts(store: ContractStore, contracts: Iterable[Contract]) -> None:
    store.save([c.to_record() for c in contracts])
