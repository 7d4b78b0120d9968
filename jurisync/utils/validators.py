"""Record validation utilities using pandera."""

from typing import TypeAlias

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

ValidationResult: TypeAlias = dict[str, str | bool | list[str]]


def validate_dataframe(
    df: pd.DataFrame,
    schema: DataFrameSchema,
) -> ValidationResult:
    """Validate a DataFrame against a pandera schema, collecting every failure."""
    try:
        schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": []}
    except pa.errors.SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val}:
                    errors.append(f"Column '{col}' failed check '{check}': {val}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        return {"valid": False, "status": "error", "errors": errors}


def validate_required_keys(records: list[dict], required: list[str]) -> ValidationResult:
    """Check that every record carries the required keys."""
    issues = []
    for position, record in enumerate(records):
        if not isinstance(record, dict):
            issues.append(f"Record {position} is not an object: {record!r}")
            continue
        missing = [key for key in required if key not in record]
        if missing:
            issues.append(f"Record {position} ({record.get('id', '?')}) is missing {missing}")

    match issues:
        case []:
            return {"valid": True, "status": "ok", "errors": []}
        case errors:
            return {"valid": False, "status": "error", "errors": errors}
