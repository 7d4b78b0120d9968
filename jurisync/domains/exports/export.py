"""Export contract selections as CSV, JSON, or a printable report.

CSV is the human-facing artifact and carries status labels; JSON is the
integration artifact and carries machine status codes.
"""

import json
from collections.abc import Iterable
from datetime import datetime, timezone

from rich.console import Console

from jurisync.domains.contracts.models import ChartData, Contract, format_timestamp
from jurisync.domains.exports.models import (
    CSV_ARTIFACT,
    JSON_ARTIFACT,
    ExportFormat,
    ExportOptions,
    ExportPreconditionError,
)
from jurisync.domains.exports.report import to_report
from jurisync.utils.formatting import format_date, format_decimal
from jurisync.utils.io import OutputSink

console = Console()

CSV_HEADERS = [
    "Nome do Contrato",
    "Empresa Contratante",
    "Parte Contratada",
    "Data de Início",
    "Data de Vencimento",
    "Valor",
    "Responsável",
    "Email do Responsável",
    "Status",
    "Arquivo",
    "Data de Criação",
]


def select_for_export(contracts: Iterable[Contract], options: ExportOptions) -> list[Contract]:
    """Drop excluded status buckets, then restrict end dates to the range."""
    selected = [c for c in contracts if options.includes(c.status)]
    if options.date_range is not None:
        selected = [c for c in selected if options.date_range.contains(c.end_date)]
    return selected


def _quoted(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def _csv_row(contract: Contract) -> list[str]:
    return [
        _quoted(contract.name),
        _quoted(contract.contracting_company),
        _quoted(contract.contracted_party),
        format_date(contract.start_date),
        format_date(contract.end_date),
        format_decimal(contract.value),
        _quoted(contract.internal_responsible),
        contract.responsible_email,
        contract.status.label,
        contract.file_name or "",
        format_date(contract.created_at),
    ]


def to_csv(contracts: Iterable[Contract]) -> str:
    lines = [",".join(CSV_HEADERS)]
    lines.extend(",".join(_csv_row(c)) for c in contracts)
    return "\n".join(lines)


def _json_contract(contract: Contract) -> dict:
    return {
        "id": contract.id,
        "name": contract.name,
        "contractingCompany": contract.contracting_company,
        "contractedParty": contract.contracted_party,
        "startDate": format_timestamp(contract.start_date),
        "endDate": format_timestamp(contract.end_date),
        "value": float(contract.value),
        "internalResponsible": contract.internal_responsible,
        "responsibleEmail": contract.responsible_email,
        "status": str(contract.status),
        "fileName": contract.file_name,
        "fileType": contract.file_type,
        "createdAt": format_timestamp(contract.created_at),
        "updatedAt": format_timestamp(contract.updated_at),
    }


def to_json(
    contracts: Iterable[Contract],
    options: ExportOptions,
    now: datetime | None = None,
) -> str:
    """Wrap already-selected contracts in the metadata envelope."""
    contracts = list(contracts)
    exported_at = now or datetime.now(timezone.utc)
    envelope = {
        "metadata": {
            "exportDate": format_timestamp(exported_at),
            "totalRecords": len(contracts),
            "options": options.to_record(),
        },
        "contracts": [_json_contract(c) for c in contracts],
    }
    return json.dumps(envelope, indent=2, ensure_ascii=False)


async def print_report(html: str, sink: OutputSink) -> None:
    """Present the report and print once the surface signals it is ready."""
    surface = await sink.present_document(html)
    await surface.ready()
    surface.print()


async def export_with_options(
    contracts: Iterable[Contract],
    fmt: ExportFormat | str,
    options: ExportOptions,
    sink: OutputSink,
    chart_data: ChartData | None = None,
    now: datetime | None = None,
) -> list[Contract]:
    """Select contracts for ``options`` and hand the artifact in ``fmt`` to ``sink``.

    Returns the exported selection.
    """
    if fmt not in ExportFormat:
        raise ValueError(f"Unsupported export format: {fmt}")

    selected = select_for_export(contracts, options)

    match ExportFormat(fmt):
        case ExportFormat.CSV:
            content = to_csv(selected)
            sink.write_artifact(content.encode("utf-8"), CSV_ARTIFACT.filename, CSV_ARTIFACT.mime)
        case ExportFormat.JSON:
            content = to_json(selected, options, now)
            sink.write_artifact(content.encode("utf-8"), JSON_ARTIFACT.filename, JSON_ARTIFACT.mime)
        case ExportFormat.PDF:
            if chart_data is None:
                raise ExportPreconditionError("Report export requires chart data")
            await print_report(to_report(selected, chart_data, now), sink)

    console.print(f"  Exported {len(selected)} contracts ({fmt})")
    return selected
