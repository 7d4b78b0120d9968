"""Generate the printable dashboard report as a self-contained HTML document."""

from collections.abc import Iterable
from datetime import datetime, timezone
from decimal import Decimal
from html import escape

from rich.console import Console

from jurisync.domains.contracts.models import ChartData, Contract
from jurisync.utils.formatting import format_currency, format_date, format_datetime
from jurisync.utils.types import ContractStatus

console = Console()

STATUS_CSS = {
    ContractStatus.ACTIVE: "active",
    ContractStatus.EXPIRING_SOON: "expiring",
    ContractStatus.EXPIRED: "expired",
}

REPORT_STYLE = """
    body { font-family: Arial, sans-serif; margin: 20px; color: #333; line-height: 1.6; }
    .header { text-align: center; border-bottom: 2px solid #2563eb; padding-bottom: 20px; margin-bottom: 30px; }
    .header h1 { color: #2563eb; margin: 0; }
    .stats-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 20px; margin-bottom: 30px; }
    .stat-card { border: 1px solid #e5e7eb; border-radius: 8px; padding: 20px; text-align: center; }
    .stat-value { font-size: 2em; font-weight: bold; margin: 10px 0; }
    .stat-label { color: #6b7280; font-size: 0.9em; }
    .active { color: #22c55e; }
    .expiring { color: #eab308; }
    .expired { color: #ef4444; }
    .total { color: #2563eb; }
    table { width: 100%; border-collapse: collapse; margin-top: 30px; }
    th, td { border: 1px solid #e5e7eb; padding: 12px; text-align: left; }
    th { background-color: #f9fafb; font-weight: bold; }
    .footer { margin-top: 40px; text-align: center; color: #6b7280; font-size: 0.9em; border-top: 1px solid #e5e7eb; padding-top: 20px; }
    @media print { body { margin: 0; } .no-print { display: none; } }
"""


def _stat_card(value: str, label: str, css: str) -> str:
    return (
        '<div class="stat-card">'
        f'<div class="stat-value {css}">{value}</div>'
        f'<div class="stat-label">{label}</div>'
        "</div>"
    )


def _summary_tiles(contracts: list[Contract]) -> str:
    counts = {status: 0 for status in ContractStatus}
    for contract in contracts:
        counts[contract.status] += 1
    total_value = sum((c.value for c in contracts), Decimal("0"))

    return "".join([
        _stat_card(str(len(contracts)), "Total de Contratos", "total"),
        _stat_card(str(counts[ContractStatus.ACTIVE]), "Contratos Ativos", "active"),
        _stat_card(str(counts[ContractStatus.EXPIRING_SOON]), "Vencendo em Breve", "expiring"),
        _stat_card(str(counts[ContractStatus.EXPIRED]), "Contratos Vencidos", "expired"),
        _stat_card(format_currency(total_value), "Valor Total", "total"),
    ])


def _monthly_table(chart_data: ChartData) -> str:
    rows = "".join(
        f"<tr><td>{escape(point.label)}</td><td>{point.contracts}</td>"
        f"<td>{format_currency(point.value)}</td></tr>"
        for point in chart_data.financial_by_month
    )
    return (
        '<table class="monthly-table">'
        "<thead><tr><th>Mês</th><th>Contratos a Vencer</th><th>Valor a Vencer</th></tr></thead>"
        f"<tbody>{rows}</tbody></table>"
    )


def _contract_rows(contracts: list[Contract]) -> str:
    return "".join(
        "<tr>"
        f"<td>{escape(c.name)}</td>"
        f"<td>{escape(c.contracting_company)}</td>"
        f"<td>{escape(c.internal_responsible)}</td>"
        f"<td>{format_date(c.end_date)}</td>"
        f"<td>{format_currency(c.value)}</td>"
        f'<td class="{STATUS_CSS[c.status]}">{c.status.label}</td>'
        "</tr>"
        for c in contracts
    )


def to_report(
    contracts: Iterable[Contract],
    chart_data: ChartData,
    now: datetime | None = None,
) -> str:
    """Assemble the full printable report for the selected contracts."""
    contracts = list(contracts)
    generated = now or datetime.now(timezone.utc)

    html = f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Dashboard JuriSync - {format_date(generated)}</title>
  <style>{REPORT_STYLE}</style>
</head>
<body>
  <div class="header">
    <h1>📊 Dashboard JuriSync</h1>
    <p>Relatório de Contratos - {format_date(generated)}</p>
  </div>
  <div class="stats-grid">{_summary_tiles(contracts)}</div>
  {_monthly_table(chart_data)}
  <table class="contracts-table">
    <thead>
      <tr>
        <th>Nome do Contrato</th><th>Empresa</th><th>Responsável</th>
        <th>Data de Vencimento</th><th>Valor</th><th>Status</th>
      </tr>
    </thead>
    <tbody>{_contract_rows(contracts)}</tbody>
  </table>
  <div class="footer">
    <p>Relatório gerado pelo sistema JuriSync em {format_datetime(generated)}</p>
    <p>Este documento contém informações confidenciais sobre contratos da empresa.</p>
  </div>
</body>
</html>
"""
    console.print(f"  Report assembled: {len(contracts)} contracts")
    return html
