"""Command-line runner: dashboard summary, daily notifications, and exports."""

import argparse
import asyncio
import sys
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console
from rich.table import Table

from jurisync import config as engine_config
from jurisync.domains import contracts as contracts_domain
from jurisync.domains.contracts import ContractFilters, DashboardStats
from jurisync.domains.exports import PRESETS, ExportFormat, export_with_options
from jurisync.domains.notifications import RandomFaults, SimulatedTransport, run_daily_check
from jurisync.utils.formatting import format_currency
from jurisync.utils.io import DirectorySink, JsonFileStore
from jurisync.utils.types import ContractStatus

console = Console()


def _stats_table(stats: DashboardStats) -> Table:
    table = Table(title="Dashboard")
    table.add_column("Metric")
    table.add_column("Value", justify="right")

    table.add_row("Total de Contratos", str(stats.total_contracts))
    table.add_row("[green]Ativos[/green]", str(stats.active_contracts))
    table.add_row("[yellow]Vencendo em Breve[/yellow]", str(stats.expiring_soon_contracts))
    table.add_row("[red]Vencidos[/red]", str(stats.expired_contracts))
    table.add_row("Valor Total", format_currency(stats.total_value))
    table.add_row("Vencendo neste mês", format_currency(stats.monthly_value))
    table.add_row("Valor Médio", format_currency(stats.average_contract_value))
    return table


def _build_filters(args: argparse.Namespace) -> ContractFilters:
    return ContractFilters(
        search=args.search,
        status=ContractStatus(args.status) if args.status else None,
        responsible=args.responsible,
        contracting_company=args.company,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="JuriSync contract lifecycle engine")
    parser.add_argument("--env", type=str, help="Configuration environment")
    parser.add_argument("--store", type=Path, help="Path to the JSON contract store")
    parser.add_argument("--output", type=Path, help="Directory for exported artifacts")
    parser.add_argument("--validate", action="store_true", help="Only validate stored records")
    parser.add_argument("--stats", action="store_true", help="Print dashboard statistics")
    parser.add_argument("--notify", action="store_true", help="Run the daily expiry notification check")
    parser.add_argument("--export", choices=[str(f) for f in ExportFormat], help="Export format")
    parser.add_argument("--preset", choices=sorted(PRESETS), help="Export preset; its format applies unless --export is given")
    parser.add_argument("--search", type=str, help="Free-text contract search")
    parser.add_argument("--status", choices=[str(s) for s in ContractStatus], help="Status filter")
    parser.add_argument("--responsible", type=str, help="Internal responsible filter")
    parser.add_argument("--company", type=str, help="Contracting company filter")
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace, cfg: engine_config.EngineConfig, now: datetime) -> int:
    store = JsonFileStore(args.store or cfg.storage.store_path)

    if args.validate:
        match contracts_domain.validate(store):
            case {"status": "ok", "row_count": n}:
                console.print(f"[green]✓ {n} stored contracts are valid[/green]")
                return 0
            case {"status": "error", "message": msg}:
                console.print(f"[red]✗ Invalid contract store: {msg}[/red]")
                return 1

    views = contracts_domain.run(store, now, _build_filters(args))

    if args.stats or not (args.notify or args.export or args.preset):
        console.print(_stats_table(views["stats"]))

    if args.notify:
        notifications = cfg.notifications
        transport = SimulatedTransport(
            delay=notifications.send_delay_seconds,
            faults=RandomFaults(notifications.failure_rate, notifications.seed),
        )
        result = await run_daily_check(
            views["contracts"], transport, now, policy=notifications.policy(),
        )
        if result.failed:
            console.print(f"[yellow]{result.failed} notifications could not be delivered[/yellow]")

    if args.export or args.preset:
        options = PRESETS[args.preset or "all"](now)
        if args.export:
            options = replace(options, format=ExportFormat(args.export))
        sink = DirectorySink(args.output or cfg.storage.output_dir)
        await export_with_options(
            views["filtered"], options.format, options, sink,
            chart_data=views["charts"], now=now,
        )

    return 0


def main(argv: list[str] | None = None, now: datetime | None = None) -> int:
    args = parse_args(argv)
    env = args.env or str(engine_config.get_env_config().get("default_env", "production"))

    try:
        cfg = engine_config.load_engine_config(env)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        return 1

    console.print(f"[bold]JuriSync engine ({cfg.env})[/bold]")
    return asyncio.run(_run(args, cfg, now or datetime.now(timezone.utc)))


if __name__ == "__main__":
    sys.exit(main())
