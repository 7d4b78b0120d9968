"""Tests for contract exports and the printable report."""

import asyncio
import json
from datetime import datetime, timezone

import pytest

from jurisync.domains.contracts.aggregate import chart_series
from jurisync.domains.exports import (
    CSV_HEADERS,
    PRESETS,
    ExportFormat,
    ExportOptions,
    ExportPreconditionError,
    export_with_options,
    select_for_export,
    to_csv,
    to_json,
    to_report,
)
from jurisync.domains.exports.presets import current_month_range
from jurisync.utils.io import DirectorySink, MemorySink
from jurisync.utils.types import ContractStatus, DateRange
from tests.conftest import REFERENCE_NOW, make_contract


def _ids(contracts):
    return [c.id for c in contracts]


class TestSelectForExport:

    def test_default_options_keep_everything(self, portfolio):
        assert select_for_export(portfolio, ExportOptions()) == portfolio

    def test_excluded_buckets_are_dropped(self, portfolio):
        options = ExportOptions(include_expiring_soon=False)
        assert _ids(select_for_export(portfolio, options)) == ["active", "expired"]

    def test_date_range_applies_to_end_date(self, portfolio):
        window = DateRange(
            start=datetime(2024, 6, 5, tzinfo=timezone.utc),
            end=datetime(2024, 6, 8, tzinfo=timezone.utc),
        )
        options = ExportOptions(date_range=window)
        # range bounds are inclusive
        assert _ids(select_for_export(portfolio, options)) == ["reminder", "six-days"]

    def test_every_bucket_excluded(self, portfolio):
        options = ExportOptions(include_active=False, include_expiring_soon=False, include_expired=False)
        assert select_for_export(portfolio, options) == []

    def test_inverted_range_is_rejected(self):
        with pytest.raises(ValueError):
            DateRange(start=REFERENCE_NOW, end=datetime(2024, 1, 1, tzinfo=timezone.utc))


class TestToCsv:

    def test_header_and_one_line_per_contract(self, portfolio):
        lines = to_csv(portfolio[:2]).split("\n")

        assert len(lines) == 3
        assert lines[0] == ",".join(CSV_HEADERS)
        assert lines[0].startswith("Nome do Contrato,Empresa Contratante")

    def test_row_fields(self):
        contract = make_contract(
            "c-1", ends_in_days=7, value="120000", name="Serviços TI",
            company="Tech Solutions Ltda", responsible="João Silva", file_name="ti.pdf",
        )
        row = to_csv([contract]).split("\n")[1]

        assert row == (
            '"Serviços TI","Tech Solutions Ltda","Parte Contratada SA",'
            "03/03/2024,08/06/2024,120000,"
            '"João Silva",joão@example.com,Vencendo em Breve,ti.pdf,03/03/2024'
        )

    def test_fractional_value_is_bare_decimal(self):
        row = to_csv([make_contract(value="1500.50")]).split("\n")[1]
        assert ",1500.5," in row

    def test_embedded_quotes_are_doubled(self):
        row = to_csv([make_contract(name='Contrato "Master", fase 2')]).split("\n")[1]
        assert row.startswith('"Contrato ""Master"", fase 2",')

    def test_no_trailing_newline(self, portfolio):
        assert not to_csv(portfolio).endswith("\n")

    def test_empty_selection_is_header_only(self):
        assert to_csv([]) == ",".join(CSV_HEADERS)


class TestToJson:

    def test_envelope(self, portfolio):
        options = ExportOptions(format=ExportFormat.JSON, include_active=False)
        selected = select_for_export(portfolio, options)
        payload = json.loads(to_json(selected, options, REFERENCE_NOW))

        assert payload["metadata"]["exportDate"] == "2024-06-01T00:00:00Z"
        assert payload["metadata"]["totalRecords"] == 4
        assert payload["metadata"]["options"]["includeActive"] is False
        assert len(payload["contracts"]) == 4

    def test_contracts_carry_status_codes(self, portfolio):
        payload = json.loads(to_json(portfolio, ExportOptions(), REFERENCE_NOW))
        statuses = [c["status"] for c in payload["contracts"]]

        assert statuses == ["active", "expiring_soon", "expiring_soon", "expiring_soon", "expired"]
        assert payload["contracts"][0]["value"] == 120000.0

    def test_date_range_in_options(self):
        options = ExportOptions(date_range=current_month_range(REFERENCE_NOW))
        record = json.loads(to_json([], options, REFERENCE_NOW))["metadata"]["options"]

        assert record["dateRange"]["start"] == "2024-06-01T00:00:00Z"
        assert record["dateRange"]["end"].startswith("2024-06-30T23:59:59")


class TestToReport:

    def test_summary_and_rows(self, portfolio):
        html = to_report(portfolio, chart_series(portfolio, REFERENCE_NOW), REFERENCE_NOW)

        assert "<title>Dashboard JuriSync - 01/06/2024</title>" in html
        for label in ("Total de Contratos", "Contratos Ativos", "Vencendo em Breve", "Contratos Vencidos", "Valor Total"):
            assert label in html
        assert "R$ 295.000,00" in html
        assert html.count('<td class="expiring">Vencendo em Breve</td>') == 3
        assert "Relatório gerado pelo sistema JuriSync" in html

    def test_monthly_table_uses_chart_data(self, portfolio):
        charts = chart_series(portfolio, REFERENCE_NOW)
        html = to_report(portfolio, charts, REFERENCE_NOW)

        assert "Valor a Vencer" in html
        assert "R$ 90.000,00" in html

    def test_names_are_escaped(self):
        contract = make_contract(name="<script>x</script>")
        html = to_report([contract], chart_series([contract], REFERENCE_NOW), REFERENCE_NOW)
        assert "<script>x</script>" not in html


class TestExportWithOptions:

    def test_csv_artifact(self, portfolio):
        sink = MemorySink()
        selected = asyncio.run(export_with_options(portfolio, ExportFormat.CSV, ExportOptions(), sink))

        [artifact] = sink.artifacts
        assert artifact.filename == "contratos-jurisync.csv"
        assert artifact.mime == "text/csv"
        assert artifact.content.decode("utf-8").count("\n") == len(selected)

    def test_json_artifact_counts_selection(self, portfolio):
        sink = MemorySink()
        options = PRESETS["expiring"]()
        asyncio.run(export_with_options(portfolio, "json", options, sink, now=REFERENCE_NOW))

        [artifact] = sink.artifacts
        assert artifact.filename == "contratos-jurisync.json"
        assert artifact.mime == "application/json"
        assert json.loads(artifact.content)["metadata"]["totalRecords"] == 4

    def test_pdf_prints_report(self, portfolio):
        sink = MemorySink()
        charts = chart_series(portfolio, REFERENCE_NOW)
        asyncio.run(export_with_options(portfolio, ExportFormat.PDF, ExportOptions(), sink, charts, REFERENCE_NOW))

        [surface] = sink.surfaces
        assert surface.printed == 1
        assert "Dashboard JuriSync" in surface.html
        assert sink.artifacts == []

    def test_pdf_without_chart_data(self, portfolio):
        sink = MemorySink()
        with pytest.raises(ExportPreconditionError):
            asyncio.run(export_with_options(portfolio, ExportFormat.PDF, ExportOptions(), sink))
        assert sink.surfaces == []

    def test_unsupported_format(self, portfolio):
        sink = MemorySink()
        with pytest.raises(ValueError, match="Unsupported export format"):
            asyncio.run(export_with_options(portfolio, "xlsx", ExportOptions(), sink))
        assert sink.artifacts == []

    def test_directory_sink_writes_files(self, tmp_path, portfolio):
        sink = DirectorySink(tmp_path / "out")
        charts = chart_series(portfolio, REFERENCE_NOW)

        asyncio.run(export_with_options(portfolio, "csv", ExportOptions(), sink))
        asyncio.run(export_with_options(portfolio, "pdf", ExportOptions(), sink, charts, REFERENCE_NOW))

        assert (tmp_path / "out" / "contratos-jurisync.csv").read_text(encoding="utf-8").startswith("Nome do Contrato")
        assert "Dashboard JuriSync" in (tmp_path / "out" / "relatorio-jurisync.html").read_text(encoding="utf-8")


class TestPresets:

    def test_active_only(self, portfolio):
        assert _ids(select_for_export(portfolio, PRESETS["active"]())) == ["active"]

    def test_expiring_includes_expired(self, portfolio):
        selected = select_for_export(portfolio, PRESETS["expiring"]())
        assert {c.status for c in selected} == {ContractStatus.EXPIRING_SOON, ContractStatus.EXPIRED}

    def test_monthly_report(self, portfolio):
        options = PRESETS["monthly"](REFERENCE_NOW)

        assert options.format == ExportFormat.PDF
        assert _ids(select_for_export(portfolio, options)) == ["reminder", "due-today", "six-days"]

    def test_current_month_range_in_december(self):
        window = current_month_range(datetime(2024, 12, 10, tzinfo=timezone.utc))
        assert window.start == datetime(2024, 12, 1, tzinfo=timezone.utc)
        assert window.end.month == 12
        assert window.end.day == 31
        assert window.contains(datetime(2024, 12, 31, 23, tzinfo=timezone.utc))
        assert not window.contains(datetime(2025, 1, 1, tzinfo=timezone.utc))

    def test_all_presets_total(self, portfolio):
        assert len(select_for_export(portfolio, PRESETS["all"]())) == 5
