"""Exports domain: CSV, JSON, and printable report artifacts."""

from jurisync.domains.exports.export import (
    CSV_HEADERS,
    export_with_options,
    select_for_export,
    to_csv,
    to_json,
)
from jurisync.domains.exports.models import (
    ExportFormat,
    ExportOptions,
    ExportPreconditionError,
)
from jurisync.domains.exports.presets import PRESETS
from jurisync.domains.exports.report import to_report
