"""Export options and artifact descriptors."""

from dataclasses import dataclass
from enum import StrEnum

from jurisync.domains.contracts.models import format_timestamp
from jurisync.utils.types import ContractStatus, DateRange


class ExportFormat(StrEnum):
    CSV = "csv"
    PDF = "pdf"
    JSON = "json"


@dataclass(frozen=True)
class ExportOptions:
    format: ExportFormat = ExportFormat.CSV
    include_active: bool = True
    include_expiring_soon: bool = True
    include_expired: bool = True
    date_range: DateRange | None = None

    def includes(self, status: ContractStatus) -> bool:
        match status:
            case ContractStatus.ACTIVE:
                return self.include_active
            case ContractStatus.EXPIRING_SOON:
                return self.include_expiring_soon
            case ContractStatus.EXPIRED:
                return self.include_expired

    def to_record(self) -> dict:
        record: dict = {
            "format": str(self.format),
            "includeActive": self.include_active,
            "includeExpiringSoon": self.include_expiring_soon,
            "includeExpired": self.include_expired,
        }
        if self.date_range is not None:
            record["dateRange"] = {
                "start": format_timestamp(self.date_range.start),
                "end": format_timestamp(self.date_range.end),
            }
        return record


@dataclass(frozen=True)
class ArtifactSpec:
    filename: str
    mime: str


CSV_ARTIFACT = ArtifactSpec("contratos-jurisync.csv", "text/csv")
JSON_ARTIFACT = ArtifactSpec("contratos-jurisync.json", "application/json")


class ExportPreconditionError(ValueError):
    """An export was requested without the inputs it needs."""
