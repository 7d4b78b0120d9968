"""Contract records and the pandera schema guarding the storage boundary."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal

from pandera import Column, Check, DataFrameSchema

from jurisync.utils.types import ContractID, ContractPriority, ContractStatus, Money, Record

ISO_TIMESTAMP = r"^\d{4}-\d{2}-\d{2}"

# Stored records as they come out of the key-value store: camelCase keys,
# ISO-8601 strings for timestamps, plain numbers for money.
CONTRACT_RECORD_SCHEMA = DataFrameSchema(
    columns={
        "id": Column(str, Check.str_length(min_value=1), unique=True, nullable=False),
        "name": Column(str, Check.str_length(min_value=1), nullable=False),
        "contractingCompany": Column(str, nullable=False),
        "contractedParty": Column(str, nullable=False),
        "startDate": Column(str, Check.str_matches(ISO_TIMESTAMP), nullable=False),
        "endDate": Column(str, Check.str_matches(ISO_TIMESTAMP), nullable=False),
        "value": Column(float, Check.greater_than_or_equal_to(0), nullable=False),
        "internalResponsible": Column(str, nullable=False),
        "responsibleEmail": Column(str, Check.str_matches(r"^[^@\s]+@[^@\s]+$"), nullable=False),
        "createdAt": Column(str, Check.str_matches(ISO_TIMESTAMP), nullable=False),
        "updatedAt": Column(str, Check.str_matches(ISO_TIMESTAMP), nullable=False),
    },
    strict=False,  # comments, history, permissions etc. stay nested
    coerce=True,
)


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse an ISO-8601 timestamp, treating naive values as UTC."""
    moment = value if isinstance(value, datetime) else datetime.fromisoformat(str(value))
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def format_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class ContractComment:
    id: str
    contract_id: ContractID
    author: str
    content: str
    created_at: datetime
    is_private: bool = False

    @classmethod
    def from_record(cls, record: Record) -> "ContractComment":
        return cls(
            id=str(record["id"]),
            contract_id=str(record["contractId"]),
            author=str(record["author"]),
            content=str(record["content"]),
            created_at=parse_timestamp(record["createdAt"]),
            is_private=bool(record.get("isPrivate", False)),
        )

    def to_record(self) -> Record:
        return {
            "id": self.id,
            "contractId": self.contract_id,
            "author": self.author,
            "content": self.content,
            "createdAt": format_timestamp(self.created_at),
            "isPrivate": self.is_private,
        }


@dataclass(frozen=True)
class ContractHistoryEntry:
    id: str
    contract_id: ContractID
    action: str
    author: str
    timestamp: datetime
    field: str | None = None
    old_value: str | None = None
    new_value: str | None = None

    @classmethod
    def from_record(cls, record: Record) -> "ContractHistoryEntry":
        return cls(
            id=str(record["id"]),
            contract_id=str(record["contractId"]),
            action=str(record["action"]),
            author=str(record["author"]),
            timestamp=parse_timestamp(record["timestamp"]),
            field=record.get("field"),
            old_value=record.get("oldValue"),
            new_value=record.get("newValue"),
        )

    def to_record(self) -> Record:
        record: Record = {
            "id": self.id,
            "contractId": self.contract_id,
            "action": self.action,
            "author": self.author,
            "timestamp": format_timestamp(self.timestamp),
        }
        if self.field is not None:
            record.update(field=self.field, oldValue=self.old_value, newValue=self.new_value)
        return record


@dataclass(frozen=True)
class ContractPermissions:
    can_view: tuple[str, ...] = ()
    can_edit: tuple[str, ...] = ()
    can_comment: tuple[str, ...] = ()
    is_public: bool = True

    @classmethod
    def from_record(cls, record: Record | None) -> "ContractPermissions":
        if not record:
            return cls()
        return cls(
            can_view=tuple(record.get("canView", ())),
            can_edit=tuple(record.get("canEdit", ())),
            can_comment=tuple(record.get("canComment", ())),
            is_public=bool(record.get("isPublic", True)),
        )

    def to_record(self) -> Record:
        return {
            "canView": list(self.can_view),
            "canEdit": list(self.can_edit),
            "canComment": list(self.can_comment),
            "isPublic": self.is_public,
        }


@dataclass(frozen=True)
class Contract:
    """A managed contract. ``status`` is a cached derivation of ``end_date``."""

    id: ContractID
    name: str
    contracting_company: str
    contracted_party: str
    start_date: datetime
    end_date: datetime
    value: Money
    internal_responsible: str
    responsible_email: str
    created_at: datetime
    updated_at: datetime
    status: ContractStatus = ContractStatus.ACTIVE
    description: str | None = None
    file_name: str | None = None
    file_type: str | None = None
    file_path: str | None = None
    comments: tuple[ContractComment, ...] = ()
    history: tuple[ContractHistoryEntry, ...] = ()
    tags: tuple[str, ...] = ()
    priority: ContractPriority = ContractPriority.MEDIUM
    created_by: str | None = None
    is_archived: bool = False
    permissions: ContractPermissions = field(default_factory=ContractPermissions)

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Contract {self.id} has a negative value: {self.value}")

    def with_status(self, status: ContractStatus) -> "Contract":
        return replace(self, status=status)

    @classmethod
    def from_record(cls, record: Record) -> "Contract":
        """Build a contract from its storage shape."""
        try:
            status = ContractStatus(record.get("status"))
        except ValueError:
            status = ContractStatus.ACTIVE  # recomputed on load

        return cls(
            id=str(record["id"]),
            name=str(record["name"]),
            contracting_company=str(record["contractingCompany"]),
            contracted_party=str(record["contractedParty"]),
            start_date=parse_timestamp(record["startDate"]),
            end_date=parse_timestamp(record["endDate"]),
            value=Decimal(str(record["value"])),
            internal_responsible=str(record["internalResponsible"]),
            responsible_email=str(record["responsibleEmail"]),
            created_at=parse_timestamp(record["createdAt"]),
            updated_at=parse_timestamp(record["updatedAt"]),
            status=status,
            description=record.get("description"),
            file_name=record.get("fileName"),
            file_type=record.get("fileType"),
            file_path=record.get("filePath"),
            comments=tuple(ContractComment.from_record(c) for c in record.get("comments", [])),
            history=tuple(ContractHistoryEntry.from_record(h) for h in record.get("history", [])),
            tags=tuple(record.get("tags", ())),
            priority=ContractPriority(record.get("priority", ContractPriority.MEDIUM)),
            created_by=record.get("createdBy"),
            is_archived=bool(record.get("isArchived", False)),
            permissions=ContractPermissions.from_record(record.get("permissions")),
        )

    def to_record(self) -> Record:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "contractingCompany": self.contracting_company,
            "contractedParty": self.contracted_party,
            "startDate": format_timestamp(self.start_date),
            "endDate": format_timestamp(self.end_date),
            "value": float(self.value),
            "internalResponsible": self.internal_responsible,
            "responsibleEmail": self.responsible_email,
            "status": str(self.status),
            "fileName": self.file_name,
            "fileType": self.file_type,
            "filePath": self.file_path,
            "tags": list(self.tags),
            "priority": str(self.priority),
            "createdBy": self.created_by,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
            "comments": [c.to_record() for c in self.comments],
            "history": [h.to_record() for h in self.history],
            "isArchived": self.is_archived,
            "permissions": self.permissions.to_record(),
        }


@dataclass(frozen=True)
class ContractFilters:
    """Dashboard query. Every field is optional; ``None`` imposes no constraint."""

    search: str | None = None
    status: ContractStatus | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    responsible: str | None = None
    contracting_company: str | None = None
    priority: ContractPriority | None = None
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class DashboardStats:
    total_contracts: int
    active_contracts: int
    expiring_soon_contracts: int
    expired_contracts: int
    total_value: Decimal
    monthly_value: Decimal
    average_contract_value: Decimal
    contracts_by_responsible: dict[str, int]


@dataclass(frozen=True)
class StatusBucket:
    status: ContractStatus
    label: str
    count: int
    color: str


@dataclass(frozen=True)
class PriorityBucket:
    priority: ContractPriority
    count: int
    color: str


@dataclass(frozen=True)
class MonthlyPoint:
    month: str  # YYYY-MM
    label: str
    contracts: int
    value: Decimal


@dataclass(frozen=True)
class ChartData:
    contracts_by_status: list[StatusBucket]
    monthly_evolution: list[MonthlyPoint]
    financial_by_month: list[MonthlyPoint]
    contracts_by_priority: list[PriorityBucket]

