"""Known-good sample portfolio used when the store is empty or unreadable."""

from datetime import datetime, timedelta
from decimal import Decimal

from jurisync.domains.contracts.models import Contract, ContractComment, ContractHistoryEntry
from jurisync.utils.types import ContractPriority, ContractStatus


def _days(now: datetime, offset: int) -> datetime:
    return now + timedelta(days=offset)


def seed_contracts(now: datetime) -> list[Contract]:
    """Five sample contracts with dates relative to ``now``."""
    return [
        Contract(
            id="1",
            name="Contrato de Prestação de Serviços - TI",
            contracting_company="Tech Solutions Ltda",
            contracted_party="Digital Systems Inc",
            start_date=_days(now, -180),
            end_date=_days(now, 30),
            value=Decimal("120000"),
            internal_responsible="João Silva",
            responsible_email="joao.silva@techsolutions.com",
            status=ContractStatus.ACTIVE,
            file_path="/contracts/contract-1.pdf",
            file_name="contrato-ti-2024.pdf",
            file_type="pdf",
            created_at=_days(now, -180),
            updated_at=_days(now, -5),
            priority=ContractPriority.HIGH,
            comments=(
                ContractComment("c1", "1", "Maria Santos", "Verificar renovação automática", _days(now, -10)),
            ),
            history=(
                ContractHistoryEntry("h1", "1", "Contrato criado", "João Silva", _days(now, -180)),
            ),
        ),
        Contract(
            id="2",
            name="Contrato de Locação - Escritório",
            contracting_company="Imobiliária Central",
            contracted_party="Tech Solutions Ltda",
            start_date=_days(now, -365),
            end_date=_days(now, 365),
            value=Decimal("240000"),
            internal_responsible="Ana Costa",
            responsible_email="ana.costa@techsolutions.com",
            status=ContractStatus.ACTIVE,
            file_path="/contracts/contract-2.docx",
            file_name="contrato-locacao-escritorio.docx",
            file_type="docx",
            created_at=_days(now, -365),
            updated_at=_days(now, -30),
            history=(
                ContractHistoryEntry("h3", "2", "Contrato criado", "Ana Costa", _days(now, -365)),
            ),
        ),
        Contract(
            id="3",
            name="Contrato de Fornecimento - Materiais",
            contracting_company="Fornecedora ABC",
            contracted_party="Tech Solutions Ltda",
            start_date=_days(now, -200),
            end_date=_days(now, -10),
            value=Decimal("85000"),
            internal_responsible="Carlos Lima",
            responsible_email="carlos.lima@techsolutions.com",
            status=ContractStatus.EXPIRED,
            file_path="/contracts/contract-3.pdf",
            file_name="contrato-fornecimento-materiais.pdf",
            file_type="pdf",
            created_at=_days(now, -200),
            updated_at=_days(now, -15),
            comments=(
                ContractComment("c2", "3", "Carlos Lima", "Contrato vencido - avaliar renovação", _days(now, -15)),
            ),
            history=(
                ContractHistoryEntry("h4", "3", "Contrato criado", "Carlos Lima", _days(now, -200)),
                ContractHistoryEntry(
                    "h5", "3", "Status atualizado", "Sistema", _days(now, -10),
                    field="status", old_value="active", new_value="expired",
                ),
            ),
        ),
        Contract(
            id="4",
            name="Contrato de Manutenção - Equipamentos",
            contracting_company="Manutenção Pro",
            contracted_party="Tech Solutions Ltda",
            start_date=_days(now, -90),
            end_date=_days(now, 3),
            value=Decimal("45000"),
            internal_responsible="Pedro Oliveira",
            responsible_email="pedro.oliveira@techsolutions.com",
            status=ContractStatus.EXPIRING_SOON,
            file_path="/contracts/contract-4.pdf",
            file_name="contrato-manutencao-equipamentos.pdf",
            file_type="pdf",
            created_at=_days(now, -90),
            updated_at=_days(now, -2),
            priority=ContractPriority.CRITICAL,
            history=(
                ContractHistoryEntry("h6", "4", "Contrato criado", "Pedro Oliveira", _days(now, -90)),
            ),
        ),
        Contract(
            id="5",
            name="Contrato de Consultoria - Financeiro",
            contracting_company="Consultoria XYZ",
            contracted_party="Tech Solutions Ltda",
            start_date=_days(now, -60),
            end_date=_days(now, 300),
            value=Decimal("180000"),
            internal_responsible="Fernanda Rocha",
            responsible_email="fernanda.rocha@techsolutions.com",
            status=ContractStatus.ACTIVE,
            file_path="/contracts/contract-5.docx",
            file_name="contrato-consultoria-financeiro.docx",
            file_type="docx",
            created_at=_days(now, -60),
            updated_at=_days(now, -1),
            comments=(
                ContractComment(
                    "c3", "5", "Fernanda Rocha", "Consultoria em andamento, resultados positivos", _days(now, -30),
                ),
            ),
            history=(
                ContractHistoryEntry("h7", "5", "Contrato criado", "Fernanda Rocha", _days(now, -60)),
            ),
        ),
    ]
