"""Shared fixtures: a fixed reference instant and a contract factory."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from jurisync.domains.contracts.models import Contract
from jurisync.domains.contracts.status import classify
from jurisync.utils.types import ContractPriority

REFERENCE_NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


def make_contract(
    contract_id: str = "c-1",
    *,
    now: datetime = REFERENCE_NOW,
    ends_in_days: float = 30,
    started_days_ago: float = 90,
    value: str = "1000",
    name: str = "Contrato de Teste",
    company: str = "Empresa Contratante Ltda",
    party: str = "Parte Contratada SA",
    responsible: str = "Ana Costa",
    priority: ContractPriority = ContractPriority.MEDIUM,
    tags: tuple[str, ...] = (),
    file_name: str | None = None,
) -> Contract:
    end_date = now + timedelta(days=ends_in_days)
    start_date = now - timedelta(days=started_days_ago)
    return Contract(
        id=contract_id,
        name=name,
        contracting_company=company,
        contracted_party=party,
        start_date=start_date,
        end_date=end_date,
        value=Decimal(value),
        internal_responsible=responsible,
        responsible_email=f"{responsible.split()[0].lower()}@example.com",
        created_at=start_date,
        updated_at=start_date,
        status=classify(end_date, now),
        priority=priority,
        tags=tags,
        file_name=file_name,
    )


@pytest.fixture
def now() -> datetime:
    return REFERENCE_NOW


@pytest.fixture
def portfolio() -> list[Contract]:
    """One contract per interesting lifecycle position relative to REFERENCE_NOW."""
    return [
        make_contract("active", ends_in_days=45, value="120000", name="Prestação de Serviços - TI",
                      company="Tech Solutions Ltda", responsible="João Silva",
                      priority=ContractPriority.HIGH, tags=("ti",)),
        make_contract("reminder", ends_in_days=7, value="45000", name="Manutenção - Equipamentos",
                      company="Manutenção Pro", responsible="Pedro Oliveira", tags=("manutencao",)),
        make_contract("due-today", ends_in_days=0, value="30000", name="Locação - Escritório",
                      company="Imobiliária Central", responsible="Ana Costa"),
        make_contract("six-days", ends_in_days=6, value="15000", name="Licenças de Software",
                      company="Tech Solutions Ltda", responsible="João Silva"),
        make_contract("expired", ends_in_days=-1, value="85000", name="Fornecimento - Materiais",
                      company="Fornecedora ABC", responsible="Carlos Lima",
                      priority=ContractPriority.CRITICAL),
    ]
