"""HTML e-mail templates for contract expiry notices."""

from dataclasses import dataclass
from datetime import datetime
from html import escape

from jurisync.domains.contracts.models import Contract
from jurisync.domains.contracts.status import days_until_expiry
from jurisync.domains.notifications.models import (
    EmailNotification,
    NotificationPolicy,
    NotificationType,
)
from jurisync.utils.formatting import format_currency, format_date

DEFAULT_POLICY = NotificationPolicy()


@dataclass(frozen=True)
class _Tone:
    type: NotificationType
    urgency: str
    action: str
    background: str
    accent: str


def _select_tone(days_left: int, policy: NotificationPolicy) -> _Tone:
    if days_left == policy.warning_days:
        return _Tone(
            type=NotificationType.EXPIRY_WARNING,
            urgency="VENCE HOJE",
            action="necessária ação imediata para renovação ou encerramento.",
            background="#fee2e2",
            accent="#dc2626",
        )
    return _Tone(
        type=NotificationType.EXPIRY_REMINDER,
        urgency=f"VENCE EM {policy.reminder_days} DIAS",
        action="recomendamos iniciar o processo de renovação.",
        background="#fef3c7",
        accent="#d97706",
    )


def _subject(contract: Contract, tone: _Tone, policy: NotificationPolicy) -> str:
    match tone.type:
        case NotificationType.EXPIRY_WARNING:
            return f'🚨 URGENTE: Contrato "{contract.name}" vence hoje!'
        case _:
            return f'⚠️ ALERTA: Contrato "{contract.name}" vence em {policy.reminder_days} dias'


def contract_url(contract_id: str, base_url: str) -> str:
    return f"{base_url.rstrip('/')}/contracts/{contract_id}"


def _detail_row(label: str, value: str, style: str = "color: #111827;") -> str:
    return (
        "<tr>"
        f'<td style="padding: 8px 0; font-weight: bold; color: #6b7280;">{label}:</td>'
        f'<td style="padding: 8px 0; {style}">{value}</td>'
        "</tr>"
    )


def _body(contract: Contract, tone: _Tone, link: str) -> str:
    name = escape(contract.name)
    due_style = f"color: {tone.accent}; font-weight: bold;"
    rows = "".join([
        _detail_row("Nome", name),
        _detail_row("Empresa Contratante", escape(contract.contracting_company)),
        _detail_row("Parte Contratada", escape(contract.contracted_party)),
        _detail_row("Data de Vencimento", format_date(contract.end_date), due_style),
        _detail_row("Valor", format_currency(contract.value)),
        _detail_row("Responsável", escape(contract.internal_responsible)),
    ])

    return f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <div style="background: {tone.background}; padding: 20px; border-radius: 8px; margin-bottom: 20px;">
    <h2 style="color: {tone.accent}; margin: 0;">{tone.urgency}: {name}</h2>
  </div>
  <div style="background: #f9fafb; padding: 20px; border-radius: 8px; margin-bottom: 20px;">
    <h3 style="margin-top: 0; color: #374151;">Detalhes do Contrato</h3>
    <table style="width: 100%; border-collapse: collapse;">{rows}</table>
  </div>
  <div style="background: #f0f9ff; padding: 20px; border-radius: 8px; margin-bottom: 20px;">
    <p style="margin: 0; color: #0f172a;">
      <strong>Ação Necessária:</strong> Este contrato {tone.urgency.lower()}, {tone.action}
    </p>
  </div>
  <div style="text-align: center; margin: 30px 0;">
    <a href="{escape(link, quote=True)}"
       style="background: #2563eb; color: white; padding: 12px 24px; text-decoration: none; border-radius: 6px; font-weight: bold;">
      Ver Contrato no Sistema
    </a>
  </div>
  <div style="border-top: 1px solid #e5e7eb; padding-top: 20px; color: #6b7280; font-size: 14px;">
    <p>Este é um e-mail automático do sistema JuriSync.</p>
    <p>Para mais informações, acesse o sistema ou entre em contato com o administrador.</p>
  </div>
</div>
"""


def render(
    contract: Contract,
    now: datetime,
    base_url: str | None = None,
    policy: NotificationPolicy = DEFAULT_POLICY,
) -> EmailNotification:
    """Build the expiry notice for ``contract``.

    Due today renders the urgent warning; any other offset renders the
    reminder template.
    """
    tone = _select_tone(days_until_expiry(contract.end_date, now), policy)
    link = contract_url(contract.id, base_url or policy.base_url)

    return EmailNotification(
        to=contract.responsible_email,
        subject=_subject(contract, tone, policy),
        body=_body(contract, tone, link),
        contract_id=contract.id,
        type=tone.type,
    )
