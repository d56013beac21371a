"""Modelos compartilhados entre api, use cases e infra do relay."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

# Sentinel registrado no ledger quando não há API keys configuradas
OPEN_TENANT_KEY = "open"

PREVIEW_MAX_CHARS = 120


class DeliveryStatus(Enum):
    """Desfecho de uma entrega."""

    DELIVERED = "delivered"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class NormalizedMessage:
    """Mensagem canônica pronta para o provedor.

    Atributos:
        chat_id: Destino no Telegram
        text: Texto final (cabeçalho + corpo + extras, já truncado)
        body: Mensagem principal aparada (base do preview do ledger)
        thread_id: Tópico do fórum (opcional)
        parse_mode: Modo de formatação repassado sem validação (opcional)
        silent: Entrega sem notificação sonora
    """

    chat_id: str
    text: str
    body: str
    thread_id: int | float | None = None
    parse_mode: str | None = None
    silent: bool = False

    @property
    def preview(self) -> str:
        return self.body[:PREVIEW_MAX_CHARS]


@dataclass(frozen=True, slots=True)
class DeliveryRecord:
    """Entrada imutável do ledger de entregas.

    Atributos:
        id: Identificador da entrega (devolvido ao chamador como deliveryId)
        chat_id: Destino usado
        key: API key usada, ou OPEN_TENANT_KEY sem autenticação
        message_preview: Primeiros 120 caracteres da mensagem
        timestamp: Momento do recebimento do request (UTC)
        status: delivered | failed
        error: Detalhe da falha (apenas status failed)
    """

    id: str
    chat_id: str
    key: str
    message_preview: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    status: DeliveryStatus = DeliveryStatus.DELIVERED
    error: str | None = None


@dataclass(frozen=True, slots=True)
class DeliveryReceipt:
    """Resultado de uma entrega bem-sucedida devolvido à rota."""

    delivery_id: str
    record: DeliveryRecord
