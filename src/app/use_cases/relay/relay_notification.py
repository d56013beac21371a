"""Use case: relay de uma notificação HTTP para o Telegram.

Ordem das verificações (cada uma interrompe o fluxo):
1. Autenticação da API key
2. Destino resolvido
3. Corpo (content type, tamanho, JSON), lido só após autenticar
4. Mensagem válida

Somente requests que chegam ao envio geram entrada no ledger.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from app.observability import record_delivery, record_latency
from app.protocols.models import (
    OPEN_TENANT_KEY,
    DeliveryReceipt,
    DeliveryRecord,
    DeliveryStatus,
)
from app.use_cases.relay.dispatch_tasks import run_to_completion
from utils.errors import AuthError, MisconfiguredDestinationError, UpstreamDeliveryError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from app.domain.tenants import TenantRegistry
    from app.protocols import (
        DeliveryLedgerProtocol,
        MessageNormalizerProtocol,
        NormalizedMessage,
        OutboundSenderProtocol,
    )

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_delivery_id() -> str:
    return str(uuid.uuid4())


def mask_key(key: str | None) -> str:
    """Rótulo seguro para logs: nunca a key completa."""
    if not key:
        return OPEN_TENANT_KEY
    if len(key) <= 4:
        return "***"
    return f"{key[:4]}***"


@dataclass(frozen=True)
class InboundNotification:
    """Request recebido pela rota, com o corpo ainda não lido.

    Atributos:
        api_key: Key apresentada (query tem precedência sobre o path)
        load_payload: Lê e decodifica o corpo; levanta erros 4xx do relay
        received_at: Momento do recebimento (timestamp do ledger)
    """

    api_key: str | None
    load_payload: Callable[[], Awaitable[Any]]
    received_at: datetime = field(default_factory=_utcnow)


class RelayNotificationUseCase:
    """Orquestra autenticação, normalização, envio e registro no ledger."""

    def __init__(
        self,
        registry: TenantRegistry,
        normalizer: MessageNormalizerProtocol,
        sender: OutboundSenderProtocol,
        ledger: DeliveryLedgerProtocol,
        *,
        id_factory: Callable[[], str] = _new_delivery_id,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._registry = registry
        self._normalizer = normalizer
        self._sender = sender
        self._ledger = ledger
        self._id_factory = id_factory
        self._clock = clock
        self._started_monotonic = time.monotonic()

    @property
    def registry(self) -> TenantRegistry:
        return self._registry

    @property
    def ledger(self) -> DeliveryLedgerProtocol:
        return self._ledger

    def uptime_seconds(self) -> float:
        return time.monotonic() - self._started_monotonic

    def recent_deliveries(self, window: timedelta) -> int:
        """Entregas registradas dentro da janela terminando agora."""
        return self._ledger.recent_within_window(window, self._clock())

    async def execute(self, inbound: InboundNotification) -> DeliveryReceipt:
        """Processa a notificação.

        Raises:
            AuthError: Key ausente ou desconhecida com proteção ativa
            MisconfiguredDestinationError: Sem chat de destino para a key
            RequestValidationError: Corpo ou mensagem inválidos
            UpstreamDeliveryError: Telegram falhou após as retentativas
        """
        resolution = self._registry.resolve(inbound.api_key)
        if not resolution.authorized:
            logger.warning(
                "relay_unauthorized",
                extra={"key_present": bool(inbound.api_key)},
            )
            raise AuthError()

        tenant = mask_key(resolution.key)
        if not resolution.chat_id:
            logger.error("relay_destination_missing", extra={"tenant": tenant})
            raise MisconfiguredDestinationError()

        payload = await inbound.load_payload()
        message = self._normalizer.normalize(payload, resolution.chat_id)

        record = DeliveryRecord(
            id=self._id_factory(),
            chat_id=resolution.chat_id,
            key=resolution.key or OPEN_TENANT_KEY,
            message_preview=message.preview,
            timestamp=inbound.received_at,
        )
        return await run_to_completion(self._dispatch(message, record, tenant))

    async def _dispatch(
        self,
        message: NormalizedMessage,
        record: DeliveryRecord,
        tenant: str,
    ) -> DeliveryReceipt:
        started_at = time.perf_counter()
        try:
            attempts = await self._sender.send(message)
        except UpstreamDeliveryError as exc:
            self._ledger.record(replace(record, status=DeliveryStatus.FAILED, error=str(exc)))
            record_delivery(DeliveryStatus.FAILED.value, exc.attempts, tenant=tenant)
            logger.error(
                "relay_delivery_failed",
                extra={
                    "delivery_id": record.id,
                    "tenant": tenant,
                    "attempts": exc.attempts,
                    "upstream_status": exc.status_code_upstream,
                },
            )
            raise
        finally:
            record_latency("relay", "dispatch", (time.perf_counter() - started_at) * 1000)

        self._ledger.record(record)
        record_delivery(DeliveryStatus.DELIVERED.value, attempts, tenant=tenant)
        logger.info(
            "relay_delivered",
            extra={"delivery_id": record.id, "tenant": tenant, "attempts": attempts},
        )
        return DeliveryReceipt(delivery_id=record.id, record=record)
