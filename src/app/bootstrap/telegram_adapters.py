"""Adapters concretos para Telegram (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.normalizers.relay import normalize_notification
from api.payload_builders.telegram import TextPayloadBuilder
from app.protocols.normalizer import MessageNormalizerProtocol
from app.protocols.outbound_sender import OutboundSenderProtocol

if TYPE_CHECKING:
    from api.connectors.telegram import TelegramHttpClient
    from app.protocols.models import NormalizedMessage


class RelayNotificationNormalizer(MessageNormalizerProtocol):
    """Normalizador do payload do webhook com tópico padrão configurado."""

    def __init__(self, default_thread_id: int | None = None) -> None:
        self._default_thread_id = default_thread_id

    def normalize(self, payload: Any, chat_id: str) -> NormalizedMessage:
        return normalize_notification(
            payload,
            chat_id=chat_id,
            default_thread_id=self._default_thread_id,
        )


class TelegramOutboundSender(OutboundSenderProtocol):
    """Sender outbound usando o cliente HTTP do Telegram."""

    def __init__(
        self,
        client: TelegramHttpClient,
        builder: TextPayloadBuilder | None = None,
    ) -> None:
        self._client = client
        self._builder = builder or TextPayloadBuilder()

    async def send(self, message: NormalizedMessage) -> int:
        return await self._client.send_message(self._builder.build(message))
