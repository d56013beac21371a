"""Protocolos de envio outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import NormalizedMessage


class OutboundSenderProtocol(Protocol):
    """Contrato mínimo para entregar uma mensagem ao provedor.

    Retorna o número de tentativas consumidas em caso de sucesso.
    Levanta UpstreamDeliveryError após esgotar as tentativas.
    """

    async def send(self, message: NormalizedMessage) -> int: ...
