"""Protocolos de normalização inbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import NormalizedMessage


class MessageNormalizerProtocol(Protocol):
    """Contrato mínimo para transformar o payload do webhook em mensagem.

    Levanta erros de `utils.errors` (MissingMessageError, EmptyMessageError)
    quando o payload não contém mensagem utilizável.
    """

    def normalize(self, payload: Any, chat_id: str) -> NormalizedMessage: ...
