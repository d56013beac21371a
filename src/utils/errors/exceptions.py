"""Exceções do relay: taxonomia de falhas por etapa do pipeline.

Cada erro carrega o status HTTP e a mensagem pública devolvida ao chamador.
As rotas apenas traduzem `RelayError` em resposta; nenhuma delas é
retentada, exceto a entrega (retentativas internas ao cliente Telegram).
"""

from __future__ import annotations

from typing import Any


class ConfigurationError(RuntimeError):
    """Configuração inválida detectada no boot (fatal)."""


class RelayError(Exception):
    """Base para falhas reportadas ao chamador do webhook."""

    status_code: int = 500
    public_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.public_message)
        self.public_message = message or self.public_message

    def to_payload(self) -> dict[str, Any]:
        """Corpo JSON da resposta de erro."""
        return {"error": self.public_message}


class AuthError(RelayError):
    """API key ausente ou desconhecida com chaves configuradas."""

    status_code = 401
    public_message = "Unauthorized: missing or invalid API key"


class MisconfiguredDestinationError(RelayError):
    """Tenant autenticado, mas sem chat de destino resolvível."""

    status_code = 500
    public_message = "Chat id not configured for this webhook key"


class RequestValidationError(RelayError):
    """Base para erros estruturais do request (4xx)."""

    status_code = 400


class ContentTypeError(RequestValidationError):
    status_code = 415
    public_message = "Content-Type must be application/json"


class BodyTooLargeError(RequestValidationError):
    status_code = 413
    public_message = "Payload too large"


class EmptyBodyError(RequestValidationError):
    public_message = "Empty body"


class MalformedJsonError(RequestValidationError):
    public_message = "Body must be valid JSON"


class RequestAbortedError(RequestValidationError):
    """Cliente desconectou antes do corpo ser lido por completo."""

    public_message = "Request aborted by client"


class MissingMessageError(RequestValidationError):
    public_message = "Payload must include a message field"


class EmptyMessageError(RequestValidationError):
    public_message = "Message is empty after trimming"


class UpstreamDeliveryError(RelayError):
    """Entrega ao Telegram falhou após esgotar as tentativas.

    Attributes:
        detail: Diagnóstico da última falha (status e corpo do provedor).
        attempts: Número de tentativas realizadas.
        status_code_upstream: Status HTTP da última resposta, se houve.
    """

    status_code = 502
    public_message = "Failed to send message to Telegram"

    def __init__(
        self,
        detail: str,
        attempts: int = 0,
        status_code_upstream: int | None = None,
    ) -> None:
        super().__init__(self.public_message)
        self.detail = detail
        self.attempts = attempts
        self.status_code_upstream = status_code_upstream

    def __str__(self) -> str:
        return self.detail

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.public_message, "details": self.detail}
