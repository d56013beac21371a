"""Cliente HTTP especializado para a Telegram Bot API.

Estende HttpClient genérico com comportamentos específicos do Telegram:
- Endpoint `sendMessage` com o bot token no path
- Diagnóstico `Telegram error (<status>): <corpo>` na falha final
- Logging estruturado sem token e sem texto das mensagens
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from api.connectors.telegram.api_errors import parse_telegram_error
from api.connectors.telegram.http_base import (
    HttpClient,
    HttpClientConfig,
    RetryExhaustedError,
)
from app.observability import record_latency
from config.logging.filters import REDACTED
from utils.errors import UpstreamDeliveryError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

    from config.settings import TelegramSettings

logger: logging.Logger = logging.getLogger(__name__)


class TelegramHttpClient(HttpClient):
    """Cliente HTTP para o método sendMessage da Bot API."""

    def __init__(
        self,
        bot_token: str,
        config: HttpClientConfig | None = None,
        *,
        api_base_url: str = "https://api.telegram.org",
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[Any]] | None = None,
    ) -> None:
        if not bot_token or not bot_token.strip():
            raise ValueError(
                "bot_token é obrigatório para envio de mensagens. "
                "Verifique se TELEGRAM_BOT_TOKEN está configurado."
            )
        super().__init__(config, transport=transport, sleep=sleep)
        self._bot_token = bot_token.strip()
        self._endpoint = f"{api_base_url.rstrip('/')}/bot{self._bot_token}/sendMessage"

    async def send_message(self, payload: dict[str, Any]) -> int:
        """Envia mensagem via sendMessage.

        Args:
            payload: Corpo JSON já montado (campos sem valor omitidos)

        Returns:
            Número de tentativas consumidas

        Raises:
            UpstreamDeliveryError: Após esgotar as tentativas
        """
        started_at = time.perf_counter()
        try:
            result = await self.post(
                self._endpoint,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except RetryExhaustedError as exc:
            detail = self._describe_failure(exc)
            logger.error(
                "telegram_send_exhausted",
                extra={
                    "attempts": exc.attempts,
                    "status_code": exc.status_code,
                    "telegram_error_code": getattr(
                        parse_telegram_error(exc.body), "error_code", None
                    ),
                },
            )
            raise UpstreamDeliveryError(
                detail,
                attempts=exc.attempts,
                status_code_upstream=exc.status_code,
            ) from exc
        finally:
            record_latency(
                "telegram_client",
                "send_message",
                (time.perf_counter() - started_at) * 1000,
            )

        logger.info(
            "telegram_message_sent",
            extra={"attempts": result.attempts, "status_code": result.response.status_code},
        )
        return result.attempts

    def _describe_failure(self, exc: RetryExhaustedError) -> str:
        if exc.status_code is not None:
            detail = f"Telegram error ({exc.status_code}): {exc.body or ''}"
        else:
            detail = str(exc)
        return detail.replace(self._bot_token, REDACTED)


def create_telegram_http_client(
    settings: TelegramSettings | None = None,
) -> TelegramHttpClient:
    """Factory para criar cliente Telegram com config padrão.

    Args:
        settings: TelegramSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_telegram_settings

    telegram = settings or get_telegram_settings()
    config = HttpClientConfig(
        timeout_seconds=telegram.request_timeout_seconds,
        max_attempts=telegram.max_attempts,
        backoff_base_seconds=telegram.backoff_base_seconds,
        backoff_max_seconds=telegram.backoff_max_seconds,
    )
    return TelegramHttpClient(
        telegram.bot_token,
        config,
        api_base_url=telegram.api_base_url,
    )
