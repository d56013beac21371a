"""Settings específicas de Telegram.

Configurações do provedor de entrega via Bot API (`sendMessage`).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"


@dataclass(frozen=True)
class TelegramSettings:
    """Configurações do canal Telegram.

    Attributes:
        bot_token: Token do bot (obrigatório)
        default_chat_id: Chat de destino padrão
        thread_id_raw: Tópico padrão, como lido do ambiente
        disable_web_page_preview: Suprime preview de links (padrão True)
        api_base_url: URL base da Bot API
        request_timeout_seconds: Timeout por tentativa HTTP
        max_attempts: Total de tentativas de envio
        backoff_base_seconds: Base do backoff exponencial
        backoff_max_seconds: Teto do backoff
    """

    # Credenciais e destino
    bot_token: str = ""
    default_chat_id: str = ""
    thread_id_raw: str = ""
    disable_web_page_preview: bool = True

    # API
    api_base_url: str = TELEGRAM_API_BASE_URL

    # Timeouts e retries
    request_timeout_seconds: float = 10.0
    max_attempts: int = 3
    backoff_base_seconds: float = 0.5
    backoff_max_seconds: float = 4.0

    @property
    def default_thread_id(self) -> int | None:
        """Tópico padrão como inteiro (None se ausente ou inválido)."""
        raw = self.thread_id_raw.strip()
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            return None

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Telegram.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.bot_token:
            errors.append("TELEGRAM_BOT_TOKEN não configurado")

        if self.thread_id_raw.strip() and self.default_thread_id is None:
            errors.append(f"TELEGRAM_THREAD_ID deve ser inteiro: {self.thread_id_raw}")

        if self.request_timeout_seconds <= 0:
            errors.append("TELEGRAM_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_attempts < 1:
            errors.append("TELEGRAM_MAX_ATTEMPTS deve ser >= 1")

        return errors


def _load_from_env() -> TelegramSettings:
    """Carrega TelegramSettings a partir de variáveis de ambiente."""
    return TelegramSettings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", "").strip(),
        default_chat_id=os.getenv("TELEGRAM_CHAT_ID", "").strip(),
        thread_id_raw=os.getenv("TELEGRAM_THREAD_ID", ""),
        disable_web_page_preview=os.getenv("DISABLE_WEB_PAGE_PREVIEW") != "false",
        api_base_url=os.getenv("TELEGRAM_API_BASE_URL", TELEGRAM_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("TELEGRAM_REQUEST_TIMEOUT_SECONDS", "10")
        ),
        max_attempts=int(os.getenv("TELEGRAM_MAX_ATTEMPTS", "3")),
    )


@lru_cache(maxsize=1)
def get_telegram_settings() -> TelegramSettings:
    """Retorna instância cacheada de TelegramSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
