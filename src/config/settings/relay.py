"""Settings do relay (tenants, limites de request e ledger)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

MAX_BODY_BYTES: int = 128 * 1024
LEDGER_CAPACITY: int = 50
HEALTH_WINDOW_SECONDS: float = 60 * 60


@dataclass(frozen=True)
class RelaySettings:
    """Configurações do pipeline de relay.

    Attributes:
        api_keys_raw: Lista `key` / `key:chatId` separada por vírgula
        max_body_bytes: Tamanho máximo do corpo do webhook
        ledger_capacity: Máximo de entregas mantidas em memória
        health_window_seconds: Janela de contagem do /health
    """

    api_keys_raw: str = ""
    max_body_bytes: int = MAX_BODY_BYTES
    ledger_capacity: int = LEDGER_CAPACITY
    health_window_seconds: float = HEALTH_WINDOW_SECONDS

    def validate(self) -> list[str]:
        """Valida limites do relay."""
        errors: list[str] = []

        if self.max_body_bytes <= 0:
            errors.append("RELAY_MAX_BODY_BYTES deve ser > 0")

        if self.ledger_capacity <= 0:
            errors.append("RELAY_LEDGER_CAPACITY deve ser > 0")

        return errors


def _load_relay_from_env() -> RelaySettings:
    """Carrega RelaySettings de variáveis de ambiente."""
    return RelaySettings(
        api_keys_raw=os.getenv("API_KEYS", ""),
        max_body_bytes=int(os.getenv("RELAY_MAX_BODY_BYTES", str(MAX_BODY_BYTES))),
        ledger_capacity=int(os.getenv("RELAY_LEDGER_CAPACITY", str(LEDGER_CAPACITY))),
    )


@lru_cache(maxsize=1)
def get_relay_settings() -> RelaySettings:
    """Retorna instância cacheada de RelaySettings."""
    return _load_relay_from_env()
