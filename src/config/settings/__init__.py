"""Agregador de settings do hook2telegram.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.env_file import load_env_file

# Relay settings
from config.settings.relay import (
    HEALTH_WINDOW_SECONDS,
    LEDGER_CAPACITY,
    MAX_BODY_BYTES,
    RelaySettings,
    get_relay_settings,
)

# Provider settings
from config.settings.telegram import (
    TELEGRAM_API_BASE_URL,
    TelegramSettings,
    get_telegram_settings,
)


def clear_settings_cache() -> None:
    """Descarta settings cacheadas (reload após mudar o ambiente)."""
    get_base_settings.cache_clear()
    get_relay_settings.cache_clear()
    get_telegram_settings.cache_clear()


__all__ = [
    # Constants
    "HEALTH_WINDOW_SECONDS",
    "LEDGER_CAPACITY",
    "MAX_BODY_BYTES",
    "TELEGRAM_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Relay
    "RelaySettings",
    # Provider
    "TelegramSettings",
    "clear_settings_cache",
    "get_base_settings",
    "get_relay_settings",
    "get_telegram_settings",
    "load_env_file",
]
