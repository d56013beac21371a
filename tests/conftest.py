"""Configuração do pytest para o projeto hook2telegram."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import clear_settings_cache  # noqa: E402

_RELAY_ENV_VARS = (
    "TELEGRAM_BOT_TOKEN",
    "TELEGRAM_CHAT_ID",
    "TELEGRAM_THREAD_ID",
    "TELEGRAM_API_BASE_URL",
    "TELEGRAM_REQUEST_TIMEOUT_SECONDS",
    "TELEGRAM_MAX_ATTEMPTS",
    "DISABLE_WEB_PAGE_PREVIEW",
    "API_KEYS",
    "RELAY_MAX_BODY_BYTES",
    "RELAY_LEDGER_CAPACITY",
    "RELAY_ENV_FILE",
    "ENVIRONMENT",
    "LOG_LEVEL",
    "PORT",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Cada teste parte de um ambiente limpo e sem settings cacheadas."""
    for name in _RELAY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
