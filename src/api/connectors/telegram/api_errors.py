"""Erros e helpers de parsing para a Telegram Bot API."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TelegramApiError:
    """Erro retornado pela Bot API (`{"ok": false, ...}`)."""

    error_code: int
    description: str
    retry_after: int | None = None

    @property
    def is_rate_limited(self) -> bool:
        return self.error_code == 429


def parse_telegram_error(body: str | None) -> TelegramApiError | None:
    """Extrai o erro estruturado do corpo de resposta, se houver.

    Args:
        body: Corpo bruto da resposta HTTP

    Returns:
        TelegramApiError se o corpo for um erro da Bot API, None caso contrário
    """
    if not body:
        return None
    try:
        data: Any = json.loads(body)
    except ValueError:
        return None

    if not isinstance(data, dict) or data.get("ok") is not False:
        return None

    parameters = data.get("parameters")
    retry_after = parameters.get("retry_after") if isinstance(parameters, dict) else None

    return TelegramApiError(
        error_code=int(data.get("error_code") or 0),
        description=str(data.get("description") or "unknown error"),
        retry_after=retry_after if isinstance(retry_after, int) else None,
    )
