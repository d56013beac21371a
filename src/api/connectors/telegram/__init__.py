"""Conector Telegram Bot API: cliente HTTP com retentativa e erros."""

from .api_errors import TelegramApiError, parse_telegram_error
from .http_base import (
    HttpClient,
    HttpClientConfig,
    HttpError,
    HttpResult,
    RetryExhaustedError,
    backoff_seconds,
)
from .http_client import TelegramHttpClient, create_telegram_http_client

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "HttpResult",
    "RetryExhaustedError",
    "TelegramApiError",
    "TelegramHttpClient",
    "backoff_seconds",
    "create_telegram_http_client",
    "parse_telegram_error",
]
