"""Testes do cliente Telegram com httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.telegram import (
    HttpClientConfig,
    TelegramHttpClient,
    backoff_seconds,
    create_telegram_http_client,
    parse_telegram_error,
)
from config.logging.filters import REDACTED
from config.settings import TelegramSettings
from utils.errors import UpstreamDeliveryError

TOKEN = "123456:SECRET-token"


class RecordingSleep:
    """Sleep fake que registra os delays pedidos."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def _client(handler, sleep: RecordingSleep | None = None) -> TelegramHttpClient:
    return TelegramHttpClient(
        TOKEN,
        HttpClientConfig(),
        transport=httpx.MockTransport(handler),
        sleep=sleep or RecordingSleep(),
    )


def test_backoff_schedule() -> None:
    assert backoff_seconds(1, 0.5, 4.0) == 1.0
    assert backoff_seconds(2, 0.5, 4.0) == 2.0
    assert backoff_seconds(3, 0.5, 4.0) == 4.0
    assert backoff_seconds(5, 0.5, 4.0) == 4.0


def test_empty_token_is_rejected() -> None:
    with pytest.raises(ValueError):
        TelegramHttpClient("  ")


@pytest.mark.asyncio
async def test_send_message_success_on_first_attempt() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"ok": True, "result": {"message_id": 1}})

    sleep = RecordingSleep()
    attempts = await _client(handler, sleep).send_message({"chat_id": "123", "text": "hi"})

    assert attempts == 1
    assert sleep.delays == []
    assert len(requests) == 1
    assert requests[0].method == "POST"
    assert requests[0].url.path == f"/bot{TOKEN}/sendMessage"
    assert json.loads(requests[0].content) == {"chat_id": "123", "text": "hi"}


@pytest.mark.asyncio
async def test_retries_until_success() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        if calls < 3:
            return httpx.Response(500, text="busy")
        return httpx.Response(200, json={"ok": True})

    sleep = RecordingSleep()
    attempts = await _client(handler, sleep).send_message({"chat_id": "1", "text": "x"})

    assert attempts == 3
    assert sleep.delays == [1.0, 2.0]


@pytest.mark.asyncio
async def test_always_failing_provider_exhausts_three_attempts() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(
            400,
            json={"ok": False, "error_code": 400, "description": "Bad Request: chat not found"},
        )

    sleep = RecordingSleep()
    with pytest.raises(UpstreamDeliveryError) as exc_info:
        await _client(handler, sleep).send_message({"chat_id": "1", "text": "x"})

    error = exc_info.value
    assert calls == 3
    assert sleep.delays == [1.0, 2.0]
    assert error.status_code == 502
    assert error.attempts == 3
    assert error.status_code_upstream == 400
    assert str(error).startswith("Telegram error (400): ")
    assert "chat not found" in str(error)
    assert error.to_payload()["error"] == "Failed to send message to Telegram"


@pytest.mark.asyncio
async def test_transport_error_detail_never_contains_token() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError(f"cannot reach {request.url}", request=request)

    with pytest.raises(UpstreamDeliveryError) as exc_info:
        await _client(handler).send_message({"chat_id": "1", "text": "x"})

    detail = str(exc_info.value)
    assert exc_info.value.status_code_upstream is None
    assert TOKEN not in detail
    assert REDACTED in detail


def test_factory_uses_settings() -> None:
    settings = TelegramSettings(bot_token=TOKEN, max_attempts=5, request_timeout_seconds=2.5)
    client = create_telegram_http_client(settings)
    assert client.config.max_attempts == 5
    assert client.config.timeout_seconds == 2.5


class TestParseTelegramError:
    def test_rate_limit(self) -> None:
        error = parse_telegram_error(
            '{"ok": false, "error_code": 429, "description": "Too Many Requests",'
            ' "parameters": {"retry_after": 3}}'
        )
        assert error is not None
        assert error.is_rate_limited is True
        assert error.retry_after == 3

    @pytest.mark.parametrize("body", [None, "", "<html>", '{"ok": true}', "[]"])
    def test_not_an_api_error(self, body: str | None) -> None:
        assert parse_telegram_error(body) is None
