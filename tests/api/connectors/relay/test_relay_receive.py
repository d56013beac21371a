"""Testes da leitura e parsing do webhook do relay."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest

from api.connectors.relay.webhook import (
    ensure_json_content_type,
    extract_api_key,
    load_webhook_payload,
    parse_json_body,
    read_body_limited,
)
from utils.errors import (
    BodyTooLargeError,
    ContentTypeError,
    EmptyBodyError,
    MalformedJsonError,
)


async def _chunks(*parts: bytes) -> AsyncIterator[bytes]:
    for part in parts:
        yield part


class TestExtractApiKey:
    def test_query_wins_over_path(self) -> None:
        assert extract_api_key("from-query", "from-path") == "from-query"

    def test_path_used_without_query(self) -> None:
        assert extract_api_key(None, "from-path") == "from-path"
        assert extract_api_key("", "from-path") == "from-path"

    def test_absent(self) -> None:
        assert extract_api_key(None, None) is None
        assert extract_api_key("", "") is None


class TestContentType:
    @pytest.mark.parametrize(
        "value",
        ["application/json", "application/json; charset=utf-8", "Application/JSON"],
    )
    def test_accepts_json(self, value: str) -> None:
        ensure_json_content_type(value)

    @pytest.mark.parametrize("value", [None, "", "text/plain", "application/x-www-form-urlencoded"])
    def test_rejects_other_types(self, value: str | None) -> None:
        with pytest.raises(ContentTypeError) as exc_info:
            ensure_json_content_type(value)
        assert exc_info.value.status_code == 415


class TestReadBodyLimited:
    @pytest.mark.asyncio
    async def test_concatenates_chunks(self) -> None:
        assert await read_body_limited(_chunks(b'{"a"', b":1}"), 100) == b'{"a":1}'

    @pytest.mark.asyncio
    async def test_exact_limit_is_accepted(self) -> None:
        assert len(await read_body_limited(_chunks(b"x" * 10), 10)) == 10

    @pytest.mark.asyncio
    async def test_aborts_as_soon_as_limit_is_crossed(self) -> None:
        consumed: list[bytes] = []

        async def tracking() -> AsyncIterator[bytes]:
            for part in (b"x" * 8, b"x" * 8, b"x" * 8):
                consumed.append(part)
                yield part

        with pytest.raises(BodyTooLargeError) as exc_info:
            await read_body_limited(tracking(), 10)

        assert exc_info.value.status_code == 413
        assert len(consumed) == 2


class TestParseJsonBody:
    def test_empty_body(self) -> None:
        with pytest.raises(EmptyBodyError):
            parse_json_body(b"")

    @pytest.mark.parametrize(
        "raw",
        [
            b"{",
            b"not json",
            b"\xff\xfe",
            b'{"message": NaN}',
            b"[Infinity]",
            b"-Infinity",
        ],
    )
    def test_malformed(self, raw: bytes) -> None:
        with pytest.raises(MalformedJsonError):
            parse_json_body(raw)

    def test_deeply_nested_is_malformed(self) -> None:
        """Aninhamento acima do limite de recursão é JSON inválido, não erro 500."""
        with pytest.raises(MalformedJsonError):
            parse_json_body(b"[" * 100_000)

    def test_valid(self) -> None:
        assert parse_json_body(b'{"message": "hi"}') == {"message": "hi"}


@pytest.mark.asyncio
async def test_load_webhook_payload_checks_content_type_before_reading() -> None:
    read = False

    async def body() -> AsyncIterator[bytes]:
        nonlocal read
        read = True
        yield b"{}"

    with pytest.raises(ContentTypeError):
        await load_webhook_payload("text/plain", body(), 100)
    assert read is False


@pytest.mark.asyncio
async def test_load_webhook_payload() -> None:
    payload = await load_webhook_payload("application/json", _chunks(b'{"message":"ok"}'), 100)
    assert payload == {"message": "ok"}
