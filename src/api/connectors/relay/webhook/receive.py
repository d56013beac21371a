"""Leitura e parsing inicial do webhook do relay (sem PII).

O corpo é lido de forma incremental e abortado assim que ultrapassa o
limite; nada além do buffer do request corrente fica em memória.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from config.settings.relay import MAX_BODY_BYTES
from utils.errors import (
    BodyTooLargeError,
    ContentTypeError,
    EmptyBodyError,
    MalformedJsonError,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterable

JSON_CONTENT_TYPE = "application/json"


def extract_api_key(query_key: str | None, path_key: str | None) -> str | None:
    """Resolve a API key apresentada: `?api_key=` tem precedência sobre o path."""
    return query_key or path_key or None


def ensure_json_content_type(content_type: str | None) -> None:
    """Raises ContentTypeError se o header não indicar JSON."""
    if JSON_CONTENT_TYPE not in (content_type or "").lower():
        raise ContentTypeError()


async def read_body_limited(
    chunks: AsyncIterable[bytes],
    max_bytes: int = MAX_BODY_BYTES,
) -> bytes:
    """Acumula o corpo, abortando ao ultrapassar `max_bytes`.

    Raises:
        BodyTooLargeError: Corpo acima do limite
    """
    buffer = bytearray()
    async for chunk in chunks:
        buffer.extend(chunk)
        if len(buffer) > max_bytes:
            raise BodyTooLargeError()
    return bytes(buffer)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


def parse_json_body(raw_body: bytes) -> Any:
    """Decodifica o corpo JSON (RFC 8259 estrito).

    `NaN`, `Infinity` e `-Infinity` não são JSON e são rejeitados.

    Raises:
        EmptyBodyError: Corpo vazio
        MalformedJsonError: JSON inválido, não UTF-8 ou aninhado demais
    """
    if not raw_body:
        raise EmptyBodyError()
    try:
        return json.loads(raw_body, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise MalformedJsonError() from exc


async def load_webhook_payload(
    content_type: str | None,
    chunks: AsyncIterable[bytes],
    max_bytes: int = MAX_BODY_BYTES,
) -> Any:
    """Valida content type, lê o corpo com limite e decodifica o JSON."""
    ensure_json_content_type(content_type)
    raw_body = await read_body_limited(chunks, max_bytes)
    return parse_json_body(raw_body)
