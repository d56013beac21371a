"""Normalizer do relay — payload JSON arbitrário → NormalizedMessage.

Regras:
1. `message` (alias `text`) obrigatório; string aparada não pode ser vazia
2. `source` e `subject` viram o cabeçalho `[source] subject`
3. Campos não reconhecidos são anexados como JSON indentado após `---`
4. Texto acima de MAX_TEXT_CHARS é cortado e recebe TRUNCATION_MARKER
5. Tópico: thread_id > topic_id > message_thread_id > padrão configurado
6. `silent` (ou `silence`) igual a true entrega sem notificação
"""

from __future__ import annotations

import json
import math
from typing import Any

from app.protocols.models import NormalizedMessage
from utils.errors import EmptyMessageError, MissingMessageError

MAX_TEXT_CHARS = 3900
TRUNCATION_MARKER = "\n\n[truncated]"
EXTRAS_SEPARATOR = "\n\n---\n"

THREAD_ID_FIELDS = ("thread_id", "topic_id", "message_thread_id")

# `silence` é sinônimo de `silent`
SILENT_FIELDS = ("silent", "silence")

CONTROL_FIELDS = frozenset(
    {
        "message",
        "text",
        "source",
        "subject",
        "parse_mode",
        *SILENT_FIELDS,
        *THREAD_ID_FIELDS,
    }
)


def normalize_notification(
    payload: Any,
    *,
    chat_id: str,
    default_thread_id: int | None = None,
) -> NormalizedMessage:
    """Normaliza o corpo do webhook.

    Args:
        payload: JSON decodificado (qualquer tipo; só objetos são aceitos)
        chat_id: Destino já resolvido pelo registro de tenants
        default_thread_id: Tópico usado quando o payload não traz um válido

    Raises:
        MissingMessageError: Sem `message`/`text` (ou payload não-objeto)
        EmptyMessageError: Mensagem vazia após trim
    """
    fields: dict[str, Any] = payload if isinstance(payload, dict) else {}

    primary = fields.get("message")
    if primary is None:
        primary = fields.get("text")
    if primary is None:
        raise MissingMessageError()

    body = coerce_text(primary).strip()
    if not body:
        raise EmptyMessageError()

    parse_mode = fields.get("parse_mode")

    return NormalizedMessage(
        chat_id=chat_id,
        text=compose_text(
            body,
            source=_optional_text(fields.get("source")),
            subject=_optional_text(fields.get("subject")),
            extras={k: v for k, v in fields.items() if k not in CONTROL_FIELDS},
        ),
        body=body,
        thread_id=resolve_thread_id(fields, default_thread_id),
        parse_mode=parse_mode if isinstance(parse_mode, str) else None,
        silent=any(fields.get(name) is True for name in SILENT_FIELDS),
    )


def compose_text(
    body: str,
    *,
    source: str = "",
    subject: str = "",
    extras: dict[str, Any] | None = None,
) -> str:
    """Monta cabeçalho + corpo + bloco de extras e aplica o limite."""
    header_parts: list[str] = []
    if source:
        header_parts.append(f"[{source}]")
    if subject:
        header_parts.append(subject)
    header = " ".join(header_parts)

    combined = f"{header}\n{body}" if header else body
    if extras:
        combined += EXTRAS_SEPARATOR + json.dumps(extras, indent=2, ensure_ascii=False)

    if len(combined) > MAX_TEXT_CHARS:
        return combined[:MAX_TEXT_CHARS] + TRUNCATION_MARKER
    return combined


def resolve_thread_id(
    fields: dict[str, Any],
    default_thread_id: int | None = None,
) -> int | float | None:
    """Primeiro campo de tópico presente, coerido para número finito."""
    value = next(
        (fields[name] for name in THREAD_ID_FIELDS if fields.get(name) is not None),
        None,
    )
    if value is None:
        return default_thread_id

    number = _coerce_number(value)
    return default_thread_id if number is None else number


def coerce_text(value: Any) -> str:
    """Converte valores JSON em texto (bool em minúsculas, objetos como JSON)."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _optional_text(value: Any) -> str:
    if value is None:
        return ""
    return coerce_text(value).strip()


def _coerce_number(value: Any) -> int | float | None:
    # bool é subclasse de int, mas não é um tópico
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        try:
            value = float(raw)
        except ValueError:
            return None
    if not isinstance(value, float) or not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value
