"""Normalizer do relay: payload genérico de notificação → NormalizedMessage."""

from .normalizer import (
    CONTROL_FIELDS,
    MAX_TEXT_CHARS,
    TRUNCATION_MARKER,
    compose_text,
    normalize_notification,
    resolve_thread_id,
)

__all__ = [
    "CONTROL_FIELDS",
    "MAX_TEXT_CHARS",
    "TRUNCATION_MARKER",
    "compose_text",
    "normalize_notification",
    "resolve_thread_id",
]
