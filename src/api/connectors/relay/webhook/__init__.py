"""Webhook do relay: extração de API key, limite de corpo e parsing JSON."""

from .receive import (
    JSON_CONTENT_TYPE,
    ensure_json_content_type,
    extract_api_key,
    load_webhook_payload,
    parse_json_body,
    read_body_limited,
)

__all__ = [
    "JSON_CONTENT_TYPE",
    "ensure_json_content_type",
    "extract_api_key",
    "load_webhook_payload",
    "parse_json_body",
    "read_body_limited",
]
