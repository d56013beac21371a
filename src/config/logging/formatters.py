"""Formatters de logging estruturado.

Todo record sai como um objeto JSON com os campos de `REQUIRED_LOG_FIELDS`
(renomeados por `FIELD_RENAME_MAP`) mais o que vier em `extra`.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"timestamp": "2026-10-19T10:30:00", "level": "INFO",
         "logger": "app.use_cases.relay", "message": "delivery_succeeded",
         "correlation_id": "abc-123", "service": "hook2telegram"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
