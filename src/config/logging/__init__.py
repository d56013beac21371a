"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="hook2telegram")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("delivery_succeeded", extra={"latency_ms": 42})

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message, timestamp.
"""

from config.logging.config import VALID_LOG_LEVELS, configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, SecretRedactionFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "VALID_LOG_LEVELS",
    "CorrelationIdFilter",
    "SecretRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
