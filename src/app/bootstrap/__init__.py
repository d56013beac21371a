"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: carrega o `.env`, configura logging,
valida settings e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    # Na inicialização do serviço
    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from app.domain.tenants import TenantRegistry
from app.observability import get_correlation_id
from config.logging import VALID_LOG_LEVELS, configure_logging
from config.settings import (
    get_base_settings,
    get_relay_settings,
    get_telegram_settings,
    load_env_file,
)
from utils.errors import ConfigurationError

# Nome do serviço para logs e métricas
SERVICE_NAME = "hook2telegram"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço, antes de ler settings.

    Configura:
    - Variáveis do `.env` (sem sobrescrever o ambiente real)
    - Logging estruturado JSON com correlation_id e token mascarado
    """
    env_loaded = load_env_file()
    base = get_base_settings()
    telegram = get_telegram_settings()

    # LOG_LEVEL inválido é reportado por validate_runtime_settings
    level = base.log_level if base.log_level in VALID_LOG_LEVELS else "INFO"
    configure_logging(
        level=level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        redact=[telegram.bot_token] if telegram.bot_token else [],
    )
    logger.info(
        "app_initialized",
        extra={"environment": base.environment, "env_file_loaded": env_loaded},
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Sem bot token, ou sem nenhum destino possível, o serviço não sobe.

    Raises:
        ConfigurationError: Lista todos os problemas encontrados
    """
    base = get_base_settings()
    relay = get_relay_settings()
    telegram = get_telegram_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"relay: {error}" for error in relay.validate())
    errors.extend(f"telegram: {error}" for error in telegram.validate())

    registry = TenantRegistry.from_config(relay.api_keys_raw, telegram.default_chat_id)
    if not registry.can_route:
        errors.append(
            "telegram: TELEGRAM_CHAT_ID não configurado e nenhuma API key tem chat próprio"
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "result": "ok",
                "environment": base.environment,
                "tenant_count": len(registry),
            },
        )
        return

    logger.error(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    details = "\n".join(f"- {error}" for error in errors)
    raise ConfigurationError(f"Configuração inválida:\n{details}")
