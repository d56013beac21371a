"""Factory de wiring para o relay (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.telegram import create_telegram_http_client
from api.payload_builders.telegram import TextPayloadBuilder
from app.bootstrap.telegram_adapters import RelayNotificationNormalizer, TelegramOutboundSender
from app.domain.tenants import TenantRegistry
from app.infra.stores import MemoryDeliveryLedger
from app.use_cases.relay import RelayNotificationUseCase
from config.settings import get_relay_settings, get_telegram_settings

if TYPE_CHECKING:
    from config.settings import RelaySettings, TelegramSettings


def create_tenant_registry(
    relay: RelaySettings | None = None,
    telegram: TelegramSettings | None = None,
) -> TenantRegistry:
    """Cria o registro de tenants a partir de API_KEYS e TELEGRAM_CHAT_ID."""
    relay = relay or get_relay_settings()
    telegram = telegram or get_telegram_settings()
    return TenantRegistry.from_config(relay.api_keys_raw, telegram.default_chat_id)


def create_telegram_sender(telegram: TelegramSettings | None = None) -> TelegramOutboundSender:
    """Cria sender outbound (implementa OutboundSenderProtocol)."""
    telegram = telegram or get_telegram_settings()
    return TelegramOutboundSender(
        create_telegram_http_client(telegram),
        TextPayloadBuilder(disable_web_page_preview=telegram.disable_web_page_preview),
    )


def create_relay_use_case() -> RelayNotificationUseCase:
    """Cria use case do relay com dependências injetadas."""
    relay = get_relay_settings()
    telegram = get_telegram_settings()
    return RelayNotificationUseCase(
        registry=create_tenant_registry(relay, telegram),
        normalizer=RelayNotificationNormalizer(telegram.default_thread_id),
        sender=create_telegram_sender(telegram),
        ledger=MemoryDeliveryLedger(capacity=relay.ledger_capacity),
    )
