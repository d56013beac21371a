"""Protocolos e contratos do core da aplicação."""

from .delivery_ledger import DeliveryLedgerProtocol
from .models import (
    OPEN_TENANT_KEY,
    PREVIEW_MAX_CHARS,
    DeliveryReceipt,
    DeliveryRecord,
    DeliveryStatus,
    NormalizedMessage,
)
from .normalizer import MessageNormalizerProtocol
from .outbound_sender import OutboundSenderProtocol

__all__ = [
    "OPEN_TENANT_KEY",
    "PREVIEW_MAX_CHARS",
    "DeliveryLedgerProtocol",
    "DeliveryReceipt",
    "DeliveryRecord",
    "DeliveryStatus",
    "MessageNormalizerProtocol",
    "NormalizedMessage",
    "OutboundSenderProtocol",
]
