"""Normalizers — conversão de payloads externos para modelos internos.

Estrutura:
- relay/: notificações JSON genéricas recebidas em /webhook
"""

from .relay import normalize_notification

__all__ = ["normalize_notification"]
