"""Stores — implementações concretas de armazenamento.

Módulos disponíveis:
    - memory_ledger: ledger de entregas recentes em memória
"""

from __future__ import annotations

from app.infra.stores.memory_ledger import MemoryDeliveryLedger

__all__ = ["MemoryDeliveryLedger"]
