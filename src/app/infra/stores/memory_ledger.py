"""Ledger de entregas em memória.

Sem persistência entre reinícios: o histórico existe apenas para o /health.
Um único event loop escreve e lê; nenhum método faz await, então
append + descarte nunca intercala com outro request.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from app.protocols.delivery_ledger import DeliveryLedgerProtocol
from config.settings.relay import LEDGER_CAPACITY

if TYPE_CHECKING:
    from datetime import datetime, timedelta

    from app.protocols.models import DeliveryRecord


class MemoryDeliveryLedger(DeliveryLedgerProtocol):
    """FIFO limitado de DeliveryRecord (mais antigo descartado primeiro)."""

    def __init__(self, capacity: int = LEDGER_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity deve ser > 0")
        self._capacity = capacity
        self._entries: deque[DeliveryRecord] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, entry: DeliveryRecord) -> None:
        """Adiciona a entrada e descarta do início enquanto exceder a capacidade."""
        self._entries.append(entry)
        while len(self._entries) > self._capacity:
            self._entries.popleft()

    def recent_within_window(self, window: timedelta, now: datetime) -> int:
        """Conta entradas com `now - window <= timestamp <= now`."""
        start = now - window
        return sum(1 for entry in self._entries if start <= entry.timestamp <= now)

    def entries(self) -> list[DeliveryRecord]:
        return list(self._entries)
