"""Protocolo do ledger de entregas recentes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime, timedelta

    from .models import DeliveryRecord


class DeliveryLedgerProtocol(ABC):
    """Histórico limitado e somente-append de entregas.

    Métodos canônicos:
    - record(entry): adiciona e descarta as mais antigas acima da capacidade
    - recent_within_window(window, now): conta entradas em [now - window, now]
    """

    @abstractmethod
    def record(self, entry: DeliveryRecord) -> None:
        """Adiciona uma entrada (sem await: atômico no event loop)."""

    @abstractmethod
    def recent_within_window(self, window: timedelta, now: datetime) -> int:
        """Conta entradas com timestamp dentro da janela."""

    @abstractmethod
    def entries(self) -> list[DeliveryRecord]:
        """Snapshot das entradas, da mais antiga para a mais recente."""
