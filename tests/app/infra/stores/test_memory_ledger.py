"""Testes para MemoryDeliveryLedger."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from app.infra.stores import MemoryDeliveryLedger
from app.protocols.models import DeliveryRecord, DeliveryStatus

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


def _entry(index: int, timestamp: datetime = NOW) -> DeliveryRecord:
    return DeliveryRecord(
        id=f"d{index}",
        chat_id="123",
        key="open",
        message_preview=f"msg {index}",
        timestamp=timestamp,
    )


class TestMemoryDeliveryLedger:
    def test_capacity_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            MemoryDeliveryLedger(capacity=0)

    def test_keeps_most_recent_entries_in_order(self) -> None:
        ledger = MemoryDeliveryLedger(capacity=50)
        for index in range(51):
            ledger.record(_entry(index))

        entries = ledger.entries()
        assert len(ledger) == 50
        assert entries[0].id == "d1"
        assert entries[-1].id == "d50"

    def test_entries_is_a_snapshot(self) -> None:
        ledger = MemoryDeliveryLedger(capacity=3)
        ledger.record(_entry(1))
        snapshot = ledger.entries()
        ledger.record(_entry(2))
        assert len(snapshot) == 1

    def test_recent_within_window_counts_last_hour(self) -> None:
        ledger = MemoryDeliveryLedger()
        ledger.record(_entry(1, NOW - timedelta(hours=2)))
        ledger.record(_entry(2, NOW - timedelta(minutes=30)))
        ledger.record(_entry(3, NOW - timedelta(minutes=1)))

        assert ledger.recent_within_window(timedelta(hours=1), NOW) == 2

    def test_window_bounds_are_inclusive(self) -> None:
        ledger = MemoryDeliveryLedger()
        ledger.record(_entry(1, NOW - timedelta(hours=1)))
        ledger.record(_entry(2, NOW))
        ledger.record(_entry(3, NOW + timedelta(seconds=1)))

        assert ledger.recent_within_window(timedelta(hours=1), NOW) == 2

    def test_failed_entries_are_counted_too(self) -> None:
        ledger = MemoryDeliveryLedger()
        ledger.record(
            DeliveryRecord(
                id="f1",
                chat_id="123",
                key="alpha",
                message_preview="x",
                timestamp=NOW,
                status=DeliveryStatus.FAILED,
                error="Telegram error (500): boom",
            )
        )
        assert ledger.recent_within_window(timedelta(hours=1), NOW) == 1

