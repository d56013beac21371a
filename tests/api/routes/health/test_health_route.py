"""Testes dos endpoints de status (/ e /health)."""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.health.router import (
    SERVICE_DOCS,
    SERVICE_MESSAGE,
    HealthResponse,
    health_check,
    service_info,
)
from app.bootstrap.telegram_adapters import RelayNotificationNormalizer
from app.domain.tenants import TenantRegistry
from app.infra.stores import MemoryDeliveryLedger
from app.protocols.models import DeliveryRecord
from app.use_cases.relay import RelayNotificationUseCase

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


class FakeSender:
    async def send(self, message) -> int:
        return 1


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/health",
        "raw_path": b"/health",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_counts_deliveries_in_last_hour() -> None:
    ledger = MemoryDeliveryLedger()
    for index, age in enumerate((timedelta(hours=2), timedelta(minutes=20), timedelta(0))):
        ledger.record(
            DeliveryRecord(
                id=str(index),
                chat_id="1",
                key="open",
                message_preview="x",
                timestamp=NOW - age,
            )
        )
    use_case = RelayNotificationUseCase(
        registry=TenantRegistry.from_config("", "1"),
        normalizer=RelayNotificationNormalizer(),
        sender=FakeSender(),
        ledger=ledger,
        clock=lambda: NOW,
    )

    response = await health_check(_build_request_with_state(SimpleNamespace(relay_use_case=use_case)))

    assert response.ok is True
    assert response.recent_deliveries == 2
    assert response.uptime_seconds >= 0


def test_health_response_uses_camel_case_aliases() -> None:
    body = HealthResponse(uptime_seconds=1.5, recent_deliveries=3).model_dump(by_alias=True)
    assert body == {"ok": True, "uptimeSeconds": 1.5, "recentDeliveries": 3}


@pytest.mark.asyncio
async def test_service_info() -> None:
    response = await service_info()
    assert json.loads(response.model_dump_json()) == {
        "ok": True,
        "message": SERVICE_MESSAGE,
        "docs": SERVICE_DOCS,
    }
