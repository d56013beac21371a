"""Endpoints de status do serviço (raiz e health check)."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from config.settings import get_relay_settings

if TYPE_CHECKING:
    from app.use_cases.relay import RelayNotificationUseCase

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_MESSAGE = "hook2telegram is running. POST JSON with a message field to /webhook."
SERVICE_DOCS = "/health for status, /webhook for delivery"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    ok: bool = True
    uptime_seconds: float = Field(serialization_alias="uptimeSeconds")
    recent_deliveries: int = Field(serialization_alias="recentDeliveries")


class ServiceInfoResponse(BaseModel):
    """Resposta da rota raiz."""

    ok: bool = True
    message: str = SERVICE_MESSAGE
    docs: str = SERVICE_DOCS


def _get_use_case(request: Request) -> RelayNotificationUseCase:
    return request.app.state.relay_use_case


@router.get("/health", response_model=HealthResponse, response_model_by_alias=True)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe com contagem de entregas na última hora."""
    use_case = _get_use_case(request)
    window = timedelta(seconds=get_relay_settings().health_window_seconds)
    return HealthResponse(
        uptime_seconds=use_case.uptime_seconds(),
        recent_deliveries=use_case.recent_deliveries(window),
    )


@router.get("/", response_model=ServiceInfoResponse)
async def service_info() -> ServiceInfoResponse:
    return ServiceInfoResponse()
