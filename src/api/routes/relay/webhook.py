"""Endpoints de webhook do relay.

Endpoints:
- POST /webhook e /webhook/: key via `?api_key=` (ou sem key em modo aberto)
- POST /webhook/{api_key}: key no path; `?api_key=` tem precedência

Fluxo:
1. Autenticação e destino, antes de ler o corpo
2. Content type, leitura limitada e parse do JSON
3. Normalização e envio ao Telegram com retentativa
4. 200 `{ok, deliveryId}` ou `{error, details?}` com o status do erro

Segurança:
- API key, bot token e texto das mensagens nunca vão para os logs
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from starlette.requests import ClientDisconnect

from api.connectors.relay.webhook import extract_api_key, load_webhook_payload
from app.observability import CORRELATION_HEADER, reset_correlation_id, set_correlation_id
from app.use_cases.relay import InboundNotification
from config.settings import get_relay_settings
from utils.errors import RelayError, RequestAbortedError

if TYPE_CHECKING:
    from app.use_cases.relay import RelayNotificationUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_use_case(request: Request) -> RelayNotificationUseCase:
    return request.app.state.relay_use_case


def _payload_loader(request: Request):
    """Adia a leitura do corpo até o use case autorizar o request."""
    max_bytes = get_relay_settings().max_body_bytes

    async def load_payload() -> Any:
        try:
            return await load_webhook_payload(
                request.headers.get("content-type"),
                request.stream(),
                max_bytes,
            )
        except ClientDisconnect as exc:
            raise RequestAbortedError() from exc

    return load_payload


async def _handle_webhook(request: Request, path_key: str | None) -> JSONResponse:
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        inbound = InboundNotification(
            api_key=extract_api_key(request.query_params.get("api_key"), path_key),
            load_payload=_payload_loader(request),
        )
        try:
            receipt = await _get_use_case(request).execute(inbound)
        except RelayError as exc:
            logger.info(
                "webhook_rejected",
                extra={"status_code": exc.status_code, "error_type": type(exc).__name__},
            )
            return JSONResponse(content=exc.to_payload(), status_code=exc.status_code)

        return JSONResponse(
            content={"ok": True, "deliveryId": receipt.delivery_id},
            status_code=status.HTTP_200_OK,
        )
    finally:
        reset_correlation_id(token)


@router.post("/webhook")
@router.post("/webhook/")
async def receive_webhook(request: Request) -> JSONResponse:
    """Recebe notificação sem key no path."""
    return await _handle_webhook(request, None)


@router.post("/webhook/{api_key}")
async def receive_webhook_with_key(request: Request, api_key: str) -> JSONResponse:
    """Recebe notificação com a key no último segmento do path."""
    return await _handle_webhook(request, api_key)
