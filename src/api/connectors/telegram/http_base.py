"""Cliente HTTP base com retentativa limitada e backoff exponencial."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    `max_attempts` conta o total de tentativas (não apenas as retentativas).
    """

    timeout_seconds: float = 10.0
    max_attempts: int = 3
    backoff_base_seconds: float = 0.5
    backoff_max_seconds: float = 4.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Falha de uma tentativa HTTP (transporte ou status não-2xx)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RetryExhaustedError(HttpError):
    """Todas as tentativas falharam; carrega a última falha."""

    def __init__(self, last_error: HttpError, attempts: int) -> None:
        super().__init__(str(last_error), last_error.status_code, last_error.body)
        self.last_error = last_error
        self.attempts = attempts


@dataclass(frozen=True)
class HttpResult:
    """Resposta bem-sucedida e quantas tentativas foram consumidas."""

    response: httpx.Response
    attempts: int


def backoff_seconds(attempt: int, base: float, max_seconds: float) -> float:
    """Espera após a tentativa `attempt` (1-based): min(base * 2**attempt, max)."""
    return min(base * (2**attempt), max_seconds)


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Qualquer falha (erro de transporte ou status fora de 2xx) é retentada
    até `max_attempts`. O sleep de backoff suspende apenas a task chamadora.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[Any]] | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport
        self._sleep = sleep or asyncio.sleep

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> HttpResult:
        """POST JSON com retentativa.

        Raises:
            RetryExhaustedError: Após a última tentativa falhar.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        max_attempts = max(self._config.max_attempts, 1)
        last_error = HttpError("http_not_attempted")

        for attempt in range(1, max_attempts + 1):
            started_at = time.perf_counter()
            try:
                response = await self._post_once(url, json, merged_headers)
            except HttpError as exc:
                last_error = exc
                logger.warning(
                    "http_attempt_failed",
                    extra={
                        "attempt": attempt,
                        "max_attempts": max_attempts,
                        "status_code": exc.status_code,
                        "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
                    },
                )
                if attempt >= max_attempts:
                    break
                await self._backoff_sleep(attempt)
                continue
            return HttpResult(response=response, attempts=attempt)

        raise RetryExhaustedError(last_error, attempts=max_attempts)

    async def _post_once(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str],
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                verify=self._config.verify_ssl,
            ) as client:
                response = await client.post(
                    url,
                    json=json,
                    headers=headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.HTTPError as exc:
            raise HttpError(f"{type(exc).__name__}: {exc}") from exc

        if not response.is_success:
            raise HttpError(
                "http_status_error",
                status_code=response.status_code,
                body=response.text,
            )
        return response

    async def _backoff_sleep(self, attempt: int) -> None:
        delay = backoff_seconds(
            attempt,
            self._config.backoff_base_seconds,
            self._config.backoff_max_seconds,
        )
        logger.info("http_backoff", extra={"attempt": attempt, "backoff_seconds": delay})
        await self._sleep(delay)
