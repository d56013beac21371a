"""Controle das tasks de entrega ao Telegram.

Uma vez iniciada, a entrega roda até o fim mesmo que o cliente HTTP
desconecte: a task é protegida com `asyncio.shield` e rastreada para
que o shutdown aguarde as pendentes.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from utils.errors import RelayError

if TYPE_CHECKING:
    from collections.abc import Coroutine

logger = logging.getLogger(__name__)

T = TypeVar("T")

_active_tasks: set[asyncio.Task[Any]] = set()


async def run_to_completion(coroutine: Coroutine[Any, Any, T]) -> T:
    """Executa a coroutine numa task rastreada e imune ao cancelamento do chamador."""
    task = asyncio.ensure_future(coroutine)
    _active_tasks.add(task)
    task.add_done_callback(_on_dispatch_task_done)
    return await asyncio.shield(task)


def active_task_count() -> int:
    return len(_active_tasks)


def _on_dispatch_task_done(task: asyncio.Task[Any]) -> None:
    _active_tasks.discard(task)
    with contextlib.suppress(asyncio.CancelledError):
        exc = task.exception()
        # Falhas de domínio já foram registradas no ledger pela própria task
        if exc is not None and not isinstance(exc, RelayError):
            logger.error(
                "relay_dispatch_task_failed",
                extra={
                    "error_type": type(exc).__name__,
                    "active_tasks": len(_active_tasks),
                },
            )


async def drain_dispatch_tasks(timeout_seconds: float = 30.0) -> None:
    """Aguarda entregas pendentes durante o shutdown do processo."""
    if not _active_tasks:
        return

    pending_now = list(_active_tasks)
    logger.info(
        "relay_dispatch_shutdown_wait",
        extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
    )
    _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
    if not pending:
        return

    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)
    logger.warning(
        "relay_dispatch_shutdown_cancelled",
        extra={"cancelled_tasks": len(pending)},
    )
