"""Use cases do relay HTTP → Telegram."""

from .dispatch_tasks import active_task_count, drain_dispatch_tasks, run_to_completion
from .relay_notification import InboundNotification, RelayNotificationUseCase, mask_key

__all__ = [
    "InboundNotification",
    "RelayNotificationUseCase",
    "active_task_count",
    "drain_dispatch_tasks",
    "mask_key",
    "run_to_completion",
]
