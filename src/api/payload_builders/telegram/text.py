"""Builder para o payload de sendMessage."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import NormalizedMessage


class TextPayloadBuilder:
    """Builder para mensagens de texto da Bot API."""

    def __init__(self, disable_web_page_preview: bool = True) -> None:
        self._disable_web_page_preview = disable_web_page_preview

    def build(self, message: NormalizedMessage) -> dict[str, Any]:
        """Constrói o corpo JSON de sendMessage.

        Campos sem valor são omitidos em vez de enviados como null.
        """
        payload: dict[str, Any] = {
            "chat_id": message.chat_id,
            "text": message.text,
            "disable_web_page_preview": self._disable_web_page_preview,
            "message_thread_id": message.thread_id,
            "parse_mode": message.parse_mode,
            "disable_notification": True if message.silent else None,
        }
        return {key: value for key, value in payload.items() if value is not None}
