"""Payload builders por provedor — construção de payloads para APIs externas.

Estrutura:
- telegram/: Telegram Bot API (sendMessage)
"""

from .telegram import TextPayloadBuilder

__all__ = ["TextPayloadBuilder"]
