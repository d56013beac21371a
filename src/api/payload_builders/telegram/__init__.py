"""Payload builders da Telegram Bot API."""

from .text import TextPayloadBuilder

__all__ = ["TextPayloadBuilder"]
