"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthError,
    BodyTooLargeError,
    ConfigurationError,
    ContentTypeError,
    EmptyBodyError,
    EmptyMessageError,
    MalformedJsonError,
    MisconfiguredDestinationError,
    MissingMessageError,
    RelayError,
    RequestAbortedError,
    RequestValidationError,
    UpstreamDeliveryError,
)

__all__ = [
    "AuthError",
    "BodyTooLargeError",
    "ConfigurationError",
    "ContentTypeError",
    "EmptyBodyError",
    "EmptyMessageError",
    "MalformedJsonError",
    "MisconfiguredDestinationError",
    "MissingMessageError",
    "RelayError",
    "RequestAbortedError",
    "RequestValidationError",
    "UpstreamDeliveryError",
]
