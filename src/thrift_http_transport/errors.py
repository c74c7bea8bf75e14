"""Exceptions raised by the thrift HTTP transport."""

from __future__ import annotations

from typing import Any


class TransportError(Exception):
    """Base error for all transport failures."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class ConfigError(TransportError):
    """Raised when a transport is constructed with an invalid option."""

    def __init__(self, message: str, *, option: Any | None = None, context: Any | None = None) -> None:
        super().__init__(message, context=context)
        self.option = option


class IoError(TransportError):
    """Raised when a flush does not complete with HTTP status 200.

    ``status`` holds the response code, or ``None`` when the HTTP client
    failed before a response arrived (the client error is chained as
    ``__cause__``).
    """

    def __init__(
        self,
        message: str,
        *,
        url: str,
        status: int | None = None,
        context: Any | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.url = url
        self.status = status


class EofError(TransportError):
    """Raised when the inbound buffer cannot satisfy a read."""

    def __init__(self, message: str, *, requested: int, available: int) -> None:
        super().__init__(message, context={"requested": requested, "available": available})
        self.requested = requested
        self.available = available


class TransportClosedError(TransportError):
    """Raised when an operation is attempted on a closed transport."""


__all__ = [
    "ConfigError",
    "EofError",
    "IoError",
    "TransportClosedError",
    "TransportError",
]
