"""Transport implementations exposed to users."""

from .base import HttpResponse, Transport, TransportKind
from .http import BufferedHttpTransport
from .memory import MemoryTransport

__all__ = [
    "BufferedHttpTransport",
    "HttpResponse",
    "MemoryTransport",
    "Transport",
    "TransportKind",
]
