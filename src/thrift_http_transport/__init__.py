"""Public surface for the buffered thrift HTTP transport."""

from .errors import (
    ConfigError,
    EofError,
    IoError,
    TransportClosedError,
    TransportError,
)
from .logger import BoundLogger, create_logger
from .options import TransportOptions, parse_options
from .session import TransportSession, open_http_transport
from .transport import BufferedHttpTransport, HttpResponse, MemoryTransport, Transport
from .version import __version__

__all__ = [
    "__version__",
    "BoundLogger",
    "BufferedHttpTransport",
    "ConfigError",
    "EofError",
    "HttpResponse",
    "IoError",
    "MemoryTransport",
    "Transport",
    "TransportClosedError",
    "TransportError",
    "TransportOptions",
    "TransportSession",
    "create_logger",
    "open_http_transport",
    "parse_options",
]
