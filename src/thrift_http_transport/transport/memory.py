"""In-memory loopback transport: bytes written are the bytes read back."""

from __future__ import annotations

from ..errors import EofError, TransportClosedError
from ..logger import BoundLogger, create_logger
from .base import TransportKind, as_bytes, check_length


class MemoryTransport:
    kind: TransportKind = "memory"

    def __init__(self, initial: bytes = b"", *, logger: BoundLogger | None = None) -> None:
        self._buffer = bytearray(as_bytes(initial))
        self._logger = (logger or create_logger()).child("memory")
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def available_read_bytes(self) -> int:
        return len(self._buffer)

    def getvalue(self) -> bytes:
        """Return the unread bytes without consuming them."""
        self._ensure_open()
        return bytes(self._buffer)

    def write(self, data: bytes) -> None:
        self._ensure_open()
        chunk = as_bytes(data)
        self._buffer += chunk
        self._logger.trace("buffered %d bytes (available=%d)", len(chunk), len(self._buffer))

    def read(self, length: int) -> bytes:
        self._ensure_open()
        check_length(length)
        give = min(length, len(self._buffer))
        data = bytes(self._buffer[:give])
        del self._buffer[:give]
        return data

    def read_all(self, length: int) -> bytes:
        self._ensure_open()
        check_length(length)
        if len(self._buffer) < length:
            raise EofError(
                f"requested {length} bytes but only {len(self._buffer)} are buffered",
                requested=length,
                available=len(self._buffer),
            )
        return self.read(length)

    def flush(self) -> None:
        self._ensure_open()

    def close(self) -> None:
        self._closed = True
        self._buffer.clear()

    def __enter__(self) -> "MemoryTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise TransportClosedError("memory transport is closed")


__all__ = ["MemoryTransport"]
