"""Single-owner session that serializes all calls onto one worker thread."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from types import TracebackType
from typing import Any, Callable, TypeVar

import httpx

from .errors import TransportClosedError
from .logger import BoundLogger, create_logger
from .options import OptionsInput
from .transport import BufferedHttpTransport, Transport, TransportKind

T = TypeVar("T")


class TransportSession:
    """Owns a transport and runs every operation on it in arrival order.

    Callers on any thread block until their operation has run, so a flush
    and its HTTP exchange finish before the next queued call starts. The
    wrapped transport must not be used directly once handed to a session.
    """

    def __init__(self, transport: Transport, *, logger: BoundLogger | None = None) -> None:
        self._transport = transport
        self._logger = (logger or create_logger()).child("session").bind(kind=transport.kind)
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="thrift-transport")
        self._closed = False
        self._logger.info("Session started for %r", transport)

    @property
    def kind(self) -> TransportKind:
        return self._transport.kind

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def transport(self) -> Transport:
        return self._transport

    def write(self, data: bytes) -> None:
        self._call(self._transport.write, data)

    def read(self, length: int) -> bytes:
        return self._call(self._transport.read, length)

    def read_all(self, length: int) -> bytes:
        return self._call(self._transport.read_all, length)

    def flush(self) -> None:
        self._call(self._transport.flush)

    def close(self) -> None:
        if self._closed:
            return
        try:
            self._call(self._transport.close)
        finally:
            self._closed = True
            self._executor.shutdown(wait=True)
        self._logger.info("Session closed for %r", self._transport)

    def __enter__(self) -> "TransportSession":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _call(self, fn: Callable[..., T], *args: Any) -> T:
        if self._closed:
            raise TransportClosedError("session is closed")
        try:
            future: Future[T] = self._executor.submit(fn, *args)
        except RuntimeError as exc:
            # Executor already shut down by a concurrent close
            raise TransportClosedError("session is closed") from exc
        return future.result()


def open_http_transport(
    host: str,
    path: str,
    options: OptionsInput = None,
    *,
    client: httpx.Client | None = None,
    logger: BoundLogger | None = None,
) -> TransportSession:
    """Build a :class:`BufferedHttpTransport` and hand it to a new session.

    Option errors are raised here, before any worker thread exists.
    """
    bound = create_logger(logger=logger)
    transport = BufferedHttpTransport(host, path, options, client=client, logger=bound)
    return TransportSession(transport, logger=bound)


__all__ = ["TransportSession", "open_http_transport"]
