"""Buffered HTTP transport built on top of httpx.

Outbound bytes accumulate in memory until :meth:`BufferedHttpTransport.flush`
turns them into a single ``POST``; the response body then becomes readable
through :meth:`BufferedHttpTransport.read`.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any

import httpx

from ..errors import ConfigError, EofError, IoError, TransportClosedError
from ..logger import BoundLogger, create_logger
from ..options import OptionsInput, TransportOptions, parse_options
from .base import HttpResponse, TransportKind, as_bytes, check_length

CONTENT_TYPE = "application/x-thrift"
USER_AGENT = "Python/thrift_http_transport"
DEFAULT_TIMEOUT = 60.0


class BufferedHttpTransport:
    kind: TransportKind = "http"

    def __init__(
        self,
        host: str,
        path: str,
        options: OptionsInput = None,
        *,
        client: httpx.Client | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._options: TransportOptions = parse_options(options)
        self._host = host
        self._path = path
        self._url = f"http://{host}{path}"
        self._logger = (logger or create_logger()).child("http").bind(url=self._url)
        self._headers = self._build_headers(self._options.extra_headers)
        self._write_buffer = bytearray()
        self._read_buffer = bytearray()
        self._closed = False

        if client is not None:
            if self._options.http_options:
                raise ConfigError(
                    "http_options cannot be combined with an explicit client",
                    option=("http_options", self._options.http_options),
                )
            self._client = client
            self._owns_client = False
        else:
            self._client = self._create_client(self._options.http_options)
            self._owns_client = True

    @property
    def host(self) -> str:
        return self._host

    @property
    def path(self) -> str:
        return self._path

    @property
    def url(self) -> str:
        return self._url

    @property
    def options(self) -> TransportOptions:
        return self._options

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every flush, excluding ``Content-Type``."""
        return dict(self._headers)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending_write_bytes(self) -> int:
        return len(self._write_buffer)

    @property
    def available_read_bytes(self) -> int:
        return len(self._read_buffer)

    def write(self, data: bytes) -> None:
        self._ensure_open()
        chunk = as_bytes(data)
        self._write_buffer += chunk
        self._logger.trace("buffered %d bytes (pending=%d)", len(chunk), len(self._write_buffer))

    def read(self, length: int) -> bytes:
        """Return up to ``length`` bytes from the inbound buffer.

        Never touches the network: when fewer bytes are buffered the read is
        short, and an empty buffer yields ``b""``.
        """
        self._ensure_open()
        check_length(length)
        give = min(length, len(self._read_buffer))
        data = bytes(self._read_buffer[:give])
        if len(data) != give:
            raise EofError(
                f"cannot take {give} bytes from the read buffer",
                requested=length,
                available=len(self._read_buffer),
            )
        del self._read_buffer[:give]
        self._logger.trace("read %d/%d bytes (remaining=%d)", give, length, len(self._read_buffer))
        return data

    def read_all(self, length: int) -> bytes:
        """Return exactly ``length`` bytes or raise :class:`EofError`."""
        self._ensure_open()
        check_length(length)
        available = len(self._read_buffer)
        if available < length:
            raise EofError(
                f"requested {length} bytes but only {available} are buffered",
                requested=length,
                available=available,
            )
        return self.read(length)

    def flush(self) -> None:
        self._ensure_open()
        self._flush()

    def close(self) -> None:
        if self._closed:
            return
        try:
            self._flush()
        except IoError as exc:
            self._logger.warn(
                "Discarding %d unsent bytes on close: %s", len(self._write_buffer), exc
            )
        finally:
            self._closed = True
            self._write_buffer.clear()
            self._read_buffer.clear()
            if self._owns_client:
                self._client.close()

    def __enter__(self) -> "BufferedHttpTransport":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<BufferedHttpTransport {self._url} {state}>"

    def _flush(self) -> None:
        if not self._write_buffer:
            return

        payload = bytes(self._write_buffer)
        response = self._post(payload)
        if response.status != 200:
            raise IoError(
                f"HTTP POST {self._url} failed with status {response.status}",
                url=self._url,
                status=response.status,
                context=response,
            )

        self._read_buffer += response.body
        self._write_buffer.clear()

    def _post(self, payload: bytes) -> HttpResponse:
        headers = dict(self._headers)
        headers["Content-Type"] = CONTENT_TYPE
        try:
            self._logger.debug("HTTP POST bytes=%d", len(payload))
            response = self._client.post(self._url, content=payload, headers=headers)
            body = response.content
        except httpx.TimeoutException as exc:
            raise IoError(f"HTTP POST {self._url} timed out: {exc}", url=self._url) from exc
        except httpx.RequestError as exc:
            raise IoError(f"Cannot reach {self._url}: {exc}", url=self._url) from exc
        except httpx.InvalidURL as exc:
            raise IoError(f"Invalid URL {self._url}: {exc}", url=self._url) from exc

        self._logger.debug(
            "HTTP <- status=%s bytes=%d",
            response.status_code,
            len(body),
        )
        return HttpResponse(
            status=response.status_code,
            body=body,
            headers={k.lower(): v for k, v in response.headers.items()},
        )

    def _build_headers(self, extra_headers: Any) -> dict[str, str]:
        headers = {"User-Agent": USER_AGENT}
        for name, value in extra_headers.items():
            lowered = name.lower()
            if lowered == "content-type":
                self._logger.warn("Ignoring extra Content-Type header %r; always sending %s", value, CONTENT_TYPE)
                continue
            if lowered == "user-agent":
                headers.pop("User-Agent", None)
            headers[name] = value
        return headers

    def _create_client(self, http_options: Any) -> httpx.Client:
        kwargs = dict(http_options)
        kwargs.setdefault("timeout", httpx.Timeout(DEFAULT_TIMEOUT))
        try:
            return httpx.Client(**kwargs)
        except (TypeError, ValueError, AttributeError, httpx.InvalidURL) as exc:
            raise ConfigError(f"invalid http_options: {exc}", option=("http_options", http_options)) from exc

    def _ensure_open(self) -> None:
        if self._closed:
            raise TransportClosedError(f"transport for {self._url} is closed")


__all__ = ["BufferedHttpTransport", "CONTENT_TYPE", "DEFAULT_TIMEOUT", "USER_AGENT"]
