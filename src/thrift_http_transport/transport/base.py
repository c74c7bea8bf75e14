"""Common transport abstractions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Protocol, runtime_checkable


TransportKind = Literal["http", "memory"]


@dataclass
class HttpResponse:
    status: int
    body: bytes
    headers: Mapping[str, str]


@runtime_checkable
class Transport(Protocol):
    """Byte-stream capability consumed by an RPC protocol layer."""

    @property
    def kind(self) -> TransportKind: ...

    @property
    def closed(self) -> bool: ...

    def write(self, data: bytes) -> None: ...

    def read(self, length: int) -> bytes: ...

    def read_all(self, length: int) -> bytes: ...

    def flush(self) -> None: ...

    def close(self) -> None: ...


def check_length(length: int) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"read length must be an int, got {type(length).__name__}")
    if length < 0:
        raise ValueError(f"read length must be non-negative, got {length}")
    return length


def as_bytes(data: object) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"transport data must be bytes-like, got {type(data).__name__}")


__all__ = ["HttpResponse", "Transport", "TransportKind", "as_bytes", "check_length"]
