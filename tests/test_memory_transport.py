import pytest

from thrift_http_transport import EofError, MemoryTransport, TransportClosedError


def test_written_bytes_are_read_back() -> None:
    transport = MemoryTransport()
    transport.write(b"hello ")
    transport.write(b"world")
    transport.flush()
    assert transport.read(5) == b"hello"
    assert transport.available_read_bytes == 6
    assert transport.read(100) == b" world"
    assert transport.read(1) == b""


def test_initial_contents_are_readable() -> None:
    transport = MemoryTransport(b"\x80\x01")
    assert transport.getvalue() == b"\x80\x01"
    assert transport.read_all(2) == b"\x80\x01"


def test_read_all_leaves_buffer_on_failure() -> None:
    transport = MemoryTransport(b"abc")
    with pytest.raises(EofError):
        transport.read_all(4)
    assert transport.getvalue() == b"abc"


def test_closed_transport_rejects_operations() -> None:
    with MemoryTransport(b"data") as transport:
        pass
    assert transport.closed
    with pytest.raises(TransportClosedError):
        transport.read(1)
    with pytest.raises(TransportClosedError):
        transport.write(b"x")
