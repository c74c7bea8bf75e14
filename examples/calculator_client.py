"""End-to-end scenario: framed calls to a thrift service over HTTP.

Point ``THRIFT_DEMO_HOST`` / ``THRIFT_DEMO_PATH`` at a server that speaks
thrift's binary protocol over HTTP (for example the tutorial calculator).
"""

from __future__ import annotations

import logging
import os
import struct

from thrift_http_transport import IoError, create_logger, open_http_transport

HOST = os.getenv("THRIFT_DEMO_HOST", "localhost:9090")
PATH = os.getenv("THRIFT_DEMO_PATH", "/thrift")

VERSION_1 = 0x80010000
CALL = 1
T_STOP = 0


def log_section(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


def encode_ping(seqid: int) -> bytes:
    name = b"ping"
    header = struct.pack("!II", VERSION_1 | CALL, len(name)) + name + struct.pack("!i", seqid)
    # empty args struct
    return header + struct.pack("!b", T_STOP)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    logger = create_logger(logger=logging.getLogger("thrift_http_transport"), level="debug")

    log_section(f"Calling ping on http://{HOST}{PATH}")
    options = {
        "http_options": {"timeout": 5.0},
        "extra_headers": {"X-Demo": "calculator"},
    }
    with open_http_transport(HOST, PATH, options, logger=logger) as transport:
        for seqid in range(1, 4):
            transport.write(encode_ping(seqid))
            try:
                transport.flush()
            except IoError as exc:
                print(f"ping #{seqid} failed (status={exc.status}): {exc}")
                break
            reply = transport.read(4096)
            print(f"ping #{seqid} -> {len(reply)} reply bytes: {reply[:32].hex()}")


if __name__ == "__main__":
    main()
