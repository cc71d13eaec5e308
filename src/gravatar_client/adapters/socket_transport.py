"""Raw TLS socket transport.

The Profiles API handler speaks HTTP/1.1 directly over a socket and reads the
response with `ResourceReader`, so all that is needed here is a connected TLS
socket and the request bytes.
"""

from __future__ import annotations

import socket
import ssl
from collections.abc import Mapping


def open_tls_socket(host: str, port: int, timeout: float) -> ssl.SSLSocket:
    """Connect to `host:port` and complete a TLS handshake (SNI + hostname check)."""

    raw = socket.create_connection((host, port), timeout=timeout)
    try:
        context = ssl.create_default_context()
        return context.wrap_socket(raw, server_hostname=host)
    except BaseException:
        raw.close()
        raise


def build_get_request(host: str, port: int, path: str, headers: Mapping[str, str]) -> bytes:
    """Serialize a GET request; the Host header carries the port only when non-default."""

    host_header = host if port == 443 else f"{host}:{port}"
    lines = [f"GET {path} HTTP/1.1", f"Host: {host_header}"]
    lines.extend(f"{name}: {value}" for name, value in headers.items())
    # End of headers.
    lines.extend(["", ""])
    return "\r\n".join(lines).encode("iso-8859-1")
