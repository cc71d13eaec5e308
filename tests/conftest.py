"""Shared fixtures: isolated settings, PNG payloads and a fake TLS socket."""

from __future__ import annotations

import io
from collections.abc import Iterator

import pytest
from PIL import Image

from gravatar_client.core.config import AppSettings


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment and `.env` files out of the tests."""

    for name in (
        "GRAVATAR_CLIENT_API_TOKEN",
        "GRAVATAR_CLIENT_ALLOWED_IMAGE_DOMAINS",
        "GRAVATAR_CLIENT_HTTP_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        api_token=None,
        http_timeout_seconds=5.0,
        user_agent="gravatar-client-tests",
        allowed_image_domains=[],
    )


def make_png(size: tuple[int, int] = (8, 8), color: str = "red") -> bytes:
    buffer = io.BytesIO()
    Image.new("RGBA", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return make_png()


def chunked_response(body: str, *, status: str = "200 OK", chunk_size: int = 16) -> str:
    """Serialize `body` as a raw HTTP/1.1 response; chunk sizes count UTF-8 bytes."""

    head = f"HTTP/1.1 {status}\r\nContent-Type: application/json\r\nTransfer-Encoding: chunked\r\n\r\n"
    chunks = [body[i : i + chunk_size] for i in range(0, len(body), chunk_size)]
    encoded = "".join(f"{len(chunk.encode('utf-8')):x}\r\n{chunk}\r\n" for chunk in chunks)
    return head + encoded + "0\r\n\r\n"


class FakeSocket:
    """Records what is sent and replays a canned response."""

    def __init__(self, response: str) -> None:
        self.response = response
        self.sent = b""
        self.closed = False

    def sendall(self, data: bytes) -> None:
        self.sent += data

    def makefile(self, mode: str = "r", encoding: str | None = None, newline: str | None = None) -> io.TextIOWrapper:
        raw = io.BytesIO(self.response.encode("utf-8"))
        return io.TextIOWrapper(raw, encoding=encoding or "utf-8", newline=newline)

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeSocket":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class FakeSocketFactory:
    """Hands out `FakeSocket`s and remembers the connection arguments."""

    def __init__(self, *responses: str) -> None:
        self._responses: Iterator[str] = iter(responses)
        self.sockets: list[FakeSocket] = []
        self.connections: list[tuple[str, int, float]] = []

    def __call__(self, host: str, port: int, timeout: float) -> FakeSocket:
        self.connections.append((host, port, timeout))
        sock = FakeSocket(next(self._responses))
        self.sockets.append(sock)
        return sock


@pytest.fixture
def profile_server():
    """Build a socket factory replaying the given JSON bodies as chunked responses."""

    def _factory(*bodies: str, status: str = "200 OK") -> FakeSocketFactory:
        return FakeSocketFactory(*(chunked_response(body, status=status) for body in bodies))

    return _factory


@pytest.fixture
def raw_socket_factory():
    """Build a socket factory replaying raw response text verbatim."""

    return FakeSocketFactory
