"""Contracts for the raw socket transport used by the Profiles API handler.

Why Protocol:
- Structural contract (duck typing) without inheritance.
- Lets tests hand the handler a fake socket over an in-memory stream instead
  of a real TLS connection.
"""

from __future__ import annotations

from types import TracebackType
from typing import IO, Callable, Protocol, runtime_checkable


@runtime_checkable
class SocketLike(Protocol):
    """The subset of `socket.socket` the profile handler relies on."""

    def sendall(self, data: bytes, /) -> None: ...

    def makefile(self, mode: str = ..., *, encoding: str | None = ..., newline: str | None = ...) -> IO[str]: ...

    def close(self) -> None: ...

    def __enter__(self) -> "SocketLike": ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> object: ...


# (host, port, timeout_seconds) -> connected socket
SocketFactory = Callable[[str, int, float], SocketLike]
