"""Minimal reader for raw HTTP responses with a chunked body.

Reads a text stream (anything with `readline()` and `read(n)`) in two phases:

1. `skip_headers()` discards lines up to the first blank line (or EOF).
2. `read_chunked_body()` reassembles ``<hex size>\\r\\n<data>\\r\\n`` chunks
   until a zero-size chunk, an empty size line or EOF.

Short reads at EOF are tolerated: a truncated chunk yields whatever data is
available. Only a size line that is not hexadecimal is an error
(`ChunkSizeError`).
"""

from __future__ import annotations

import logging
import re
from typing import Protocol

from gravatar_client.core.errors import ChunkSizeError, require

logger = logging.getLogger("gravatar_client.resource_reader")

_HEX_TOKEN = re.compile(r"[0-9A-Fa-f]+")


class TextStream(Protocol):
    def readline(self) -> str: ...

    def read(self, size: int = -1, /) -> str: ...


def _strip_line_end(line: str) -> str:
    return line.rstrip("\r\n")


def parse_chunk_size(line: str) -> int:
    """Parse a chunk-size line, ignoring any ``;name=value`` extension."""

    token = line.split(";", 1)[0].strip()
    if not _HEX_TOKEN.fullmatch(token):
        raise ChunkSizeError(token)
    return int(token, 16)


class ResourceReader:
    """Cursor over a raw HTTP response stream."""

    def __init__(self, stream: TextStream) -> None:
        require(stream, "stream")
        self._stream = stream

    def skip_headers(self) -> "ResourceReader":
        skipped = 0
        while True:
            line = self._stream.readline()
            if line == "" or _strip_line_end(line) == "":
                break
            skipped += 1
        logger.debug("Skipped %d header lines", skipped)
        return self

    def _read_exactly(self, size: int) -> str:
        parts: list[str] = []
        remaining = size
        while remaining > 0:
            data = self._stream.read(remaining)
            if not data:
                break
            parts.append(data)
            remaining -= len(data)
        return "".join(parts)

    def read_chunked_body(self) -> str:
        body: list[str] = []
        while True:
            line = self._stream.readline()
            if line == "":
                break
            size_line = _strip_line_end(line)
            if size_line == "":
                break

            size = parse_chunk_size(size_line)
            if size == 0:
                break

            chunk = self._read_exactly(size)
            body.append(chunk)
            if len(chunk) < size:
                logger.debug("Stream ended inside a chunk (%d of %d characters)", len(chunk), size)
                break
            # CRLF closing the chunk.
            self._stream.readline()

        return "".join(body)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceReader):
            return NotImplemented
        return self._stream is other._stream

    def __hash__(self) -> int:
        return id(self._stream)

    def __repr__(self) -> str:
        return f"ResourceReader(stream={self._stream!r})"
