"""Profiles API handler.

Implementation:
- Opens a TLS socket to the Profiles API host and sends a plain HTTP/1.1 GET,
  with ``Authorization: Bearer <token>`` when a token is supplied.
- Skips the response headers and reassembles the chunked body with
  `ResourceReader`.
- Parses the JSON into a `Profile`. An ``{"error": ...}`` document becomes
  ``GravatarClientError("API error: <message>")``.

Notes:
- Unauthenticated requests are rate limited harder by Gravatar and return a
  reduced profile (no links, interests, contact info, dates).
- Every call is a fresh round-trip: no cache, no retries.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from urllib.parse import quote

from pydantic import ValidationError

from gravatar_client.adapters.resource_reader import ResourceReader
from gravatar_client.adapters.socket_transport import build_get_request, open_tls_socket
from gravatar_client.core.config import AppSettings
from gravatar_client.core.domain.models import Profile, ProfileRequestResult
from gravatar_client.core.errors import (
    ChunkSizeError,
    GravatarClientError,
    InvalidArgumentError,
    require_text,
)
from gravatar_client.core.interfaces.transport import SocketFactory

logger = logging.getLogger("gravatar_client.profile")


def parse_profile(body: str) -> Profile:
    """Turn a Profiles API response body into a `Profile`."""

    try:
        payload = json.loads(body)
    except json.JSONDecodeError as exc:
        raise GravatarClientError(f"Profile response is not valid JSON: {exc}") from exc

    if isinstance(payload, dict) and "error" in payload:
        raise GravatarClientError(f"API error: {payload['error']}")

    try:
        return Profile.model_validate(payload)
    except ValidationError as exc:
        raise GravatarClientError(f"Unexpected profile document: {exc}") from exc


def _bearer_header(token: bytes) -> str:
    try:
        value = token.decode("ascii").strip()
    except UnicodeDecodeError as exc:
        raise InvalidArgumentError("API token must be ASCII") from exc
    return f"Bearer {value}"


class ProfileRequestHandler:
    """Fetches profiles and records each attempt.

    `authenticated_request_results` / `unauthenticated_request_results` grow by
    one `ProfileRequestResult` per attempt. They are plain lists: share a
    handler between threads only with your own locking.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        socket_factory: SocketFactory | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._socket_factory = socket_factory or open_tls_socket
        self.authenticated_request_results: list[ProfileRequestResult] = []
        self.unauthenticated_request_results: list[ProfileRequestResult] = []

    def build_path(self, name_or_hash: str) -> str:
        prefix = self._settings.profile_api_path.rstrip("/")
        return f"{prefix}/{quote(name_or_hash.strip(), safe='')}"

    def build_url(self, name_or_hash: str) -> str:
        host = self._settings.profile_api_host
        port = self._settings.profile_api_port
        authority = host if port == 443 else f"{host}:{port}"
        return f"https://{authority}{self.build_path(name_or_hash)}"

    def _headers(self, token: bytes | None) -> dict[str, str]:
        headers = {
            "User-Agent": self._settings.user_agent,
            "Accept": "application/json",
            "Accept-Encoding": "identity",
            "Connection": "close",
        }
        if token:
            headers["Authorization"] = _bearer_header(token)
        return headers

    def _fetch_body(self, name_or_hash: str, headers: dict[str, str]) -> str:
        host = self._settings.profile_api_host
        port = self._settings.profile_api_port
        request = build_get_request(host, port, self.build_path(name_or_hash), headers)

        logger.debug("GET %s (authenticated=%s)", self.build_url(name_or_hash), "Authorization" in headers)
        try:
            with self._socket_factory(host, port, self._settings.http_timeout_seconds) as sock:
                sock.sendall(request)
                # latin-1 maps bytes 1:1 to characters, so chunk sizes count bytes.
                with sock.makefile("r", encoding="latin-1", newline="") as stream:
                    raw = ResourceReader(stream).skip_headers().read_chunked_body()
            return raw.encode("latin-1").decode("utf-8")
        except ChunkSizeError as exc:
            raise GravatarClientError(f"Malformed chunked response from {host}: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise GravatarClientError(f"Profile request to {host} failed: {exc}") from exc

    def _record(self, authenticated: bool, succeeded: bool) -> None:
        result = ProfileRequestResult(succeeded=succeeded)
        if authenticated:
            self.authenticated_request_results.append(result)
        else:
            self.unauthenticated_request_results.append(result)

    def get_profile(self, token: bytes | None, name_or_hash: str) -> Profile:
        """Fetch the profile for a SHA-256 email hash or a profile slug.

        An empty `token` means an unauthenticated request.
        """

        # Argument errors are raised before the attempt is recorded.
        require_text(name_or_hash, "name_or_hash")
        headers = self._headers(token)
        authenticated = bool(token)
        succeeded = False
        try:
            profile = parse_profile(self._fetch_body(name_or_hash, headers))
            succeeded = True
        finally:
            self._record(authenticated, succeeded)

        logger.info("Fetched profile %s", profile.hash)
        return profile


@lru_cache(maxsize=1)
def get_default_handler() -> ProfileRequestHandler:
    """Process-wide handler used by `ProfileRequest.get_profile`."""

    return ProfileRequestHandler()
