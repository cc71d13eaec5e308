"""Bearer token sources for the authenticated Profiles API."""

from __future__ import annotations

import os
from typing import Callable

from gravatar_client.core.config import AppSettings
from gravatar_client.core.errors import require, require_text


class ProfileTokenProvider:
    """Supplies a bearer token on demand.

    The token itself is never stored or compared; two providers are equal when
    they name the same `source`.
    """

    def __init__(self, supplier: Callable[[], bytes], source: str) -> None:
        require(supplier, "supplier")
        self._supplier = supplier
        self.source = require_text(source, "source")

    @classmethod
    def from_env(cls, name: str) -> "ProfileTokenProvider":
        """Read the token from environment variable `name` each time it is needed."""

        require_text(name, "name")
        return cls(lambda: os.environ.get(name, "").encode("utf-8"), f"env:{name}")

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> "ProfileTokenProvider":
        settings = settings or AppSettings()
        return cls(lambda: (settings.api_token or "").encode("utf-8"), "settings:api_token")

    def get_token(self) -> bytes:
        return self._supplier()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProfileTokenProvider):
            return NotImplemented
        return self.source == other.source

    def __hash__(self) -> int:
        return hash(self.source)

    def __repr__(self) -> str:
        return f"ProfileTokenProvider(source={self.source!r})"
