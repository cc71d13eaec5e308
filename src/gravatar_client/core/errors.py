"""Typed errors for gravatar-client.

Every failure raised by the library derives from `GravatarError`, so callers
can catch the whole family at once. The argument errors also subclass the
matching built-in (`ValueError`/`TypeError`) for code that already expects
those.
"""

from __future__ import annotations


class GravatarError(Exception):
    """Base exception for all gravatar-client errors."""


class InvalidArgumentError(GravatarError, ValueError):
    """Raised when an input has the wrong shape or is out of range."""


class NullInputError(GravatarError, TypeError):
    """Raised when a required value is missing (`None`)."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} must not be None")


class UnsupportedAlgorithmError(GravatarError, ValueError):
    """Raised when a digest algorithm name is not known to hashlib."""

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(f"Unsupported digest algorithm: {algorithm}")


class ChunkSizeError(GravatarError, ValueError):
    """Raised when a chunked-body size line is not a hexadecimal number."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid chunk size: {token!r}")


class GravatarClientError(GravatarError):
    """Raised for failures while talking to Gravatar or decoding its responses.

    API-reported errors keep the API's own message, e.g.
    ``"API error: Profile not found"``.
    """


def require(value: object, name: str) -> None:
    """Raise `NullInputError` when `value` is None."""

    if value is None:
        raise NullInputError(name)


def require_text(value: str | None, name: str) -> str:
    """Return `value` if it is a non-blank string.

    Raises `NullInputError` for None and `InvalidArgumentError` for blank text.
    """

    require(value, name)
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string")
    if not value.strip():
        raise InvalidArgumentError(f"{name} must not be blank")
    return value
