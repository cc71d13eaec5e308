"""Enumerated request options understood by the Gravatar image APIs."""

from __future__ import annotations

from enum import Enum


class Rating(str, Enum):
    """Maximum content rating an avatar may carry."""

    G = "g"
    PG = "pg"
    R = "r"
    X = "x"


class DefaultImageType(str, Enum):
    """Built-in images Gravatar serves when no avatar exists for a hash."""

    NOT_FOUND = "404"
    MYSTERY_PERSON = "mp"
    IDENTICON = "identicon"
    MONSTER_ID = "monsterid"
    WAVATAR = "wavatar"
    RETRO = "retro"
    ROBOHASH = "robohash"
    BLANK = "blank"


class Protocol(str, Enum):
    """Scheme used for avatar requests."""

    HTTP = "http"
    HTTPS = "https"

    @property
    def avatar_base_url(self) -> str:
        return f"{self.value}://www.gravatar.com/avatar/"

    @classmethod
    def from_bool(cls, secure: bool) -> "Protocol":
        """Derive a protocol from a "use TLS" flag."""

        return cls.HTTPS if secure else cls.HTTP


class UrlParameter(str, Enum):
    """Avatar query parameters, stored under their full (verbose) names.

    The compact spelling is the first letter of the full name.
    """

    SIZE = "size"
    RATING = "rating"
    DEFAULT = "default"
    FORCE_DEFAULT = "forcedefault"

    def key(self, full: bool) -> str:
        return self.value if full else self.value[0]


class QrImageType(str, Enum):
    """Image drawn in the centre of a QR code."""

    BLANK = "blank"
    DEFAULT = "default"
    USER = "user"
    GRAVATAR = "gravatar"


class QrImageVersion(str, Enum):
    """QR code rendering style."""

    BLANK = "blank"
    ONE = "1"
    THREE = "3"
