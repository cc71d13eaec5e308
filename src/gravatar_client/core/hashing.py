"""Hex digests and Gravatar identifiers.

Gravatar keys everything by a digest of the normalized (strip + lower) email:
- MD5 for the classic avatar URLs.
- SHA-256 for QR codes and the v3 Profiles API.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from gravatar_client.core.errors import (
    InvalidArgumentError,
    UnsupportedAlgorithmError,
    require,
    require_text,
)
from gravatar_client.core.validation import is_valid_email_address

MD5 = "md5"
SHA1 = "sha1"
SHA256 = "sha256"


def _canonical_key(name: str) -> str:
    return name.strip().lower().replace("-", "").replace("_", "")


# "SHA-256", "sha256" and "SHA_256" all resolve to hashlib's "sha256".
# SHAKE digests need an explicit length and are left out.
_ALGORITHMS: dict[str, str] = {
    _canonical_key(name): name.lower()
    for name in hashlib.algorithms_available
    if not name.lower().startswith("shake")
}


def resolve_algorithm(algorithm: str) -> str:
    """Return hashlib's name for `algorithm` or raise `UnsupportedAlgorithmError`."""

    resolved = _ALGORITHMS.get(_canonical_key(require_text(algorithm, "algorithm")))
    if resolved is None:
        raise UnsupportedAlgorithmError(algorithm)
    return resolved


def hash_hex(algorithm: str, value: str) -> str:
    """Digest the UTF-8 bytes of `value` and return lower-case hex."""

    name = resolve_algorithm(algorithm)
    require(value, "value")
    if not isinstance(value, str):
        raise InvalidArgumentError("value must be a string")
    try:
        digest = hashlib.new(name, value.encode("utf-8"))  # nosec - public identifiers
    except ValueError as exc:
        # Listed by OpenSSL but not usable in this build (e.g. FIPS mode).
        raise UnsupportedAlgorithmError(algorithm) from exc
    return digest.hexdigest()


def normalize_email(email: str) -> str:
    return email.strip().lower()


def email_to_hash(email: str, algorithm: str = SHA256) -> str:
    """Validate, normalize and digest an email address."""

    require(email, "email")
    if not is_valid_email_address(email):
        raise InvalidArgumentError(f"Invalid email address: {email!r}")
    return hash_hex(algorithm, normalize_email(email))


def email_to_avatar_hash(email: str) -> str:
    return email_to_hash(email, MD5)


def email_to_profile_hash(email: str) -> str:
    return email_to_hash(email, SHA256)


@dataclass(frozen=True)
class Hasher:
    """A digest algorithm bound to a name, e.g. ``Hasher.sha256().hash("x")``."""

    algorithm: str

    def __post_init__(self) -> None:
        require_text(self.algorithm, "algorithm")

    @classmethod
    def md5(cls) -> "Hasher":
        return cls(MD5)

    @classmethod
    def sha256(cls) -> "Hasher":
        return cls(SHA256)

    @classmethod
    def from_algorithm(cls, algorithm: str) -> "Hasher":
        return cls(algorithm)

    def hash(self, value: str) -> str:
        return hash_hex(self.algorithm, value)
