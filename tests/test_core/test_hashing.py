"""Tests for gravatar_client.core.hashing."""

import pytest

from gravatar_client.core.errors import InvalidArgumentError, NullInputError, UnsupportedAlgorithmError
from gravatar_client.core.hashing import (
    MD5,
    SHA1,
    SHA256,
    Hasher,
    email_to_avatar_hash,
    email_to_hash,
    email_to_profile_hash,
    hash_hex,
    normalize_email,
    resolve_algorithm,
)

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
VALID_MD5 = "b84905fab98a3dadd19d06484610dfbc"
VALID_SHA256 = "6da30438a4b003557545e467f5edc57b38c5d040d841a9a2680398061b0cd0ba"


def test_empty_string_sha256() -> None:
    assert hash_hex("SHA256", "") == EMPTY_SHA256


def test_known_digests() -> None:
    assert hash_hex(SHA1, "abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"
    assert hash_hex(MD5, "valid@domain.com") == VALID_MD5


@pytest.mark.parametrize("name", ["sha256", "SHA256", "SHA-256", "sha_256", " Sha-256 "])
def test_algorithm_spellings(name: str) -> None:
    assert resolve_algorithm(name) == "sha256"


def test_digest_is_lowercase_fixed_width_hex() -> None:
    digest = hash_hex(MD5, "a")
    assert len(digest) == 32
    assert digest == digest.lower()
    int(digest, 16)


def test_unsupported_algorithm() -> None:
    with pytest.raises(UnsupportedAlgorithmError):
        hash_hex("not-a-digest", "value")


def test_none_inputs() -> None:
    with pytest.raises(NullInputError):
        hash_hex(None, "value")  # type: ignore[arg-type]
    with pytest.raises(NullInputError):
        hash_hex(SHA256, None)  # type: ignore[arg-type]


def test_normalize_email() -> None:
    assert normalize_email("  Valid@Domain.COM ") == "valid@domain.com"


def test_email_hash_ignores_case_and_whitespace() -> None:
    assert email_to_hash("Valid@Domain.com ") == email_to_hash("valid@domain.com") == VALID_SHA256


def test_avatar_and_profile_hashes() -> None:
    assert email_to_avatar_hash("VALID@domain.com") == VALID_MD5
    assert email_to_profile_hash("valid@domain.com") == VALID_SHA256


def test_email_hash_rejects_invalid_email() -> None:
    with pytest.raises(InvalidArgumentError):
        email_to_hash("not-an-email")
    with pytest.raises(NullInputError):
        email_to_hash(None)  # type: ignore[arg-type]


def test_hasher() -> None:
    assert Hasher.sha256().hash("") == EMPTY_SHA256
    assert Hasher.md5().hash("valid@domain.com") == VALID_MD5
    assert Hasher.from_algorithm("sha-1") == Hasher("sha-1")


def test_hasher_requires_algorithm() -> None:
    with pytest.raises(NullInputError):
        Hasher(None)  # type: ignore[arg-type]
    with pytest.raises(UnsupportedAlgorithmError):
        Hasher("nope").hash("x")


def test_non_string_inputs_are_library_errors() -> None:
    with pytest.raises(InvalidArgumentError):
        hash_hex(5, "x")  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        hash_hex(SHA256, b"x")  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        resolve_algorithm("  ")
