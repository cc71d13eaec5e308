"""Tests for gravatar_client.core.errors."""

import pytest

from gravatar_client.core.errors import (
    ChunkSizeError,
    GravatarClientError,
    GravatarError,
    InvalidArgumentError,
    NullInputError,
    UnsupportedAlgorithmError,
    require,
    require_text,
)


@pytest.mark.parametrize(
    "error_cls",
    [ChunkSizeError, GravatarClientError, InvalidArgumentError, NullInputError, UnsupportedAlgorithmError],
)
def test_errors_share_a_base(error_cls: type[Exception]) -> None:
    assert issubclass(error_cls, GravatarError)


def test_argument_errors_subclass_builtins() -> None:
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(NullInputError, TypeError)
    assert issubclass(ChunkSizeError, ValueError)


def test_null_input_carries_name() -> None:
    err = NullInputError("email")
    assert err.name == "email"
    assert str(err) == "email must not be None"


def test_unsupported_algorithm_message() -> None:
    err = UnsupportedAlgorithmError("WHIRLPOOL-9")
    assert err.algorithm == "WHIRLPOOL-9"
    assert "WHIRLPOOL-9" in str(err)


def test_chunk_size_error_carries_token() -> None:
    err = ChunkSizeError("zz")
    assert err.token == "zz"
    assert "'zz'" in str(err)


def test_require_rejects_none_only() -> None:
    require(0, "value")
    require("", "value")
    with pytest.raises(NullInputError):
        require(None, "value")


def test_require_text() -> None:
    assert require_text("abc", "value") == "abc"
    with pytest.raises(NullInputError):
        require_text(None, "value")
    with pytest.raises(InvalidArgumentError, match="blank"):
        require_text("   ", "value")
    with pytest.raises(InvalidArgumentError, match="string"):
        require_text(42, "value")  # type: ignore[arg-type]
