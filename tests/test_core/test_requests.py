"""Tests for gravatar_client.core.requests."""

from pathlib import Path

import pytest

from gravatar_client.core.enums import DefaultImageType, Protocol, QrImageType, QrImageVersion, Rating
from gravatar_client.core.errors import GravatarClientError, InvalidArgumentError, NullInputError
from gravatar_client.core.requests import AvatarRequest, ProfileRequest, QrCodeRequest
from gravatar_client.core.tokens import ProfileTokenProvider

AVATAR_HASH = "b84905fab98a3dadd19d06484610dfbc"
PROFILE_HASH = "6da30438a4b003557545e467f5edc57b38c5d040d841a9a2680398061b0cd0ba"
DEFAULT_URL = "https://picsum.photos/seed/gravatar-java-client/200/300"


def test_avatar_url_without_options() -> None:
    assert AvatarRequest.from_hash(AVATAR_HASH).request_url == f"https://www.gravatar.com/avatar/{AVATAR_HASH}"


def test_avatar_from_email_uses_md5() -> None:
    assert AvatarRequest.from_email(" Valid@Domain.com").hash == AVATAR_HASH


def test_avatar_url_with_every_option() -> None:
    request = (
        AvatarRequest.from_email("valid@domain.com")
        .set_size(2000)
        .set_rating(Rating.X)
        .set_default_image_url(DEFAULT_URL)
        .set_force_default(True)
        .set_protocol(Protocol.HTTP)
        .set_append_jpg_suffix(True)
    )
    assert request.request_url == (
        f"http://www.gravatar.com/avatar/{AVATAR_HASH}.jpg"
        "?s=2000&r=x&d=https%3A%2F%2Fpicsum.photos%2Fseed%2Fgravatar-java-client%2F200%2F300&f=y"
    )


def test_avatar_url_full_parameter_names() -> None:
    request = (
        AvatarRequest.from_hash(AVATAR_HASH)
        .set_size(80)
        .set_rating("pg")
        .set_default_image_type(DefaultImageType.IDENTICON)
        .set_use_full_url_parameters(True)
    )
    assert request.request_url.endswith("?size=80&rating=pg&default=identicon")


def test_default_type_and_url_replace_each_other() -> None:
    request = AvatarRequest.from_hash(AVATAR_HASH).set_default_image_url(DEFAULT_URL)
    request.set_default_image_type("404")
    assert request.default_image_url is None
    assert request.request_url.endswith("?d=404")

    request.set_default_image_url(DEFAULT_URL)
    assert request.default_image_type is None


def test_force_default_needs_default_url() -> None:
    request = AvatarRequest.from_hash(AVATAR_HASH).set_force_default(True)
    with pytest.raises(GravatarClientError, match="default image URL"):
        _ = request.request_url


@pytest.mark.parametrize("size", [1, 80, 2048])
def test_avatar_size_bounds_accepted(size: int) -> None:
    assert AvatarRequest.from_hash(AVATAR_HASH).set_size(size).size == size


@pytest.mark.parametrize("size", [0, -1, 2049, True, "80"])
def test_avatar_size_bounds_rejected(size: object) -> None:
    with pytest.raises(InvalidArgumentError):
        AvatarRequest.from_hash(AVATAR_HASH).set_size(size)  # type: ignore[arg-type]


def test_avatar_option_validation() -> None:
    request = AvatarRequest.from_hash(AVATAR_HASH)
    with pytest.raises(InvalidArgumentError):
        request.set_rating("nc-17")
    with pytest.raises(InvalidArgumentError):
        request.set_default_image_url("not a url")
    with pytest.raises(InvalidArgumentError):
        request.set_default_image_url(DEFAULT_URL, allowed_domains=["gravatar.com"])
    with pytest.raises(NullInputError):
        request.set_rating(None)  # type: ignore[arg-type]
    with pytest.raises(NullInputError):
        request.set_force_default(None)  # type: ignore[arg-type]


def test_enum_options_accept_member_names() -> None:
    request = AvatarRequest.from_hash(AVATAR_HASH).set_protocol("HTTP").set_default_image_type("mystery_person")
    assert request.protocol is Protocol.HTTP
    assert request.default_image_type is DefaultImageType.MYSTERY_PERSON


def test_avatar_requires_hash() -> None:
    with pytest.raises(NullInputError):
        AvatarRequest.from_hash(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        AvatarRequest.from_email("nope")


def test_avatar_equality_and_hash() -> None:
    first = AvatarRequest.from_hash(AVATAR_HASH).set_size(100)
    second = AvatarRequest.from_hash(AVATAR_HASH).set_size(100)
    assert first == second
    assert hash(first) == hash(second)
    second.set_rating(Rating.G)
    assert first != second


def test_qr_url() -> None:
    request = (
        QrCodeRequest.from_email("valid@domain.com")
        .set_size(200)
        .set_image_type(QrImageType.USER)
        .set_version(QrImageVersion.THREE)
    )
    assert request.hash == PROFILE_HASH
    assert request.request_url == f"https://gravatar.com/{PROFILE_HASH}.qr?type=user&version=3&size=200"


def test_qr_url_without_options() -> None:
    assert QrCodeRequest.from_hash("abc").request_url == "https://gravatar.com/abc.qr"


@pytest.mark.parametrize("size", [79, 1025])
def test_qr_size_bounds(size: int) -> None:
    with pytest.raises(InvalidArgumentError):
        QrCodeRequest.from_hash("abc").set_size(size)


def test_qr_equality() -> None:
    assert QrCodeRequest.from_hash("abc").set_version("1") == QrCodeRequest("abc", version=QrImageVersion.ONE)


def test_profile_request() -> None:
    request = ProfileRequest.from_email("Valid@Domain.com")
    assert request.hash_or_id == PROFILE_HASH
    assert not request.is_authenticated
    assert request.request_url == f"https://api.gravatar.com/v3/profiles/{PROFILE_HASH}"

    request.set_token_provider(ProfileTokenProvider.from_env("GRAVATAR_TOKEN"))
    assert request.is_authenticated
    assert request == ProfileRequest(PROFILE_HASH, ProfileTokenProvider.from_env("GRAVATAR_TOKEN"))


def test_profile_request_validation() -> None:
    with pytest.raises(InvalidArgumentError):
        ProfileRequest.from_hash_or_id(" ")
    with pytest.raises(NullInputError):
        ProfileRequest.from_hash_or_id("slug").set_token_provider(None)  # type: ignore[arg-type]


def test_output_path_must_not_be_a_directory(tmp_path: Path) -> None:
    with pytest.raises(InvalidArgumentError, match="directory"):
        AvatarRequest.from_hash(AVATAR_HASH).save_to(tmp_path)
    with pytest.raises(InvalidArgumentError, match="directory"):
        ProfileRequest.from_hash_or_id("slug").write_to_file(tmp_path)
