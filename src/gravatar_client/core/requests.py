"""Request option objects for the avatar, QR-code and profile APIs.

Each request is a mutable bag of options with fluent setters (every setter
returns the request) and a `request_url` property rendering the options.
Setters validate immediately; unset options stay None and are left out of
the query string.

Fetching helpers (`get_image`, `save_to`, `get_profile`, `write_to_file`)
delegate to the handlers in `gravatar_client.adapters`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from gravatar_client.core.enums import (
    DefaultImageType,
    Protocol,
    QrImageType,
    QrImageVersion,
    Rating,
    UrlParameter,
)
from gravatar_client.core.errors import (
    GravatarClientError,
    InvalidArgumentError,
    require,
    require_text,
)
from gravatar_client.core.hashing import email_to_avatar_hash, email_to_profile_hash
from gravatar_client.core.tokens import ProfileTokenProvider
from gravatar_client.core.urls import (
    FORCE_DEFAULT_VALUE,
    JPG_SUFFIX,
    QR_BASE_URL,
    build_query,
    encode_value,
)
from gravatar_client.core.validation import check_output_path, is_valid_image_url

if TYPE_CHECKING:
    from collections.abc import Iterable

    from PIL import Image

    from gravatar_client.adapters.image_handler import ImageRequestHandler
    from gravatar_client.adapters.profile_handler import ProfileRequestHandler
    from gravatar_client.core.domain.models import Profile

AVATAR_SIZE_RANGE = range(1, 2049)
QR_SIZE_RANGE = range(80, 1025)
PROFILE_API_BASE_URL = "https://api.gravatar.com/v3/profiles/"

E = TypeVar("E", bound=Enum)


def _coerce(enum_cls: type[E], value: E | str, name: str) -> E:
    """Accept an enum member, its raw value or its member name."""

    require(value, name)
    try:
        return enum_cls(value)
    except ValueError as exc:
        if isinstance(value, str) and value.upper() in enum_cls.__members__:
            return enum_cls.__members__[value.upper()]
        raise InvalidArgumentError(f"Invalid {name}: {value!r}") from exc


def _check_size(size: int, bounds: range, name: str) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {size!r}")
    if size not in bounds:
        raise InvalidArgumentError(f"{name} must be in [{bounds.start}, {bounds.stop - 1}], got {size}")
    return size


@dataclass(unsafe_hash=True)
class AvatarRequest:
    """Options for ``https://www.gravatar.com/avatar/<hash>``."""

    hash: str
    size: int | None = None
    rating: Rating | None = None
    default_image_type: DefaultImageType | None = None
    default_image_url: str | None = None
    force_default: bool = False
    protocol: Protocol = Protocol.HTTPS
    use_full_url_parameters: bool = False
    append_jpg_suffix: bool = False

    def __post_init__(self) -> None:
        require_text(self.hash, "hash")
        if self.size is not None:
            _check_size(self.size, AVATAR_SIZE_RANGE, "size")

    @classmethod
    def from_email(cls, email: str) -> "AvatarRequest":
        return cls(email_to_avatar_hash(email))

    @classmethod
    def from_hash(cls, hash_: str) -> "AvatarRequest":
        return cls(require_text(hash_, "hash"))

    def set_size(self, size: int) -> "AvatarRequest":
        self.size = _check_size(size, AVATAR_SIZE_RANGE, "size")
        return self

    def set_rating(self, rating: Rating | str) -> "AvatarRequest":
        self.rating = _coerce(Rating, rating, "rating")
        return self

    def set_default_image_type(self, image_type: DefaultImageType | str) -> "AvatarRequest":
        self.default_image_type = _coerce(DefaultImageType, image_type, "default image type")
        self.default_image_url = None
        return self

    def set_default_image_url(
        self, url: str, allowed_domains: Iterable[str] | None = None
    ) -> "AvatarRequest":
        """Use an image of your own as the fallback.

        Only the URL's shape is checked here. Whether it serves an image is
        checked when the avatar is fetched.
        """

        require_text(url, "default image URL")
        if not is_valid_image_url(url, allowed_domains):
            raise InvalidArgumentError(f"Invalid default image URL: {url!r}")
        self.default_image_url = url
        self.default_image_type = None
        return self

    def set_force_default(self, force: bool) -> "AvatarRequest":
        require(force, "force")
        self.force_default = bool(force)
        return self

    def set_protocol(self, protocol: Protocol | str) -> "AvatarRequest":
        self.protocol = _coerce(Protocol, protocol, "protocol")
        return self

    def set_use_full_url_parameters(self, full: bool) -> "AvatarRequest":
        require(full, "full")
        self.use_full_url_parameters = bool(full)
        return self

    def set_append_jpg_suffix(self, append: bool) -> "AvatarRequest":
        require(append, "append")
        self.append_jpg_suffix = bool(append)
        return self

    @property
    def request_url(self) -> str:
        if self.force_default and self.default_image_url is None:
            raise GravatarClientError("Must provide a default image URL when forcing the default image")

        full = self.use_full_url_parameters
        if self.default_image_type is not None:
            default: str | None = self.default_image_type.value
        else:
            default = self.default_image_url

        query = build_query(
            [
                (UrlParameter.SIZE.key(full), self.size),
                (UrlParameter.RATING.key(full), self.rating.value if self.rating else None),
                (UrlParameter.DEFAULT.key(full), default),
                (UrlParameter.FORCE_DEFAULT.key(full), FORCE_DEFAULT_VALUE if self.force_default else None),
            ]
        )
        suffix = JPG_SUFFIX if self.append_jpg_suffix else ""
        return f"{self.protocol.avatar_base_url}{encode_value(self.hash)}{suffix}{query}"

    def get_image(self, handler: ImageRequestHandler | None = None) -> Image.Image:
        from gravatar_client.adapters.image_handler import ImageRequestHandler  # noqa: PLC0415

        return (handler or ImageRequestHandler()).fetch_avatar(self)

    def save_to(
        self,
        path: Path | str,
        image_format: str = "png",
        handler: ImageRequestHandler | None = None,
    ) -> Path:
        from gravatar_client.adapters.image_saver import normalize_format, save_image  # noqa: PLC0415

        # Bad targets and formats fail before any download.
        target = check_output_path(Path(path))
        normalize_format(image_format)
        return save_image(self.get_image(handler), target, image_format)


@dataclass(unsafe_hash=True)
class QrCodeRequest:
    """Options for ``https://gravatar.com/<hash>.qr``."""

    hash: str
    size: int | None = None
    image_type: QrImageType | None = None
    version: QrImageVersion | None = None

    def __post_init__(self) -> None:
        require_text(self.hash, "hash")
        if self.size is not None:
            _check_size(self.size, QR_SIZE_RANGE, "size")

    @classmethod
    def from_email(cls, email: str) -> "QrCodeRequest":
        return cls(email_to_profile_hash(email))

    @classmethod
    def from_hash(cls, hash_: str) -> "QrCodeRequest":
        return cls(require_text(hash_, "hash"))

    def set_size(self, size: int) -> "QrCodeRequest":
        self.size = _check_size(size, QR_SIZE_RANGE, "size")
        return self

    def set_image_type(self, image_type: QrImageType | str) -> "QrCodeRequest":
        self.image_type = _coerce(QrImageType, image_type, "QR image type")
        return self

    def set_version(self, version: QrImageVersion | str) -> "QrCodeRequest":
        self.version = _coerce(QrImageVersion, version, "QR version")
        return self

    @property
    def request_url(self) -> str:
        query = build_query(
            [
                ("type", self.image_type.value if self.image_type else None),
                ("version", self.version.value if self.version else None),
                ("size", self.size),
            ]
        )
        return f"{QR_BASE_URL}{encode_value(self.hash)}.qr{query}"

    def get_image(self, handler: ImageRequestHandler | None = None) -> Image.Image:
        from gravatar_client.adapters.image_handler import ImageRequestHandler  # noqa: PLC0415

        return (handler or ImageRequestHandler()).fetch_qr_code(self)

    def save_to(self, path: Path | str, handler: ImageRequestHandler | None = None) -> Path:
        """Save the QR code as PNG. Refuses to overwrite an existing file."""

        from gravatar_client.adapters.image_saver import save_image  # noqa: PLC0415

        target = check_output_path(Path(path))
        if target.exists():
            raise InvalidArgumentError(f"Output file already exists: {target}")
        return save_image(self.get_image(handler), target, "png")


@dataclass(unsafe_hash=True)
class ProfileRequest:
    """A profile lookup by SHA-256 hash or profile slug."""

    hash_or_id: str
    token_provider: ProfileTokenProvider | None = None

    def __post_init__(self) -> None:
        require_text(self.hash_or_id, "hash_or_id")

    @classmethod
    def from_email(cls, email: str) -> "ProfileRequest":
        return cls(email_to_profile_hash(email))

    @classmethod
    def from_hash_or_id(cls, hash_or_id: str) -> "ProfileRequest":
        return cls(require_text(hash_or_id, "hash_or_id"))

    def set_token_provider(self, provider: ProfileTokenProvider) -> "ProfileRequest":
        require(provider, "provider")
        self.token_provider = provider
        return self

    @property
    def is_authenticated(self) -> bool:
        return self.token_provider is not None

    @property
    def request_url(self) -> str:
        return f"{PROFILE_API_BASE_URL}{encode_value(self.hash_or_id)}"

    def get_profile(self, handler: ProfileRequestHandler | None = None) -> Profile:
        from gravatar_client.adapters.profile_handler import get_default_handler  # noqa: PLC0415

        token = self.token_provider.get_token() if self.token_provider else None
        return (handler or get_default_handler()).get_profile(token, self.hash_or_id)

    def write_to_file(self, path: Path | str, handler: ProfileRequestHandler | None = None) -> Path:
        from gravatar_client.adapters.json_exporter import export_profile_json  # noqa: PLC0415

        target = check_output_path(Path(path))
        return export_profile_json(profile=self.get_profile(handler), output_path=target)
