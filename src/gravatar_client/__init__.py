"""gravatar-client: Gravatar Avatar, QR-code and Profile API client."""

import importlib.metadata as importlib_metadata

from gravatar_client.adapters import (
    ImageRequestHandler,
    ProfileRequestHandler,
    ResourceReader,
)
from gravatar_client.core.config import AppSettings
from gravatar_client.core.domain.models import Profile
from gravatar_client.core.enums import (
    DefaultImageType,
    Protocol,
    QrImageType,
    QrImageVersion,
    Rating,
)
from gravatar_client.core.errors import (
    ChunkSizeError,
    GravatarClientError,
    GravatarError,
    InvalidArgumentError,
    NullInputError,
    UnsupportedAlgorithmError,
)
from gravatar_client.core.hashing import Hasher, email_to_hash, hash_hex
from gravatar_client.core.requests import AvatarRequest, ProfileRequest, QrCodeRequest
from gravatar_client.core.tokens import ProfileTokenProvider
from gravatar_client.core.validation import InputValidator


def _detect_version() -> str:
    """Return installed package version or a local fallback when metadata is unavailable."""
    try:
        return importlib_metadata.version("gravatar-client")
    except importlib_metadata.PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _detect_version()

__all__ = [
    "AppSettings",
    "AvatarRequest",
    "ChunkSizeError",
    "DefaultImageType",
    "GravatarClientError",
    "GravatarError",
    "Hasher",
    "ImageRequestHandler",
    "InputValidator",
    "InvalidArgumentError",
    "NullInputError",
    "Profile",
    "ProfileRequest",
    "ProfileRequestHandler",
    "ProfileTokenProvider",
    "Protocol",
    "QrCodeRequest",
    "QrImageType",
    "QrImageVersion",
    "Rating",
    "ResourceReader",
    "UnsupportedAlgorithmError",
    "email_to_hash",
    "hash_hex",
]
