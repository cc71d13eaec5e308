"""Input validation helpers.

These checks are about syntax only: an email that validates may not exist and
an image URL that validates may not serve an image. Whether the image is
really retrievable is checked when the avatar is fetched.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit

from gravatar_client.core.errors import InvalidArgumentError, require, require_text

# local@domain.tld: one "@", no whitespace, at least one dot in the domain.
_EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s.]+(?:\.[^@\s.]+)+")

_INVALID_FILENAME_CHARS = frozenset('<>:"/\\|?*\'\x00')

_IMAGE_URL_SCHEMES = ("http", "https")


def is_valid_email_address(value: str | None) -> bool:
    if not value or not value.strip():
        return False
    return _EMAIL_PATTERN.fullmatch(value.strip()) is not None


def _host_allowed(host: str, allowed_domains: Iterable[str]) -> bool:
    for domain in allowed_domains:
        domain = domain.strip().lower().lstrip(".")
        if domain and (host == domain or host.endswith("." + domain)):
            return True
    return False


def is_valid_image_url(value: str | None, allowed_domains: Iterable[str] | None = None) -> bool:
    """Whether `value` is an absolute http(s) URL with a dotted host.

    With `allowed_domains`, the host must be one of them or a subdomain.
    """

    if not value or not value.strip() or any(c.isspace() for c in value):
        return False
    try:
        parts = urlsplit(value)
        host = parts.hostname
    except ValueError:
        return False
    if parts.scheme.lower() not in _IMAGE_URL_SCHEMES or not host or "." not in host:
        return False
    if allowed_domains:
        return _host_allowed(host.lower(), allowed_domains)
    return True


def is_valid_filename(filename: str) -> bool:
    """Whether `filename` (a bare name, not a path) is safe on Windows and Unix."""

    require(filename, "filename")
    if not filename:
        raise InvalidArgumentError("filename must not be empty")
    if not filename.strip():
        return False
    return not any(c in _INVALID_FILENAME_CHARS for c in filename)


def check_output_path(path: Path) -> Path:
    """Reject directories and filenames unsafe on Windows or Unix."""

    require(path, "path")
    if path.is_dir():
        raise InvalidArgumentError(f"Output path is a directory: {path}")
    if not path.name or not is_valid_filename(path.name):
        raise InvalidArgumentError(f"Invalid filename: {path.name!r}")
    return path


@dataclass(frozen=True)
class InputValidator:
    """Wraps a caller-supplied string and classifies it."""

    value: str

    def __post_init__(self) -> None:
        require_text(self.value, "value")

    def is_valid_email_address(self) -> bool:
        return is_valid_email_address(self.value)

    def is_valid_image_url(self, allowed_domains: Iterable[str] | None = None) -> bool:
        return is_valid_image_url(self.value, allowed_domains)
