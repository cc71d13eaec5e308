"""Fetching and decoding avatar and QR-code images.

Flow:
- Render the request URL (option errors surface before any I/O).
- For avatars with a custom default image, fetch and decode that image first:
  Gravatar silently falls back when the URL is bad, so it is checked here.
- GET the image with httpx and decode it with Pillow.

Every failure becomes a `GravatarClientError` chained to its cause.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from io import BytesIO
from typing import TYPE_CHECKING

import httpx
from PIL import Image

from gravatar_client.adapters.http_client import build_client
from gravatar_client.core.config import AppSettings
from gravatar_client.core.errors import GravatarClientError, require
from gravatar_client.core.validation import is_valid_image_url

if TYPE_CHECKING:
    from gravatar_client.core.requests import AvatarRequest, QrCodeRequest

logger = logging.getLogger("gravatar_client.images")


def decode_image(data: bytes, source: str = "<bytes>") -> Image.Image:
    """Decode `data` fully so truncated or bogus payloads fail here."""

    try:
        image = Image.open(BytesIO(data))
        image.load()
    except (OSError, Image.DecompressionBombError) as exc:
        raise GravatarClientError(f"Could not decode image from {source}: {exc}") from exc
    return image


class ImageRequestHandler:
    """Retrieves images for `AvatarRequest` and `QrCodeRequest` objects.

    Pass `client` to reuse an existing `httpx.Client` (it is not closed here);
    otherwise a client is built from `settings` for each call.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    @contextmanager
    def _session(self) -> Iterator[httpx.Client]:
        if self._client is not None:
            yield self._client
            return
        with build_client(self._settings) as client:
            yield client

    def fetch_bytes(self, url: str) -> bytes:
        logger.debug("GET %s", url)
        try:
            with self._session() as client:
                response = client.get(url)
        except httpx.HTTPError as exc:
            raise GravatarClientError(f"Request to {url} failed: {exc}") from exc

        if not response.is_success:
            raise GravatarClientError(f"Request to {url} failed with HTTP {response.status_code}")
        return response.content

    def fetch_image(self, url: str) -> Image.Image:
        return decode_image(self.fetch_bytes(url), url)

    def verify_default_image(self, url: str) -> None:
        """Raise `GravatarClientError` unless `url` serves a decodable image."""

        allowed = self._settings.allowed_image_domains
        if allowed and not is_valid_image_url(url, allowed):
            raise GravatarClientError(f"Default image URL is not on an allowed domain: {url}")
        try:
            self.fetch_image(url)
        except GravatarClientError as exc:
            raise GravatarClientError(f"Default image URL does not point to a retrievable image: {url}") from exc

    def fetch_avatar(self, request: AvatarRequest) -> Image.Image:
        require(request, "request")
        url = request.request_url
        if request.default_image_url is not None:
            self.verify_default_image(request.default_image_url)
        image = self.fetch_image(url)
        logger.info("Fetched avatar %s (%dx%d)", request.hash, image.width, image.height)
        return image

    def fetch_qr_code(self, request: QrCodeRequest) -> Image.Image:
        require(request, "request")
        return self.fetch_image(request.request_url)
