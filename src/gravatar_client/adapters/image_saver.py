"""Writing fetched images to disk with Pillow."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from gravatar_client.core.errors import GravatarClientError, InvalidArgumentError, require, require_text
from gravatar_client.core.validation import check_output_path

logger = logging.getLogger("gravatar_client.images")

_FORMAT_ALIASES = {"jpg": "jpeg", "tif": "tiff"}
# JPEG has no alpha channel or palette.
_RGB_ONLY_FORMATS = {"jpeg"}


def supported_formats() -> set[str]:
    """Lower-case names of the formats Pillow can write."""

    Image.init()
    return {name.lower() for name in Image.SAVE}


def normalize_format(image_format: str) -> str:
    name = require_text(image_format, "image_format").strip().lower()
    name = _FORMAT_ALIASES.get(name, name)
    if name not in supported_formats():
        raise InvalidArgumentError(f"Unsupported image format: {image_format!r}")
    return name


def save_image(image: Image.Image, path: Path, image_format: str) -> Path:
    require(image, "image")
    check_output_path(path)
    name = normalize_format(image_format)

    if name in _RGB_ONLY_FORMATS and image.mode not in ("RGB", "L"):
        image = image.convert("RGB")

    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        image.save(path, format=name.upper())
    except (OSError, ValueError) as exc:
        raise GravatarClientError(f"Failed to write image to {path}: {exc}") from exc

    logger.info("Saved %s image to %s", name, path)
    return path
