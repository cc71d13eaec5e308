"""Query-string assembly shared by the request types."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import quote

QR_BASE_URL = "https://gravatar.com/"
JPG_SUFFIX = ".jpg"
FORCE_DEFAULT_VALUE = "y"


def encode_value(value: object) -> str:
    return quote(str(value), safe="")


def build_query(pairs: Iterable[tuple[str, object | None]]) -> str:
    """Render `pairs` as ``?k=v&k=v`` in order, skipping None values.

    Returns an empty string when nothing is left, so no bare ``?`` is emitted.
    """

    rendered = [f"{key}={encode_value(value)}" for key, value in pairs if value is not None]
    if not rendered:
        return ""
    return "?" + "&".join(rendered)
