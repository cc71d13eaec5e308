"""Adapters: everything that touches the network or the filesystem.

Why a package:
- Keeps httpx, sockets and Pillow out of the core.
- Each module implements one I/O concern for the request types in
  `gravatar_client.core.requests`.
"""

from gravatar_client.adapters.image_handler import ImageRequestHandler, decode_image
from gravatar_client.adapters.image_saver import save_image
from gravatar_client.adapters.json_exporter import export_profile_json
from gravatar_client.adapters.profile_handler import ProfileRequestHandler, get_default_handler
from gravatar_client.adapters.resource_reader import ResourceReader

__all__ = [
    "ImageRequestHandler",
    "ProfileRequestHandler",
    "ResourceReader",
    "decode_image",
    "export_profile_json",
    "get_default_handler",
    "save_image",
]
