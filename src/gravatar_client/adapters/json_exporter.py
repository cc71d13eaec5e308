"""JSON export of fetched profiles.

Why JSON:
- Interoperability with other tools and pipelines.
- Keeps a snapshot of the profile without another API round-trip.
"""

from __future__ import annotations

import json
from pathlib import Path

from gravatar_client.core.domain.models import Profile
from gravatar_client.core.errors import GravatarClientError, require
from gravatar_client.core.validation import check_output_path


def profile_to_json(profile: Profile) -> str:
    payload = profile.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_profile_json(*, profile: Profile, output_path: Path) -> Path:
    """Export `profile` to UTF-8 JSON with a stable layout."""

    require(profile, "profile")
    check_output_path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        output_path.write_text(profile_to_json(profile), encoding="utf-8")
    except OSError as exc:
        raise GravatarClientError(f"Failed to write profile to {output_path}: {exc}") from exc
    return output_path
