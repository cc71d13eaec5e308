"""Tests for gravatar_client.adapters.json_exporter."""

import json
from pathlib import Path

import pytest

from gravatar_client.adapters.json_exporter import export_profile_json, profile_to_json
from gravatar_client.core.domain.models import Profile
from gravatar_client.core.errors import InvalidArgumentError, NullInputError

PROFILE = Profile(
    hash="abc",
    profile_url="https://gravatar.com/abc",
    display_name="Zoë",
    links=[{"label": "Blog", "url": "https://blog.example.com"}],
)


def test_profile_to_json_is_stable() -> None:
    text = profile_to_json(PROFILE)
    assert text == profile_to_json(PROFILE)
    assert text.endswith("\n")
    assert "Zoë" in text
    payload = json.loads(text)
    assert list(payload) == sorted(payload)
    assert payload["links"] == [{"label": "Blog", "url": "https://blog.example.com"}]


def test_export_creates_parents(tmp_path: Path) -> None:
    target = export_profile_json(profile=PROFILE, output_path=tmp_path / "out" / "abc.json")
    assert json.loads(target.read_text(encoding="utf-8"))["display_name"] == "Zoë"


def test_export_validation(tmp_path: Path) -> None:
    with pytest.raises(NullInputError):
        export_profile_json(profile=None, output_path=tmp_path / "x.json")  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        export_profile_json(profile=PROFILE, output_path=tmp_path)
    with pytest.raises(InvalidArgumentError):
        export_profile_json(profile=PROFILE, output_path=tmp_path / "a|b.json")
