"""Client configuration.

Why here:
- Centralizes environment variables (pydantic-settings) so adapters and the
  CLI read the same values.
- Lets a packaged install keep its API token in a per-user `.env` instead of
  the project directory.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "GRAVATAR_CLIENT_"
APP_DIR_NAME = "gravatar-client"


def get_user_config_dir() -> Path:
    """Per-user configuration directory.

    `%APPDATA%` on Windows, `~/Library/Application Support` on macOS and
    `$XDG_CONFIG_HOME` (or `~/.config`) elsewhere.
    """

    if sys.platform.startswith("win"):
        root = os.environ.get("APPDATA") or str(Path.home())
    elif sys.platform == "darwin":
        root = str(Path.home() / "Library" / "Application Support")
    else:
        root = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(root) / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_env_file(env_path: Path) -> dict[str, str]:
    """`KEY=value` pairs of a dotenv file; comments, `export` and quotes are dropped."""

    if not env_path.is_file():
        return {}
    data: dict[str, str] = {}
    for line in env_path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line.startswith("export "):
            line = line[len("export ") :]
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Merge `values` into the user's `.env` (other keys are kept) and return its path."""

    env_path = env_path or get_user_env_file()
    merged = read_env_file(env_path)
    merged.update((key, value) for key, value in values.items() if value is not None)

    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.write_text(f"# {APP_DIR_NAME} user config (.env)\n{body}", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central client configuration.

    Every field can be set with a `GRAVATAR_CLIENT_` environment variable,
    e.g. `GRAVATAR_CLIENT_API_TOKEN`.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Project first (development), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="gravatar-client/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )

    api_token: str | None = Field(
        default=None,
        description="Bearer token for the authenticated Profiles API.",
    )
    profile_api_host: str = Field(
        default="api.gravatar.com",
        min_length=1,
        description="Host serving the v3 Profiles API.",
    )
    profile_api_port: int = Field(
        default=443,
        ge=1,
        le=65535,
        description="TLS port of the Profiles API.",
    )
    profile_api_path: str = Field(
        default="/v3/profiles/",
        min_length=1,
        description="Path prefix of the profile lookup endpoint.",
    )

    allowed_image_domains: list[str] = Field(
        default_factory=list,
        description="Domains a default image URL may point to (empty = any).",
    )
