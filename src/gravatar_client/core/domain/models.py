"""Profile document models (Pydantic v2).

Why Pydantic here:
- The Profiles API returns a deeply nested JSON document; validation at the
  edge turns it into typed, immutable values in one step.
- `model_dump(mode="json")` gives the JSON exporter a stable serialization.

Notes:
- Models are frozen and lists are stored as tuples, so a fetched profile can
  be shared and hashed safely.
- Unknown keys are ignored: the API adds fields without versioning.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import AliasChoices, BaseModel, Field
from pydantic.config import ConfigDict

_VALUE_CONFIG = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class ProfileVerifiedAccount(BaseModel):
    """An external account the user proved ownership of."""

    model_config = _VALUE_CONFIG

    service_type: str = Field(..., description="Service identifier, e.g. 'github'.")
    service_label: str = Field(..., description="Human readable service name.")
    service_icon: str | None = Field(default=None, description="URL of the service icon.")
    url: str = Field(..., description="URL of the verified account.")
    is_hidden: bool = Field(default=False, description="Whether the owner hides this account.")


class ProfileLanguage(BaseModel):
    model_config = _VALUE_CONFIG

    code: str = Field(..., min_length=1, description="ISO language code.")
    name: str = Field(..., min_length=1, description="Language name.")
    is_primary: bool = Field(default=False)
    order: int = Field(default=0, ge=0, description="Display order on the profile.")


class ProfileInterest(BaseModel):
    model_config = _VALUE_CONFIG

    id: int = Field(..., description="Gravatar's interest identifier.")
    name: str = Field(..., min_length=1)


class ProfileUrl(BaseModel):
    """A labelled link shown on a profile or its payments section."""

    model_config = _VALUE_CONFIG

    label: str = Field(..., min_length=1)
    url: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("url", "value"),
        description="Link target (older payloads call it 'value').",
    )


class CryptoWalletAddress(BaseModel):
    model_config = _VALUE_CONFIG

    label: str = Field(..., min_length=1, description="Currency or wallet label.")
    address: str = Field(..., min_length=1)


class ProfilePayments(BaseModel):
    model_config = _VALUE_CONFIG

    links: tuple[ProfileUrl, ...] = Field(default_factory=tuple)
    crypto_wallets: tuple[CryptoWalletAddress, ...] = Field(default_factory=tuple)


class ProfileContactInfo(BaseModel):
    """Contact details; only returned for authenticated requests."""

    model_config = _VALUE_CONFIG

    home_phone: str | None = None
    work_phone: str | None = None
    cell_phone: str | None = None
    email: str | None = None
    contact_form: str | None = None
    calendar: str | None = None


class ProfileGalleryImage(BaseModel):
    model_config = _VALUE_CONFIG

    url: str = Field(..., min_length=1)
    alt_text: str | None = None


class Profile(BaseModel):
    """A Gravatar profile as returned by ``GET /v3/profiles/{id}``.

    Only `hash` and `profile_url` are always present. The authenticated API
    adds links, interests, payments, contact info, gallery and the
    edit/registration dates.
    """

    model_config = _VALUE_CONFIG

    hash: str = Field(..., min_length=1, description="SHA-256 hash of the primary email.")
    profile_url: str = Field(..., min_length=1)
    display_name: str | None = None
    avatar_url: str | None = None
    avatar_alt_text: str | None = None
    location: str | None = None
    description: str | None = Field(default=None, max_length=10_000)
    job_title: str | None = None
    company: str | None = None
    verified_accounts: tuple[ProfileVerifiedAccount, ...] = Field(default_factory=tuple)
    pronunciation: str | None = None
    pronouns: str | None = None
    timezone: str | None = None
    languages: tuple[ProfileLanguage, ...] = Field(default_factory=tuple)
    first_name: str | None = None
    last_name: str | None = None
    is_organization: bool = False
    links: tuple[ProfileUrl, ...] = Field(default_factory=tuple)
    interests: tuple[ProfileInterest, ...] = Field(default_factory=tuple)
    payments: ProfilePayments | None = None
    contact_info: ProfileContactInfo | None = None
    gallery: tuple[ProfileGalleryImage, ...] = Field(default_factory=tuple)
    number_verified_accounts: int = Field(default=0, ge=0)
    last_profile_edit: str | None = None
    registration_date: str | None = None

    @property
    def full_name(self) -> str | None:
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else None


class ProfileRequestResult(BaseModel):
    """One attempt recorded by the profile request handler."""

    model_config = _VALUE_CONFIG

    request_instant: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    succeeded: bool

    @property
    def failed(self) -> bool:
        return not self.succeeded
