"""Domain models.

Why:
- Pure, strict data structures (Pydantic v2) for what the Profiles API returns.
- The domain knows nothing about sockets, HTTP or the CLI.
"""

from gravatar_client.core.domain.models import (
    CryptoWalletAddress,
    Profile,
    ProfileContactInfo,
    ProfileGalleryImage,
    ProfileInterest,
    ProfileLanguage,
    ProfilePayments,
    ProfileRequestResult,
    ProfileUrl,
    ProfileVerifiedAccount,
)

__all__ = [
    "CryptoWalletAddress",
    "Profile",
    "ProfileContactInfo",
    "ProfileGalleryImage",
    "ProfileInterest",
    "ProfileLanguage",
    "ProfilePayments",
    "ProfileRequestResult",
    "ProfileUrl",
    "ProfileVerifiedAccount",
]
