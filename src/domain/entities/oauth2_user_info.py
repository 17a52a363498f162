"""Identity attributes supplied by an OAuth2 provider."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from core.exceptions import IdentityValidationError

GOOGLE = "google"


def _as_str(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True, slots=True)
class OAuth2UserInfo:
    """Read-only value object: the identity attributes a profile is built from."""

    id: str | None
    name: str | None
    email: str | None
    image_url: str | None

    @classmethod
    def from_google(cls, attributes: Mapping[str, Any]) -> "OAuth2UserInfo":
        """Parse the claim set returned by Google's userinfo endpoint."""
        return cls(
            id=_as_str(attributes.get("sub")),
            name=_as_str(attributes.get("name")),
            email=_as_str(attributes.get("email")),
            image_url=_as_str(attributes.get("picture")),
        )

    @classmethod
    def from_provider(
        cls, registration_id: str, attributes: Mapping[str, Any]
    ) -> "OAuth2UserInfo":
        """Parse attributes for the given provider registration id.

        Raises:
            IdentityValidationError: If the provider is not supported
        """
        if registration_id.lower() == GOOGLE:
            return cls.from_google(attributes)
        raise IdentityValidationError(
            f"Sorry! Login with {registration_id} is not supported yet."
        )
