"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class ProfileType(StrEnum):
    """Classification of a profile."""

    DEFAULT = "DEFAULT"
    ADMIN = "ADMIN"


@dataclass
class Profile:
    """Domain entity for a user profile registered through OAuth2."""

    email: str
    first_name: str
    last_name: str
    id: int | None = None  # Assigned by the store on insert
    uid: str | None = None
    image_url: str | None = None
    type: ProfileType = ProfileType.DEFAULT
    has_confirmed_user_details: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
    last_updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure last_updated_at is always at least as recent as created_at."""
        if self.last_updated_at < self.created_at:
            self.last_updated_at = self.created_at


def split_display_name(name: str) -> tuple[str, str]:
    """Split a display name on its first space into (first_name, last_name).

    A single-word name yields an empty last name.
    """
    parts = name.strip().split(" ", 1)
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()
