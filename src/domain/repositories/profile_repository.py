"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get(self, id: int) -> Profile | None:
        """Get a profile by its local ID."""
        ...

    async def get_by_uid(self, uid: str) -> Profile | None:
        """Get a profile by its external identity key."""
        ...

    async def exists_by_uid(self, uid: str) -> bool:
        """Check whether a profile with this external identity key exists."""
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check whether a profile with this email exists."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """
        Insert a new profile and return it with its assigned ID.

        Raises:
            DuplicateUserError: If the uid or email is already taken
        """
        ...

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile."""
        ...
