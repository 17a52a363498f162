"""Profile service layer: registration and maintenance of OAuth2 profiles."""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

import structlog

from core.exceptions import (
    DuplicateUserError,
    IdentityValidationError,
    ProfileNotFoundError,
)
from domain.entities.oauth2_user_info import GOOGLE, OAuth2UserInfo
from domain.entities.profile import Profile, ProfileType, split_display_name
from domain.repositories.unit_of_work import IUnitOfWork


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        logger: structlog.stdlib.BoundLogger | None = None,
        registration_id: str = GOOGLE,
    ) -> None:
        self._uow_factory = uow_factory
        self._registration_id = registration_id
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    async def register_or_refresh(
        self,
        attributes: Mapping[str, Any],
        registration_id: str | None = None,
    ) -> Profile:
        """
        Register a new profile or refresh an existing one from provider attributes.

        An existing profile (matched by uid) gets its name and image refreshed;
        its email is kept as is.
        Attributes are parsed for `registration_id`, defaulting to the provider
        the service was configured with.

        Raises:
            IdentityValidationError: If the provider did not supply a name or email
            DuplicateUserError: If a new profile would collide with an existing one
        """
        user_info = OAuth2UserInfo.from_provider(
            registration_id or self._registration_id, attributes
        )
        self._require_name_and_email(user_info)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_uid(user_info.id) if user_info.id else None
            if profile is None:
                return await self._create(uow, user_info)

            profile.first_name, profile.last_name = split_display_name(user_info.name)
            profile.image_url = user_info.image_url

            updated = await uow.profiles.update(profile)
            await uow.commit()
            self._logger.info("profile_refreshed", profile_id=updated.id, uid=updated.uid)
            return updated

    async def create(self, user_info: OAuth2UserInfo) -> Profile:
        """
        Create a new profile, rejecting duplicate uids and emails.

        Raises:
            IdentityValidationError: If the name or email is missing
            DuplicateUserError: If the uid or email is already taken
        """
        self._require_name_and_email(user_info)
        async with self._uow_factory() as uow:
            return await self._create(uow, user_info)

    async def get_by_id(self, profile_id: int) -> Profile:
        """Get a profile by its local ID."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(profile_id)
            if not profile:
                self._logger.error(
                    "profile_not_found", profile_id=profile_id, operation="get_by_id"
                )
                raise ProfileNotFoundError(profile_id)
            return profile

    async def update_details(self, profile_id: int, email: str) -> Profile:
        """Overwrite the profile email and mark the details as confirmed."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(profile_id)
            if not profile:
                self._logger.error(
                    "profile_not_found", profile_id=profile_id, operation="update_details"
                )
                raise ProfileNotFoundError(profile_id)

            profile.email = email
            profile.has_confirmed_user_details = True

            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def _create(self, uow: IUnitOfWork, user_info: OAuth2UserInfo) -> Profile:
        """Check for duplicates, then insert a freshly built profile."""
        if user_info.id is not None and await uow.profiles.exists_by_uid(user_info.id):
            raise DuplicateUserError("uid", user_info.id)
        if await uow.profiles.exists_by_email(user_info.email or ""):
            raise DuplicateUserError("email", user_info.email)

        created = await uow.profiles.create(self._build_profile(user_info))
        await uow.commit()
        self._logger.info("profile_created", profile_id=created.id, uid=created.uid)
        return created

    @staticmethod
    def _require_name_and_email(user_info: OAuth2UserInfo) -> None:
        if not user_info.name or not user_info.name.strip():
            raise IdentityValidationError("Name not found from OAuth2 provider")
        if not user_info.email or not user_info.email.strip():
            raise IdentityValidationError("Email not found from OAuth2 provider")

    @staticmethod
    def _build_profile(user_info: OAuth2UserInfo) -> Profile:
        first_name, last_name = split_display_name(user_info.name or "")
        now = datetime.utcnow()
        return Profile(
            email=user_info.email or "",
            first_name=first_name,
            last_name=last_name,
            uid=user_info.id,
            image_url=user_info.image_url,
            type=ProfileType.DEFAULT,
            has_confirmed_user_details=False,
            created_at=now,
            last_updated_at=now,
        )
