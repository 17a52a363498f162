"""SQLAlchemy implementation of Profile repository."""

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import DuplicateUserError
from domain.entities.profile import Profile, ProfileType
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: int) -> Profile | None:
        """Get a profile by ID."""
        stmt = select(ProfileModel).where(ProfileModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_uid(self, uid: str) -> Profile | None:
        """Get a profile by external identity key."""
        stmt = select(ProfileModel).where(ProfileModel.uid == uid)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def exists_by_uid(self, uid: str) -> bool:
        """Check whether a profile with this uid exists."""
        stmt = select(exists().where(ProfileModel.uid == uid))
        result = await self._session.execute(stmt)
        return bool(result.scalar())

    async def exists_by_email(self, email: str) -> bool:
        """Check whether a profile with this email exists."""
        stmt = select(exists().where(ProfileModel.email == email))
        result = await self._session.execute(stmt)
        return bool(result.scalar())

    async def create(self, profile: Profile) -> Profile:
        """Insert a new profile; the database assigns its ID."""
        model = self._to_model(profile)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise self._duplicate_error(e, profile) from e
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        model.uid = profile.uid
        model.email = profile.email
        model.first_name = profile.first_name
        model.last_name = profile.last_name
        model.image_url = profile.image_url
        model.type = profile.type.value
        model.has_confirmed_user_details = profile.has_confirmed_user_details

        try:
            await self._session.flush()
        except IntegrityError as e:
            raise self._duplicate_error(e, profile) from e
        return self._to_entity(model)

    @staticmethod
    def _duplicate_error(error: IntegrityError, profile: Profile) -> DuplicateUserError:
        """Map a unique constraint violation onto the column it concerns."""
        # Match the column as SQLite ("profiles.uid") and PostgreSQL
        # ("profiles_uid_key", "Key (uid)=") name it, never the offending value
        message = str(error.orig).lower()
        for field, value in (("uid", profile.uid), ("email", profile.email)):
            tokens = (f"profiles.{field}", f"profiles_{field}_key", f"({field})=")
            if any(token in message for token in tokens):
                return DuplicateUserError(field, value)
        return DuplicateUserError("profile", None)

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            uid=model.uid,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            image_url=model.image_url,
            type=ProfileType(model.type),
            has_confirmed_user_details=model.has_confirmed_user_details,
            created_at=model.created_at,
            last_updated_at=model.last_updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        model = ProfileModel(
            uid=entity.uid,
            email=entity.email,
            first_name=entity.first_name,
            last_name=entity.last_name,
            image_url=entity.image_url,
            type=entity.type.value,
            has_confirmed_user_details=entity.has_confirmed_user_details,
            created_at=entity.created_at,
            last_updated_at=entity.last_updated_at,
        )
        if entity.id is not None:
            model.id = entity.id
        return model
