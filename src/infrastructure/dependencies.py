"""Dependency injection factories for the profile service."""

from functools import lru_cache
from typing import Callable

import structlog

from core.config import settings
from core.logging import setup_logging
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_service import ProfileService
from infrastructure.memory.profile_store import InMemoryProfileStore, InMemoryUnitOfWork


@lru_cache
def get_memory_store() -> InMemoryProfileStore:
    """Get the process-wide in-memory profile store."""
    return InMemoryProfileStore()


def get_uow_factory() -> Callable[[], IUnitOfWork]:
    """Factory for creating Unit of Work instances for the configured store."""
    if settings.profile_store == "memory":
        store = get_memory_store()

        def memory_factory() -> InMemoryUnitOfWork:
            return InMemoryUnitOfWork(store)

        return memory_factory

    # Deferred so the memory backend does not need a database driver
    from infrastructure.database.session import async_session_factory
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    setup_logging()
    return ProfileService(
        get_uow_factory(),
        logger=structlog.get_logger("profile_service"),
        registration_id=settings.oauth2_provider,
    )
