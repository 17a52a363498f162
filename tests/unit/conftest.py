"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from infrastructure.memory.profile_store import InMemoryProfileStore, InMemoryUnitOfWork


class FakeUnitOfWork:
    """Fake Unit of Work with a mocked profile repository for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def logger() -> MagicMock:
    """A stand-in for a structlog bound logger."""
    return MagicMock()


@pytest.fixture
def memory_store() -> InMemoryProfileStore:
    """An empty in-memory profile store."""
    return InMemoryProfileStore()


@pytest.fixture
def memory_uow_factory(memory_store: InMemoryProfileStore):
    """Unit of Work factory over the in-memory store."""
    return lambda: InMemoryUnitOfWork(memory_store)
