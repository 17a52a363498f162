"""In-memory profile storage.

Keeps profiles in a process-local dictionary. Each Unit of Work works on a
private copy of the rows and publishes the rows it wrote on commit, so an
exception inside the context leaves the store untouched and concurrent units
of work do not overwrite each other's rows. Uniqueness of ``uid`` and
``email`` is enforced the same way the database constraints enforce it.
"""

import itertools
from dataclasses import replace
from datetime import datetime
from typing import Any, Optional

from core.exceptions import DuplicateUserError
from domain.entities.profile import Profile


class InMemoryProfileStore:
    """Committed profile rows plus the ID sequence."""

    def __init__(self) -> None:
        self.rows: dict[int, Profile] = {}
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        return next(self._ids)


class InMemoryProfileRepository:
    """Dictionary-backed implementation of IProfileRepository."""

    def __init__(
        self,
        rows: dict[int, Profile],
        store: InMemoryProfileStore,
        written: set[int],
    ) -> None:
        self._rows = rows
        self._store = store
        self._written = written

    async def get(self, id: int) -> Profile | None:
        row = self._rows.get(id)
        return replace(row) if row else None

    async def get_by_uid(self, uid: str) -> Profile | None:
        for row in self._rows.values():
            if row.uid == uid:
                return replace(row)
        return None

    async def exists_by_uid(self, uid: str) -> bool:
        return any(row.uid == uid for row in self._rows.values())

    async def exists_by_email(self, email: str) -> bool:
        return any(row.email == email for row in self._rows.values())

    async def create(self, profile: Profile) -> Profile:
        self._check_unique(profile)
        row = replace(profile, id=self._store.next_id())
        self._rows[row.id] = row  # type: ignore[index]
        self._written.add(row.id)  # type: ignore[arg-type]
        return replace(row)

    async def update(self, profile: Profile) -> Profile:
        if profile.id not in self._rows:
            raise ValueError(f"Profile {profile.id} not found")
        self._check_unique(profile)
        row = replace(profile, last_updated_at=datetime.utcnow())
        self._rows[profile.id] = row
        self._written.add(profile.id)
        return replace(row)

    def _check_unique(self, profile: Profile) -> None:
        for row in self._rows.values():
            if row.id == profile.id:
                continue
            if profile.uid is not None and row.uid == profile.uid:
                raise DuplicateUserError("uid", profile.uid)
            if row.email == profile.email:
                raise DuplicateUserError("email", profile.email)


class InMemoryUnitOfWork:
    """Unit of Work over an InMemoryProfileStore."""

    def __init__(self, store: InMemoryProfileStore) -> None:
        self._store = store
        self._rows: Optional[dict[int, Profile]] = None
        self._written: set[int] = set()

    @property
    def profiles(self) -> InMemoryProfileRepository:
        """Get profile repository."""
        if self._rows is None:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return InMemoryProfileRepository(self._rows, self._store, self._written)

    async def commit(self) -> None:
        """Publish the rows written in this unit of work to the store."""
        if self._rows is not None:
            for id in self._written:
                self._store.rows[id] = replace(self._rows[id])
            self._written.clear()

    async def rollback(self) -> None:
        """Discard uncommitted changes."""
        if self._rows is not None:
            self._rows.clear()
            self._rows.update({id: replace(row) for id, row in self._store.rows.items()})
            self._written.clear()

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        self._written.clear()
        self._rows = {id: replace(row) for id, row in self._store.rows.items()}
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        if exc_type:
            await self.rollback()
        self._rows = None
