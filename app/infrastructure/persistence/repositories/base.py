"""Base repository: generic get/add/update with lifecycle hooks."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import inspect as sa_inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, create, update and hooks.

    Subclasses override _on_after_create and _on_after_update to emit
    events or log. LSP: subclasses are substitutable for BaseRepository.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record (and its cascaded children) and run _on_after_create hook."""
        self.db.add(obj)
        await self.db.flush()
        await self._on_after_create(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush changes on an attached record and run _on_after_update hook.

        Raises ValueError when any primary key attribute is missing.
        """
        mapper = sa_inspect(self.model)
        for col in mapper.primary_key:
            if getattr(obj, col.key) is None:
                raise ValueError(
                    f"Cannot update: primary key '{col.key}' is missing on "
                    f"{self.model.__name__} instance."
                )
        await self.db.flush()
        await self._on_after_update(obj)
        return obj

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Scope a unit of work: commit or roll back everything inside it.

        Uses a savepoint when the session is already in a transaction (e.g.
        a request on get_db_transactional), otherwise a new transaction.
        """
        if self.db.in_transaction():
            async with self.db.begin_nested():
                yield
        else:
            async with self.db.begin():
                yield

    async def _on_after_create(self, obj: ModelType) -> None:
        """Override in subclasses to emit events or log."""

    async def _on_after_update(self, obj: ModelType) -> None:
        """Override in subclasses to emit events or log."""
