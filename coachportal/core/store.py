"""Generic record store addressed by collection name.

The access-control layer only ever talks to the database through this
interface: fetch everything in a collection, fetch one record by id, update
one record by id. Tenant filtering is never pushed down into a query here.
"""
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coachportal.config.database import Base

logger = structlog.get_logger(__name__)


class RecordNotFoundError(Exception):
    """No record with the given id exists in the collection."""

    def __init__(self, collection: str, record_id: str):
        super().__init__(f"{collection}/{record_id} not found")
        self.collection = collection
        self.record_id = record_id


class RecordStore(Protocol):
    """Minimal store interface consumed by the access-control services."""

    async def fetch_all(self, collection: str) -> Sequence[Any]: ...

    async def fetch_by_id(self, collection: str, record_id: str) -> Any | None: ...

    async def update_by_id(self, collection: str, record_id: str, patch: Mapping[str, Any]) -> Any: ...

    async def create(self, collection: str, values: Mapping[str, Any]) -> Any: ...


def default_collections() -> dict[str, type[Base]]:
    """Collection name -> ORM model for every registered domain collection."""
    from coachportal.domains.models import (
        ASSIGNMENTS_COLLECTION,
        WORKOUTS_COLLECTION,
        ClientAssignedWorkout,
        TrainerClientAssignment,
    )

    return {
        WORKOUTS_COLLECTION: ClientAssignedWorkout,
        ASSIGNMENTS_COLLECTION: TrainerClientAssignment,
    }


class SqlRecordStore:
    """RecordStore backed by an async SQLAlchemy session.

    Every read goes to the database (populate_existing), so a change committed
    by another request is visible on the very next call.
    """

    def __init__(self, db: AsyncSession, collections: Mapping[str, type[Base]] | None = None):
        self.db = db
        self.collections = dict(collections) if collections is not None else default_collections()

    def _model(self, collection: str) -> type[Base]:
        try:
            return self.collections[collection]
        except KeyError:
            raise KeyError(f"Unknown collection: {collection}") from None

    async def fetch_all(self, collection: str) -> list[Any]:
        model = self._model(collection)
        result = await self.db.execute(
            select(model)
            .order_by(model.created_at, model.id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def fetch_by_id(self, collection: str, record_id: str) -> Any | None:
        model = self._model(collection)
        return await self.db.get(model, record_id, populate_existing=True)

    async def update_by_id(self, collection: str, record_id: str, patch: Mapping[str, Any]) -> Any:
        model = self._model(collection)
        record = await self.db.get(model, record_id, populate_existing=True)
        if record is None:
            raise RecordNotFoundError(collection, record_id)

        # Reject the whole patch before touching the record
        for field in patch:
            if field == "id" or field not in model.__table__.columns:
                raise KeyError(f"{collection} has no writable field {field!r}")

        for field, value in patch.items():
            setattr(record, field, value)

        await self.db.commit()
        await self.db.refresh(record)
        logger.debug("record_updated", collection=collection, record_id=record_id, fields=sorted(patch))
        return record

    async def create(self, collection: str, values: Mapping[str, Any]) -> Any:
        model = self._model(collection)
        record = model(**values)
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        logger.debug("record_created", collection=collection, record_id=record.id)
        return record
