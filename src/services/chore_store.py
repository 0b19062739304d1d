"""Chore storage capability and its SQLite implementation."""

import logging
from typing import Any, Protocol

from src.core import db_client
from src.core.config import constants
from src.core.errors import ChoreNotFoundError, StorageFailureError
from src.core.logging import span
from src.domain.chore import Chore


logger = logging.getLogger(__name__)

COLLECTION = "chores"


class ChoreStore(Protocol):
    """Storage operations the cadence engine depends on."""

    async def fetch_all(self) -> list[Chore]:
        """Return every chore ordered by id."""
        ...

    async def fetch_by_id(self, chore_id: int) -> Chore:
        """Return one chore, raising ChoreNotFoundError if it does not exist."""
        ...

    async def write_schedule(self, chore_id: int, frequency: int | None, last_completed_at: int | None = None) -> None:
        """Write the frequency, and the anchor only when one is given."""
        ...

    async def write_anchor(self, chore_id: int, last_completed_at: int | None) -> None:
        """Write the completion anchor."""
        ...


class ChoreRepository(ChoreStore, Protocol):
    """ChoreStore that can also seed new chores."""

    async def create_chore(self, chore_name: str) -> Chore:
        """Insert a chore with no schedule and no completion anchor."""
        ...


def _to_chore(record: dict[str, Any]) -> Chore:
    return Chore(
        id=int(record["id"]),
        chore_name=record["chore_name"],
        frequency=record.get("frequency"),
        last_completed_at=record.get("last_completed_at"),
    )


class SqliteChoreStore:
    """ChoreStore backed by the ``chores`` table through db_client."""

    async def fetch_all(self) -> list[Chore]:
        with span("chore_store.fetch_all"):
            records: list[dict[str, Any]] = []
            page = 1
            try:
                while True:
                    batch = await db_client.list_records(
                        collection=COLLECTION,
                        page=page,
                        per_page=constants.DEFAULT_PER_PAGE_LIMIT,
                        sort="id ASC",
                    )
                    records.extend(batch)
                    if len(batch) < constants.DEFAULT_PER_PAGE_LIMIT:
                        break
                    page += 1
            except db_client.DatabaseError as e:
                raise StorageFailureError(str(e)) from e
            return [_to_chore(record) for record in records]

    async def fetch_by_id(self, chore_id: int) -> Chore:
        with span("chore_store.fetch_by_id"):
            try:
                record = await db_client.get_record(collection=COLLECTION, record_id=chore_id)
            except db_client.RecordNotFoundError as e:
                raise ChoreNotFoundError(chore_id) from e
            except db_client.DatabaseError as e:
                raise StorageFailureError(str(e)) from e
            return _to_chore(record)

    async def write_schedule(self, chore_id: int, frequency: int | None, last_completed_at: int | None = None) -> None:
        data: dict[str, Any] = {"frequency": frequency}
        if last_completed_at is not None:
            data["last_completed_at"] = last_completed_at
        await self._update(chore_id, data)

    async def write_anchor(self, chore_id: int, last_completed_at: int | None) -> None:
        await self._update(chore_id, {"last_completed_at": last_completed_at})

    async def create_chore(self, chore_name: str) -> Chore:
        """Insert a new chore with no schedule and no completion anchor."""
        with span("chore_store.create_chore"):
            try:
                record = await db_client.create_record(
                    collection=COLLECTION,
                    data={"chore_name": chore_name, "frequency": None, "last_completed_at": None},
                )
            except db_client.DatabaseError as e:
                raise StorageFailureError(str(e)) from e
            logger.info("Created chore", extra={"chore_id": record["id"], "chore_name": chore_name})
            return _to_chore(record)

    async def _update(self, chore_id: int, data: dict[str, Any]) -> None:
        with span("chore_store.update"):
            try:
                await db_client.update_record(collection=COLLECTION, record_id=chore_id, data=data)
            except db_client.RecordNotFoundError as e:
                raise ChoreNotFoundError(chore_id) from e
            except db_client.DatabaseError as e:
                raise StorageFailureError(str(e)) from e
