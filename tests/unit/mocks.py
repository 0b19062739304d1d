"""Pure Python in-memory doubles for unit testing."""

import asyncio
import copy
from typing import Any

from src.core.db_client import DatabaseError, RecordNotFoundError
from src.core.errors import ChoreNotFoundError, StorageFailureError
from src.domain.chore import Chore


class InMemoryDBClient:
    """Pure Python in-memory database for unit testing.

    Mirrors the db_client function signatures so it can be monkeypatched over
    them without a SQLite file. Supports create/get/update/list with integer
    ids and ``field [ASC|DESC]`` sorting.
    """

    def __init__(self):
        """Initialize empty in-memory database."""
        self._collections: dict[str, dict[int, dict[str, Any]]] = {}
        self._id_counter = 1

    async def create_record(self, *, collection: str, data: dict[str, Any]) -> dict[str, Any]:
        """Create a new record and return a copy of it."""
        if not isinstance(data, dict):
            raise DatabaseError(f"Data must be a dictionary, got {type(data)}")

        record_id = self._id_counter
        self._id_counter += 1

        record = {"id": record_id, **data}
        self._collections.setdefault(collection, {})[record_id] = record
        return copy.deepcopy(record)

    async def get_record(self, *, collection: str, record_id: int) -> dict[str, Any]:
        """Get a record by ID.

        Raises:
            RecordNotFoundError: If record not found
        """
        records = self._collections.get(collection, {})
        if record_id not in records:
            raise RecordNotFoundError(f"Record not found in {collection}: {record_id}")
        return copy.deepcopy(records[record_id])

    async def update_record(self, *, collection: str, record_id: int, data: dict[str, Any]) -> dict[str, Any]:
        """Update an existing record.

        Raises:
            RecordNotFoundError: If record not found
            DatabaseError: For an empty payload
        """
        if not data:
            raise DatabaseError("Empty update payload")

        records = self._collections.get(collection, {})
        if record_id not in records:
            raise RecordNotFoundError(f"Record not found in {collection}: {record_id}")

        records[record_id].update(data)
        return copy.deepcopy(records[record_id])

    async def list_records(
        self,
        *,
        collection: str,
        page: int = 1,
        per_page: int = 50,
        sort: str = "",
    ) -> list[dict[str, Any]]:
        """List records with optional sorting and pagination."""
        records = list(self._collections.get(collection, {}).values())

        if sort:
            parts = sort.split()
            field = parts[0]
            reverse = len(parts) > 1 and parts[1].upper() == "DESC"
            records = sorted(records, key=lambda r: r.get(field) or 0, reverse=reverse)

        start_idx = (page - 1) * per_page
        return [copy.deepcopy(r) for r in records[start_idx : start_idx + per_page]]


class RecordingChoreStore:
    """In-memory ChoreRepository that records every storage call.

    ``fail_on`` names operations that raise StorageFailureError; ``yield_on_write``
    makes writes yield to the event loop so concurrent toggles can interleave.
    """

    def __init__(self, chores: list[Chore] | None = None, *, yield_on_write: bool = False):
        self.chores: dict[int, Chore] = {chore.id: chore for chore in chores or []}
        self.calls: list[tuple[Any, ...]] = []
        self.fail_on: set[str] = set()
        self._yield_on_write = yield_on_write

    def _check(self, operation: str) -> None:
        if operation in self.fail_on:
            raise StorageFailureError(f"{operation} failed")

    async def fetch_all(self) -> list[Chore]:
        self._check("fetch_all")
        return [self.chores[chore_id] for chore_id in sorted(self.chores)]

    async def fetch_by_id(self, chore_id: int) -> Chore:
        self.calls.append(("fetch_by_id", chore_id))
        self._check("fetch_by_id")
        if chore_id not in self.chores:
            raise ChoreNotFoundError(chore_id)
        return self.chores[chore_id]

    async def write_schedule(self, chore_id: int, frequency: int | None, last_completed_at: int | None = None) -> None:
        self.calls.append(("write_schedule", chore_id, frequency, last_completed_at))
        if self._yield_on_write:
            await asyncio.sleep(0)
        self._check("write_schedule")
        update: dict[str, Any] = {"frequency": frequency}
        if last_completed_at is not None:
            update["last_completed_at"] = last_completed_at
        self.chores[chore_id] = self.chores[chore_id].model_copy(update=update)

    async def write_anchor(self, chore_id: int, last_completed_at: int | None) -> None:
        self.calls.append(("write_anchor", chore_id, last_completed_at))
        if self._yield_on_write:
            await asyncio.sleep(0)
        self._check("write_anchor")
        self.chores[chore_id] = self.chores[chore_id].model_copy(update={"last_completed_at": last_completed_at})

    async def create_chore(self, chore_name: str) -> Chore:
        self._check("create_chore")
        chore = Chore(id=max(self.chores, default=0) + 1, chore_name=chore_name)
        self.chores[chore.id] = chore
        return chore
