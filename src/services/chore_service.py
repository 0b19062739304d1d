"""Chore service: status listing and the two-phase completion toggle."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from src.core.logging import log_with_context, span
from src.domain.chore import Chore, ChoreWithStatus
from src.services import cadence
from src.services.chore_store import ChoreRepository


logger = logging.getLogger(__name__)


class ChoreService:
    """Cadence engine entry points over an injected ChoreRepository.

    Toggles on the same chore id are serialised; toggles on different ids run
    concurrently. Nothing is retried: a failure in the anchor write leaves the
    schedule write from the first phase committed.
    """

    def __init__(self, store: ChoreRepository) -> None:
        self._store = store
        # Per-id locks with the number of toggles holding or waiting on each; entries go when unused
        self._locks: dict[int, tuple[asyncio.Lock, int]] = {}

    @asynccontextmanager
    async def _chore_lock(self, chore_id: int) -> AsyncIterator[None]:
        lock, users = self._locks.get(chore_id, (asyncio.Lock(), 0))
        self._locks[chore_id] = (lock, users + 1)
        try:
            async with lock:
                yield
        finally:
            lock, users = self._locks[chore_id]
            if users == 1:
                del self._locks[chore_id]
            else:
                self._locks[chore_id] = (lock, users - 1)

    async def list_with_status(self, now: int) -> list[ChoreWithStatus]:
        """Return every chore, in id order, with its status derived at ``now``."""
        with span("chore_service.list_with_status"):
            chores = await self._store.fetch_all()
            return [ChoreWithStatus(chore=chore, status=cadence.derive_status(chore, now)) for chore in chores]

    async def toggle(self, chore_id: int, now: int) -> list[ChoreWithStatus]:
        """Toggle a chore's completion state and return the refreshed list.

        Both phases are planned from the same pre-toggle snapshot and written in
        order; when both touch the anchor, the second write wins.

        Raises:
            ChoreNotFoundError: If no chore has this id
            InvariantViolationError: If an on-cadence chore lacks its period or anchor
            StorageFailureError: If the store fails
        """
        with span("chore_service.toggle"):
            async with self._chore_lock(chore_id):
                snapshot = await self._store.fetch_by_id(chore_id)
                status = cadence.derive_status(snapshot, now)

                schedule_write = cadence.plan_schedule_write(snapshot, now)
                new_anchor = cadence.plan_anchor_write(snapshot, status, now)

                if schedule_write is not None:
                    await self._store.write_schedule(
                        chore_id, schedule_write.frequency, schedule_write.last_completed_at
                    )
                await self._store.write_anchor(chore_id, new_anchor)

                log_with_context(
                    logger,
                    "info",
                    "Toggled chore",
                    chore_id=chore_id,
                    now=now,
                    was_overdue=status.overdue,
                    was_on_cadence=status.on_cadence,
                    frequency=schedule_write.frequency if schedule_write else snapshot.frequency,
                    previous_anchor=snapshot.last_completed_at,
                    new_anchor=new_anchor,
                )

            return await self.list_with_status(now)

    async def create_chore(self, chore_name: str) -> Chore:
        """Seed a new chore with no schedule and no completion anchor."""
        chore = await self._store.create_chore(chore_name)
        logger.info("Seeded chore", extra={"chore_id": chore.id})
        return chore
