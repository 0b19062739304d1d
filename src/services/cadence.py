"""Pure cadence functions: derived chore status and toggle planning.

Nothing here reads the clock or touches storage. Every function takes ``now``
(Unix seconds) explicitly, so results are deterministic.
"""

from dataclasses import dataclass

from src.core.config import constants
from src.core.errors import InvariantViolationError
from src.domain.chore import Chore, ChoreStatus


@dataclass(frozen=True)
class ScheduleWrite:
    """Phase A write: new frequency and, optionally, a new anchor."""

    frequency: int | None
    last_completed_at: int | None = None


def frequency_to_seconds(frequency: int | None) -> int | None:
    """Convert a frequency in hours to seconds."""
    if frequency is None:
        return None
    return frequency * constants.SECONDS_PER_HOUR


def is_forced_overdue(chore: Chore) -> bool:
    """True when the chore carries the forced-overdue marker frequency."""
    # NOTE: a genuine one-hour cadence is indistinguishable from this marker.
    return chore.frequency == constants.FORCED_OVERDUE_FREQUENCY


def advance_anchor(anchor: int, freq: int, bound: int) -> int:
    """Return the smallest ``anchor + k * freq`` (k >= 0) that is >= bound."""
    if anchor >= bound:
        return anchor
    steps = -(-(bound - anchor) // freq)
    return anchor + steps * freq


def rewind_anchor(anchor: int, freq: int, bound: int) -> int:
    """Return the largest ``anchor - k * freq`` (k >= 0) that is <= bound."""
    if anchor <= bound:
        return anchor
    steps = -(-(anchor - bound) // freq)
    return anchor - steps * freq


def derive_status(chore: Chore, now: int) -> ChoreStatus:
    """Derive on-cadence, overdue and days-until-overdue for a chore at ``now``."""
    freq_seconds = frequency_to_seconds(chore.frequency)
    on_cadence = chore.frequency is not None and not is_forced_overdue(chore)

    days_since_completion = None
    if chore.last_completed_at is not None:
        days_since_completion = (now - chore.last_completed_at) / constants.SECONDS_PER_DAY

    days_until_overdue = None
    overdue = is_forced_overdue(chore)
    if freq_seconds is not None and days_since_completion is not None:
        freq_days = freq_seconds / constants.SECONDS_PER_DAY
        days_until_overdue = freq_days - days_since_completion
        overdue = overdue or days_since_completion > freq_days

    return ChoreStatus(
        on_cadence=on_cadence,
        overdue=overdue,
        freq_seconds=freq_seconds,
        days_since_completion=days_since_completion,
        days_until_overdue=days_until_overdue,
    )


def plan_schedule_write(chore: Chore, now: int) -> ScheduleWrite | None:
    """Plan the sentinel transition (Phase A) from the pre-toggle snapshot.

    - unscheduled -> forced overdue, anchor untouched
    - forced overdue -> unscheduled, completed at ``now``
    - genuine schedule -> no write
    """
    if chore.frequency is None:
        return ScheduleWrite(frequency=constants.FORCED_OVERDUE_FREQUENCY)
    if is_forced_overdue(chore):
        return ScheduleWrite(frequency=None, last_completed_at=now)
    return None


def plan_anchor_write(chore: Chore, status: ChoreStatus, now: int) -> int | None:
    """Plan the phase-preserving anchor (Phase B) from the pre-toggle snapshot and status.

    An overdue on-cadence chore steps its anchor forward by whole periods to the
    first grid point no earlier than ``now - freq``; a chore that is on time
    steps back to the last grid point no later than ``now - freq``. Off-cadence
    chores are anchored at ``now``, except that a never-completed chore which
    is not overdue keeps no anchor.

    Raises:
        InvariantViolationError: If an on-cadence chore lacks a positive period or an anchor
    """
    if not status.on_cadence:
        if not status.overdue and chore.last_completed_at is None:
            return None
        return now

    freq = status.freq_seconds
    anchor = chore.last_completed_at
    if freq is None or anchor is None:
        msg = f"Chore {chore.id} is on cadence but is missing its period or completion anchor"
        raise InvariantViolationError(msg)
    if freq <= 0:
        msg = f"Chore {chore.id} has a non-positive recurrence period: {chore.frequency} hours"
        raise InvariantViolationError(msg)

    bound = now - freq
    if status.overdue:
        return advance_anchor(anchor, freq, bound)
    return rewind_anchor(anchor, freq, bound)
