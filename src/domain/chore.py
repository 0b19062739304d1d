"""Chore domain models."""

from pydantic import BaseModel, Field


class Chore(BaseModel):
    """Stored chore record."""

    id: int = Field(..., description="Unique chore ID")
    chore_name: str = Field(..., description="Chore display name (e.g., 'Water plants')")
    frequency: int | None = Field(
        default=None,
        description="Recurrence period in whole hours; 1 marks an unscheduled chore forced overdue",
    )
    last_completed_at: int | None = Field(
        default=None,
        description="Unix timestamp (seconds) of the completion anchor on the recurrence grid",
    )


class ChoreStatus(BaseModel):
    """Status derived from a chore record at a point in time. Never persisted."""

    on_cadence: bool = Field(..., description="True when the chore has a genuine recurrence period")
    overdue: bool = Field(..., description="True when the next grid point has passed or the chore is forced overdue")
    freq_seconds: int | None = Field(default=None, description="Recurrence period in seconds")
    days_since_completion: float | None = Field(default=None, description="Days elapsed since the anchor")
    days_until_overdue: float | None = Field(default=None, description="Days left until the chore becomes overdue")


class ChoreWithStatus(BaseModel):
    """A chore record paired with its derived status."""

    chore: Chore
    status: ChoreStatus


class ChoreSummary(BaseModel):
    """Flat wire representation of a chore and its status."""

    id: int
    chore_name: str
    frequency: int | None
    last_completed_at: int | None
    overdue: bool
    on_cadence: bool
    days_until_overdue: float | None

    @classmethod
    def from_chore_with_status(cls, item: ChoreWithStatus) -> "ChoreSummary":
        """Flatten a chore and its status into the wire shape."""
        return cls(
            id=item.chore.id,
            chore_name=item.chore.chore_name,
            frequency=item.chore.frequency,
            last_completed_at=item.chore.last_completed_at,
            overdue=item.status.overdue,
            on_cadence=item.status.on_cadence,
            days_until_overdue=item.status.days_until_overdue,
        )


class ChoreListResponse(BaseModel):
    """Response body for every chore listing endpoint."""

    chores: list[ChoreSummary]

    @classmethod
    def from_items(cls, items: list[ChoreWithStatus]) -> "ChoreListResponse":
        """Build a response from derived chore statuses."""
        return cls(chores=[ChoreSummary.from_chore_with_status(item) for item in items])
