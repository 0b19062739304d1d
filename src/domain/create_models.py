"""Pydantic models for creating records in database."""

from pydantic import BaseModel, Field, field_validator


class ChoreCreate(BaseModel):
    """Pydantic model for creating a chore record."""

    chore_name: str = Field(..., description="Display name of the chore (e.g., 'Water plants')")

    @field_validator("chore_name")
    @classmethod
    def validate_chore_name(cls, v: str) -> str:
        """Strip whitespace and reject empty names."""
        name = v.strip()
        if not name:
            msg = "Chore name must not be empty"
            raise ValueError(msg)
        return name
