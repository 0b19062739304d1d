"""Domain models and DTOs."""

from src.domain.chore import Chore, ChoreListResponse, ChoreStatus, ChoreSummary, ChoreWithStatus
from src.domain.create_models import ChoreCreate


__all__ = [
    "Chore",
    "ChoreCreate",
    "ChoreListResponse",
    "ChoreStatus",
    "ChoreSummary",
    "ChoreWithStatus",
]
