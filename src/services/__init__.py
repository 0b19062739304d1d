from src.services import cadence, chore_service, chore_store


__all__ = [
    "cadence",
    "chore_service",
    "chore_store",
]
