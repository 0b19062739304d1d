"""Chores module: the recurring chore table."""


class ChoresModule:
    """Chores module for recurring household chores.

    Provides:
    - The ``chores`` table holding the name, recurrence frequency (hours)
      and the completion anchor (Unix seconds) of each chore
    """

    @property
    def name(self) -> str:
        """Module name (unique identifier)."""
        return "chores"

    @property
    def description(self) -> str:
        """Module description (human-readable)."""
        return "Recurring household chores with phase-preserving completion tracking"

    def get_table_schemas(self) -> dict[str, str]:
        """Return table schemas for this module."""
        return {
            "chores": """CREATE TABLE IF NOT EXISTS chores (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        chore_name TEXT NOT NULL,
        frequency INTEGER,
        last_completed_at INTEGER
    )""",
        }

    def get_indexes(self) -> list[str]:
        """Return indexes for this module's tables."""
        return []
