"""Tests for configuration."""

from src.core.config import Constants, Settings


def test_sqlite_path_from_environment(monkeypatch) -> None:
    """Test the database path is read from the environment."""
    monkeypatch.setenv("SQLITE_DB_PATH", "/tmp/other.db")

    assert Settings().sqlite_db_path == "/tmp/other.db"


def test_time_constants() -> None:
    """Test the cadence constants."""
    assert Constants.SECONDS_PER_HOUR == 3600
    assert Constants.SECONDS_PER_DAY == 86400
    assert Constants.FORCED_OVERDUE_FREQUENCY == 1
