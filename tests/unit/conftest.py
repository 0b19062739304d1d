"""Pytest configuration and fixtures for unit tests."""

import pytest

from src.core import db_client
from src.core.config import settings
from src.core.module_registry import clear_modules, ensure_registered
from src.core.schema import init_db
from src.modules.chores import ChoresModule
from tests.unit.mocks import InMemoryDBClient


@pytest.fixture
def in_memory_db():
    """Provides a fresh InMemoryDBClient for each test."""
    return InMemoryDBClient()


@pytest.fixture
def patched_db(monkeypatch, in_memory_db):
    """Patches src.core.db_client functions to use InMemoryDBClient."""
    monkeypatch.setattr("src.core.db_client.create_record", in_memory_db.create_record)
    monkeypatch.setattr("src.core.db_client.get_record", in_memory_db.get_record)
    monkeypatch.setattr("src.core.db_client.update_record", in_memory_db.update_record)
    monkeypatch.setattr("src.core.db_client.list_records", in_memory_db.list_records)

    return in_memory_db


@pytest.fixture
async def sqlite_db(tmp_path, monkeypatch):
    """Points db_client at a fresh SQLite file with the chores schema applied."""
    monkeypatch.setattr(settings, "sqlite_db_path", str(tmp_path / "chores.db"))
    clear_modules()
    ensure_registered(ChoresModule())
    await init_db()

    yield settings.sqlite_db_path

    await db_client.close_connection()
    clear_modules()
