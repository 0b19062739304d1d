"""SQLite database client wrapper with CRUD operations."""

import asyncio
import logging
import re
import threading
from pathlib import Path
from typing import Any

import aiosqlite

from src.core.config import settings


logger = logging.getLogger(__name__)


class DatabaseError(Exception):
    """Raised when a database operation fails."""


class RecordNotFoundError(DatabaseError):
    """Raised when a record does not exist."""


def _validate_collection_name(collection: str) -> None:
    """Validate that a collection name contains only alphanumeric characters and underscores."""
    if not re.match(r"^[a-zA-Z_][a-zA-Z0-9_]*$", collection):
        msg = f"Invalid collection name: {collection}. Only alphanumeric characters and underscores are allowed."
        raise DatabaseError(msg)


def _validate_column_names(columns: list[str]) -> None:
    """Validate that column names are plain identifiers."""
    for column in columns:
        if not re.match(r"^[a-zA-Z_][a-zA-Z0-9_]*$", column):
            msg = f"Invalid column name: {column}"
            raise DatabaseError(msg)


def get_db_path() -> Path:
    """Get the resolved SQLite database file path."""
    return Path(settings.sqlite_db_path).resolve()


_db_connections: dict[tuple[int, int, str], aiosqlite.Connection] = {}
_db_lock = asyncio.Lock()


async def get_connection() -> aiosqlite.Connection:
    """Get or create a cached connection for the current thread, loop, and db path."""
    thread_id = threading.get_ident()
    loop = asyncio.get_event_loop()
    loop_id = id(loop)
    path = get_db_path()
    cache_key = (thread_id, loop_id, str(path))

    if cache_key in _db_connections:
        return _db_connections[cache_key]

    async with _db_lock:
        # Double-check after acquiring lock
        if cache_key in _db_connections:
            return _db_connections[cache_key]

        path.parent.mkdir(parents=True, exist_ok=True)

        conn = await aiosqlite.connect(str(path))
        await conn.execute("PRAGMA foreign_keys = ON")
        await conn.execute("PRAGMA journal_mode = WAL")

        _db_connections[cache_key] = conn

        logger.info(
            "Created new SQLite connection",
            extra={"db_path": str(path), "thread_id": thread_id, "loop_id": loop_id},
        )
        return conn


async def close_connection() -> None:
    """Close the cached SQLite connection for the current thread, loop, and db path."""
    thread_id = threading.get_ident()
    loop_id = id(asyncio.get_event_loop())
    path = get_db_path()
    cache_key = (thread_id, loop_id, str(path))

    async with _db_lock:
        conn = _db_connections.pop(cache_key, None)
        if conn is None:
            return
        try:
            await conn.close()
        except Exception as e:
            logger.warning(
                "Error closing SQLite connection",
                extra={"error": str(e), "thread_id": thread_id, "loop_id": loop_id},
            )
            return

    logger.info("Closed SQLite connection", extra={"thread_id": thread_id, "loop_id": loop_id, "db_path": str(path)})


def _row_to_record(cursor: aiosqlite.Cursor, row: Any) -> dict[str, Any]:
    columns = [description[0] for description in cursor.description]
    return dict(zip(columns, row, strict=True))


async def create_record(*, collection: str, data: dict[str, Any]) -> dict[str, Any]:
    """Insert a new record and return it with its assigned id."""
    _validate_collection_name(collection)
    _validate_column_names(list(data))
    try:
        conn = await get_connection()

        columns_str = ", ".join(data)
        placeholders_str = ", ".join("?" for _ in data)

        query = f"INSERT INTO {collection} ({columns_str}) VALUES ({placeholders_str})"  # noqa: S608 - names are validated
        cursor = await conn.execute(query, list(data.values()))
        await conn.commit()
        record_id = cursor.lastrowid
    except aiosqlite.Error as e:
        logger.error("create_record_failed", extra={"collection": collection, "error": str(e)})
        msg = f"Failed to create record in {collection}: {e}"
        raise DatabaseError(msg) from e

    logger.info("Created record", extra={"collection": collection, "record_id": record_id})
    return await get_record(collection=collection, record_id=record_id)


async def get_record(*, collection: str, record_id: int) -> dict[str, Any]:
    """Fetch a single record by ID, raising RecordNotFoundError if not found."""
    _validate_collection_name(collection)
    try:
        conn = await get_connection()

        query = f"SELECT * FROM {collection} WHERE id = ?"  # noqa: S608 - collection is validated
        cursor = await conn.execute(query, (record_id,))
        row = await cursor.fetchone()
    except aiosqlite.Error as e:
        logger.error("get_record_failed", extra={"collection": collection, "record_id": record_id, "error": str(e)})
        msg = f"Failed to get record from {collection}: {e}"
        raise DatabaseError(msg) from e

    if row is None:
        msg = f"Record not found in {collection}: {record_id}"
        raise RecordNotFoundError(msg)

    logger.debug("Retrieved record", extra={"collection": collection, "record_id": record_id})
    return _row_to_record(cursor, row)


async def update_record(*, collection: str, record_id: int, data: dict[str, Any]) -> dict[str, Any]:
    """Update a record by ID and return the updated record."""
    if not data:
        msg = "Empty update payload"
        raise DatabaseError(msg)

    _validate_collection_name(collection)
    _validate_column_names(list(data))
    try:
        conn = await get_connection()

        set_clause = ", ".join(f"{key} = ?" for key in data)
        values = [*data.values(), record_id]

        query = f"UPDATE {collection} SET {set_clause} WHERE id = ?"  # noqa: S608 - names are validated
        cursor = await conn.execute(query, values)
        await conn.commit()
    except aiosqlite.Error as e:
        logger.error("update_record_failed", extra={"collection": collection, "record_id": record_id, "error": str(e)})
        msg = f"Failed to update record in {collection}: {e}"
        raise DatabaseError(msg) from e

    if cursor.rowcount == 0:
        msg = f"Record not found in {collection}: {record_id}"
        raise RecordNotFoundError(msg)

    logger.info("Updated record", extra={"collection": collection, "record_id": record_id, "fields": list(data)})
    return await get_record(collection=collection, record_id=record_id)


async def list_records(
    *,
    collection: str,
    page: int = 1,
    per_page: int = 50,
    sort: str = "",
) -> list[dict[str, Any]]:
    """List records with optional sorting and pagination."""
    _validate_collection_name(collection)

    # Only allow: column_name [ASC|DESC]
    safe_sort = "id ASC"
    if sort:
        if re.match(r"^[A-Za-z_][A-Za-z0-9_]*\s*(ASC|DESC)?$", sort.strip(), re.IGNORECASE):
            safe_sort = sort.strip()
        else:
            logger.warning("Invalid sort parameter, using default", extra={"sort": sort})

    offset = (page - 1) * per_page

    try:
        conn = await get_connection()

        query = f"SELECT * FROM {collection} ORDER BY {safe_sort} LIMIT ? OFFSET ?"  # noqa: S608 - collection is validated
        cursor = await conn.execute(query, (per_page, offset))
        rows = await cursor.fetchall()
    except aiosqlite.Error as e:
        logger.error("list_records_failed", extra={"collection": collection, "error": str(e)})
        msg = f"Failed to list records from {collection}: {e}"
        raise DatabaseError(msg) from e

    records = [_row_to_record(cursor, row) for row in rows]
    logger.debug("Listed records", extra={"collection": collection, "count": len(records)})
    return records
