"""SQLite schema management (code-first, driven by registered modules)."""

import logging

import aiosqlite

from src.core import db_client
from src.core.module_registry import get_all_indexes, get_all_table_schemas


logger = logging.getLogger(__name__)


async def init_db() -> None:
    """Create every table and index declared by the registered modules.

    Raises:
        db_client.DatabaseError: If a statement fails
    """
    schemas = get_all_table_schemas()
    indexes = get_all_indexes()

    try:
        conn = await db_client.get_connection()
        for table_name, statement in schemas.items():
            await conn.execute(statement)
            logger.debug("Ensured table", extra={"table": table_name})
        for statement in indexes:
            await conn.execute(statement)
        await conn.commit()
    except aiosqlite.Error as e:
        logger.error("init_db_failed", extra={"error": str(e)})
        msg = f"Failed to initialise database schema: {e}"
        raise db_client.DatabaseError(msg) from e

    logger.info("Database schema initialised", extra={"tables": sorted(schemas), "indexes": len(indexes)})
