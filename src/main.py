"""choretick - recurring household chores with phase-preserving completion."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from src.core.config import constants
from src.core.db_client import close_connection
from src.core.errors import ChoreEngineError
from src.core.logging import configure_logfire, instrument_fastapi
from src.core.module_registry import ensure_registered
from src.core.schema import init_db
from src.interface.chore_router import chore_engine_error_handler
from src.interface.chore_router import router as chore_router
from src.modules.chores import ChoresModule


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan context manager."""
    # Startup
    configure_logfire()

    ensure_registered(ChoresModule())
    await init_db()
    logger.info("Database initialized")
    yield
    # Shutdown
    await close_connection()


app = FastAPI(
    title="choretick",
    description="Recurring household chores with phase-preserving completion",
    version="0.1.0",
    lifespan=lifespan,
)

# Instrument FastAPI with Logfire
instrument_fastapi(app)

app.add_exception_handler(ChoreEngineError, chore_engine_error_handler)  # type: ignore[arg-type]

# Register routers
app.include_router(chore_router)


@app.get("/health")
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(content={"status": "healthy"}, status_code=constants.HTTP_OK)
