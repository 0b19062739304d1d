"""Chore HTTP endpoints."""

import logging
import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.core.config import constants
from src.core.errors import ChoreEngineError, classify_error_with_response
from src.domain.chore import ChoreListResponse
from src.domain.create_models import ChoreCreate
from src.services.chore_service import ChoreService
from src.services.chore_store import SqliteChoreStore


router = APIRouter(tags=["chores"])
logger = logging.getLogger(__name__)

chore_service = ChoreService(store=SqliteChoreStore())


def get_chore_service() -> ChoreService:
    """Provide the process-wide chore service."""
    return chore_service


def get_now() -> int:
    """Current wall-clock time in Unix seconds. The only clock read in the service."""
    return int(time.time())


async def chore_engine_error_handler(request: Request, exc: ChoreEngineError) -> JSONResponse:
    """Render an engine error as a structured JSON response."""
    response = classify_error_with_response(exc)
    logger.warning(
        "chore_request_failed",
        extra={"path": request.url.path, "code": response.code, "error": str(exc)},
    )
    return JSONResponse(
        status_code=response.status_code,
        content={"code": response.code, "message": response.message, "suggestion": response.suggestion},
    )


@router.get("/get-chores")
async def get_chores(
    service: ChoreService = Depends(get_chore_service),
    now: int = Depends(get_now),
) -> ChoreListResponse:
    """List every chore with its derived status."""
    items = await service.list_with_status(now)
    return ChoreListResponse.from_items(items)


@router.post("/{chore_id}/toggle-chore")
async def toggle_chore(
    chore_id: int,
    service: ChoreService = Depends(get_chore_service),
    now: int = Depends(get_now),
) -> ChoreListResponse:
    """Toggle a chore and return the refreshed list of every chore."""
    items = await service.toggle(chore_id, now)
    return ChoreListResponse.from_items(items)


@router.post("/chores", status_code=constants.HTTP_CREATED)
async def create_chore(
    payload: ChoreCreate,
    service: ChoreService = Depends(get_chore_service),
    now: int = Depends(get_now),
) -> ChoreListResponse:
    """Seed a new unscheduled chore and return the refreshed list."""
    await service.create_chore(payload.chore_name)
    items = await service.list_with_status(now)
    return ChoreListResponse.from_items(items)
