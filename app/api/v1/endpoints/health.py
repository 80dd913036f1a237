"""Health check endpoints; used for liveness and readiness probes."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import get_settings
from app.domain.exceptions import SqlNotConfiguredException
from app.infrastructure.persistence import database
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse(version=get_settings().app_version)


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Database not reachable", "model": ReadinessErrorResponse}},
)
async def readiness_check() -> ReadinessResponse | JSONResponse:
    """Return 200 when the database answers SELECT 1; 503 otherwise."""
    try:
        session_factory = database._require_session_factory()
        async with session_factory() as session:
            await session.execute(text("SELECT 1"))
    except SqlNotConfiguredException as e:
        message = e.message
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Readiness check failed: %s", e)
        message = "Database not reachable"
    else:
        return ReadinessResponse()
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(status="not_ready", message=message).model_dump(),
    )
