"""Health check endpoints."""

from typing import Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.core.database import Database, get_database
from app.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: Literal["ok", "unhealthy"]
    database: Literal["connected", "disconnected"] | None = None


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe; never touches the database."""
    return HealthResponse(status="ok")


@router.get("/health/ready", response_model=HealthResponse)
async def readiness_check(
    database: Database = Depends(get_database),
) -> HealthResponse:
    """Readiness probe including database connectivity.

    Args:
        database: Database handle opened at startup.

    Returns:
        Health status with database state.
    """
    try:
        await database.ping()
    except Exception as e:
        logger.error(
            "health.database_disconnected",
            error=str(e),
            error_type=type(e).__name__,
        )
        return HealthResponse(status="unhealthy", database="disconnected")
    return HealthResponse(status="ok", database="connected")
