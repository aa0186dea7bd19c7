"""Liveness probe for the bookmarks service."""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_async_session


logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Overall status plus the bookmarks database status."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """
    Report whether the bookmarks table's database answers a trivial query.

    Always responds 200; an unreachable database shows up as `degraded`.
    Open to unauthenticated callers so load balancers can poll it.
    """
    try:
        await db.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Bookmarks database is unreachable")
        return HealthResponse(status="degraded", database="unhealthy")
    return HealthResponse(status="healthy", database="healthy")
