"""Health check endpoint for monitoring application status."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from urlshortener.api import schemas
from urlshortener.core.config import settings
from urlshortener.db.base import DatabaseHealthCheck
from urlshortener.db.session import get_db

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=schemas.HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Get system health status",
)
async def health_check(db: AsyncSession = Depends(get_db)):
    """Check health of the database connection."""
    database = await DatabaseHealthCheck.check_connection(db)
    return schemas.HealthResponse(
        status="healthy" if database["status"] == "healthy" else "degraded",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT.value,
        components={"database": database},
    )
