"""Routes package initialization.

This module exports the route collection for the application.
"""

from fastapi import APIRouter

from urlshortener.api.routes import health, redirect, shortener
from urlshortener.core.config import settings

# Create root router
api_router = APIRouter()

# Include shortener routes with API prefix
api_router.include_router(
    shortener.router,
    prefix=settings.API_PREFIX
)

# Include health check routes with API prefix
api_router.include_router(
    health.router,
    prefix=settings.API_PREFIX
)

# Redirect routes sit at the root path so short URLs are /{token};
# registered last so they never shadow the prefixed routes
api_router.include_router(
    redirect.router
)

__all__ = ["api_router"]
