"""API dependencies for FastAPI.

This module provides dependency injection functions for FastAPI endpoints
to access repositories, the token encoder and service instances.
"""

from fastapi import Depends

from urlshortener.core.config import settings
from urlshortener.repositories.url_repository import URLRepository
from urlshortener.services.encoder import ShortCodeEncoder, get_encoder
from urlshortener.services.shortener import ShortenUrlService


async def get_url_repository() -> URLRepository:
    """Get an instance of the URL repository."""
    return URLRepository()


async def get_token_encoder() -> ShortCodeEncoder:
    """Get the configured token encoder."""
    return get_encoder()


async def get_shortener_service(
    url_repo: URLRepository = Depends(get_url_repository),
    encoder: ShortCodeEncoder = Depends(get_token_encoder),
) -> ShortenUrlService:
    """Get an instance of the URL shortening service."""
    return ShortenUrlService(url_repository=url_repo, encoder=encoder)


def get_base_url() -> str:
    """Get the base URL for shortened links."""
    return settings.BASE_URL.rstrip("/")
