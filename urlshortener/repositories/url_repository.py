"""URL Repository for the URL shortener application.

This module provides the URLRepository class for database operations related to Url models.
"""

from typing import Any, Dict, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from urlshortener.models.url import Url, UrlCreate
from urlshortener.repositories.base import BaseRepository


class URLRepository(BaseRepository[Url, UrlCreate]):
    """
    Repository for Url model database operations.

    Neither original_url nor short_code is unique, so lookups return the
    first match by id.
    """

    def __init__(self):
        """Initialize the repository with the Url model type."""
        super().__init__(Url)

    async def get_by_original_url(self, db: AsyncSession, original_url: str) -> Optional[Url]:
        """
        Find the first mapping for an original URL.

        Args:
            db: Database session
            original_url: Exact, case-sensitive URL to look up

        Returns:
            The Url if found, None otherwise

        Raises:
            RepositoryError: On database errors
        """
        return await self.find_first(db, original_url=original_url)

    async def get_by_short_code(self, db: AsyncSession, short_code: int) -> Optional[Url]:
        """
        Find the first mapping stored under a short code.

        Raises:
            RepositoryError: On database errors
        """
        return await self.find_first(db, short_code=short_code)

    async def add_url(self, db: AsyncSession, data: Union[UrlCreate, Dict[str, Any]]) -> Url:
        """
        Add a new mapping. The caller commits.

        Raises:
            RepositoryError: On database errors
        """
        return await self.create(db, data)
