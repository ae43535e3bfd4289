"""URL shortening service for the URL shortener application.

This module contains the ShortenUrlService class, which returns the token of
an existing mapping for a URL or creates the mapping on first request.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from urlshortener.db.session import db_transaction
from urlshortener.models.url import Url, UrlCreate
from urlshortener.repositories.base import RepositoryError
from urlshortener.repositories.url_repository import URLRepository
from urlshortener.services.codes import derive_code
from urlshortener.services.encoder import ShortCodeEncoder
from urlshortener.services.exceptions import (
    InvalidTokenError,
    URLCreationError,
    URLNotFoundError,
)
from urlshortener.services.validation import validate_shorten_request

logger = logging.getLogger(__name__)


class ShortenUrlService:
    """
    Service for URL shortening business logic.

    The lookup and the insert are separate statements with no lock between
    them. Two concurrent first requests for the same URL can both insert;
    both rows carry the same code, so callers still get the same token.
    """

    def __init__(self, url_repository: URLRepository, encoder: ShortCodeEncoder):
        """
        Initialize the URL shortening service.

        Args:
            url_repository: Repository for URL data access
            encoder: Reversible short code encoder
        """
        self.url_repository = url_repository
        self.encoder = encoder

    async def shorten(self, db: AsyncSession, url: str) -> str:
        """
        Return the token for ``url``, creating its mapping if needed.

        Args:
            db: Database session
            url: Absolute URL to shorten

        Returns:
            str: The encoded token

        Raises:
            URLValidationError: If the URL is missing or not absolute
            URLCreationError: If the lookup, the insert or the commit fails
        """
        validate_shorten_request(url)

        try:
            existing = await self.url_repository.get_by_original_url(db, url)
        except RepositoryError as e:
            logger.error(f"Error looking up URL: {e}")
            raise URLCreationError(f"Failed to look up URL: {e}") from e

        if existing is not None:
            logger.debug(f"Reusing mapping {existing.id} for {url}")
            return self.encoder.encode(existing.short_code)

        try:
            record = await self._add_url(db, url)
        except (RepositoryError, SQLAlchemyError) as e:
            logger.error(f"Error creating URL mapping: {e}")
            raise URLCreationError(f"Failed to create short URL: {e}") from e

        logger.info(f"Created mapping {record.id} with code {record.short_code}")
        return self.encoder.encode(record.short_code)

    @db_transaction(db_param_name="db")
    async def _add_url(self, db: AsyncSession, url: str) -> Url:
        data = UrlCreate(original_url=url, short_code=derive_code(url))
        return await self.url_repository.add_url(db, data)

    async def resolve(self, db: AsyncSession, token: str) -> Url:
        """
        Find the mapping a token points to.

        Args:
            db: Database session
            token: Token previously returned by shorten

        Returns:
            Url: The first mapping stored under the decoded code

        Raises:
            InvalidTokenError: If the token does not decode to a short code
            URLNotFoundError: If no mapping uses the code
        """
        code = self.encoder.decode(token)
        if code is None:
            raise InvalidTokenError(f"Token '{token}' is not valid")

        try:
            url = await self.url_repository.get_by_short_code(db, code)
        except RepositoryError as e:
            logger.error(f"Error resolving token: {e}")
            raise URLNotFoundError(f"Failed to retrieve URL for token '{token}'") from e

        if url is None:
            raise URLNotFoundError(f"URL for token '{token}' not found")
        return url
