"""Tests for repository error handling."""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from urlshortener.models.url import UrlCreate
from urlshortener.repositories.base import RepositoryError
from tests.utils import count_urls, random_url


@pytest.mark.repository
class TestRepositoryErrorHandling:
    """Tests for error handling in repositories."""

    @pytest.mark.asyncio
    async def test_query_error_is_wrapped(self, test_db, url_repository):
        """Test handling of database errors on reads."""
        with patch.object(test_db, 'execute', side_effect=SQLAlchemyError("Test database error")):
            with pytest.raises(RepositoryError) as excinfo:
                await url_repository.get_by_original_url(test_db, random_url())

            assert "Test database error" in str(excinfo.value)

    @pytest.mark.asyncio
    async def test_create_error_is_wrapped_and_rolled_back(self, test_db, url_repository):
        """Verify a failed flush surfaces as RepositoryError and leaves no row."""
        data = UrlCreate(original_url=random_url(), short_code=1)

        with patch.object(test_db, 'flush', side_effect=SQLAlchemyError("flush failed")):
            with pytest.raises(RepositoryError) as excinfo:
                await url_repository.add_url(test_db, data)

        assert "flush failed" in str(excinfo.value)
        assert await count_urls(test_db) == 0

