"""Test utilities for URL shortener tests."""

import random
import string
from typing import Optional

from sqlalchemy import func, select

from urlshortener.models.url import Url
from urlshortener.services.codes import derive_code


def random_string(length: int = 10) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choice(string.ascii_letters + string.digits) for _ in range(length))


def random_url() -> str:
    """Generate a random URL for testing."""
    domain = f"{random_string(8)}.com"
    path = random_string(12)
    return f"https://{domain}/{path}"


async def create_test_url(
    db,
    original_url: Optional[str] = None,
    short_code: Optional[int] = None,
) -> Url:
    """Create and persist a test Url in the database."""
    original_url = original_url or random_url()
    url = Url(
        original_url=original_url,
        short_code=derive_code(original_url) if short_code is None else short_code,
    )
    db.add(url)
    await db.flush()
    await db.refresh(url)
    return url


async def count_urls(db) -> int:
    result = await db.execute(select(func.count()).select_from(Url))
    return result.scalar_one()
