"""Test fixtures for the URL shortener application."""

import os

# Settings are read at import time, so the environment must be set first
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("DB_CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("HASHIDS_SALT", "test-salt")

from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from urlshortener.db.session import get_db
from urlshortener.main import app as main_app
# Import models to ensure they're registered with SQLModel metadata
from urlshortener.models.url import Url  # noqa: F401
from urlshortener.repositories.url_repository import URLRepository
from urlshortener.services.encoder import HashidsEncoder
from urlshortener.services.shortener import ShortenUrlService


# Test database URL - using SQLite in-memory
TEST_SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory SQLite engine with all tables."""
    engine = create_async_engine(
        TEST_SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_db(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session bound to the test engine."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def url_repository():
    """Return a URL repository instance."""
    return URLRepository()


@pytest.fixture
def encoder():
    """Return an encoder with a fixed salt."""
    return HashidsEncoder(salt="test-salt", min_length=6)


@pytest.fixture
def shortener_service(url_repository, encoder):
    """Return a URL shortening service wired to the test collaborators."""
    return ShortenUrlService(url_repository=url_repository, encoder=encoder)


@pytest_asyncio.fixture
async def client(test_db) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Return an HTTP client talking to the app with get_db overridden."""
    async def _override_get_db():
        yield test_db

    main_app.dependency_overrides[get_db] = _override_get_db
    transport = httpx.ASGITransport(app=main_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as test_client:
        yield test_client
    main_app.dependency_overrides.clear()
