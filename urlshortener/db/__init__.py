"""Database module for the URL shortener application."""
from urlshortener.db.base import (
    DatabaseHealthCheck,
    async_session_factory,
    engine,
    get_engine,
    get_session,
    init_models,
)
from urlshortener.db.session import db_transaction, get_db

__all__ = [
    "engine",
    "get_engine",
    "get_session",
    "async_session_factory",
    "init_models",
    "DatabaseHealthCheck",
    "get_db",
    "db_transaction",
]
