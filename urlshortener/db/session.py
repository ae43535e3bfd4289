"""Session management for database operations.

This module provides utilities for handling SQLAlchemy async sessions
with proper lifecycle management, error handling, and transaction support.
"""

import inspect
import logging
from functools import wraps
from typing import AsyncGenerator, Callable, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from urlshortener.db.base import get_session

logger = logging.getLogger(__name__)

# Generic return type for function decorators
T = TypeVar("T")


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions.

    Yields a fresh session per request and rolls it back if the request
    handler raises.

    Yields:
        AsyncSession: A SQLAlchemy async session object.
    """
    async with get_session() as session:
        try:
            yield session
        except SQLAlchemyError:
            logger.exception("Database error occurred")
            await session.rollback()
            raise
        except Exception:
            await session.rollback()
            raise


def db_transaction(db_param_name: Optional[str] = None) -> Callable:
    """Decorator to wrap functions in a database transaction.

    Finds the database session parameter, commits on success or rolls back
    on error.

    Args:
        db_param_name: Optional name of the database session parameter.
            If not provided, the first parameter annotated as AsyncSession is used.

    Returns:
        Callable: Decorator function

    Example:
        ```python
        @db_transaction(db_param_name="db")
        async def add_url(self, db: AsyncSession, data: UrlCreate) -> Url:
            return await repository.create(db, data)
        ```
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        # Resolve the session parameter once at decoration time
        parameters = inspect.signature(func).parameters
        db_param_pos = None
        db_param_key = None

        for i, (param_name, param) in enumerate(parameters.items()):
            if db_param_name is not None:
                if param_name == db_param_name:
                    db_param_pos, db_param_key = i, param_name
                    break
            elif param.annotation is AsyncSession or param.annotation == "AsyncSession":
                db_param_pos, db_param_key = i, param_name
                break

        if db_param_key is None:
            raise ValueError(
                f"Unable to find database session parameter in function '{func.__name__}'"
            )

        @wraps(func)
        async def wrapper(*args, **kwargs):
            if db_param_key in kwargs:
                db = kwargs[db_param_key]
            elif len(args) > db_param_pos:
                db = args[db_param_pos]
            else:
                raise ValueError(
                    f"Database session not found in function arguments for '{func.__name__}'"
                )

            try:
                result = await func(*args, **kwargs)
                await db.commit()
                return result
            except Exception as e:
                await db.rollback()
                logger.error(f"Transaction failed in '{func.__name__}': {e}")
                raise

        return wrapper
    return decorator
