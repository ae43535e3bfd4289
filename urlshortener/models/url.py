"""URL mapping data models.

This module defines the Url model that maps an original URL to the integer
short code its public token is encoded from.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UrlBase(SQLModel):
    """Base model for URL mapping data."""

    original_url: str = Field(
        index=True,
        description="The absolute URL supplied by the caller",
    )
    # Not unique: distinct URLs sharing their first four bytes share a code
    short_code: int = Field(
        index=True,
        description="Signed 32-bit code derived from the original URL",
    )


class Url(UrlBase, table=True):
    """
    Persisted mapping between an original URL and its short code.

    Rows are created on the first request for a URL and never updated.
    Nothing constrains original_url to be unique, so concurrent first
    requests may leave duplicate rows; lookups take the lowest id.
    """

    __tablename__ = "urls"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        description="Timestamp when this mapping was created"
    )


class UrlCreate(UrlBase):
    """Schema for creating a new URL mapping."""
    pass


class UrlRead(UrlBase):
    """Schema for reading a URL mapping."""
    id: int
    created_at: datetime
