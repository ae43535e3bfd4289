"""API request and response schemas.

This module contains Pydantic models for API request validation
and response serialization.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ShortenRequest(BaseModel):
    """Request schema for shortening a URL.

    The URL is a plain string here; the service applies its own rules so that
    missing and malformed URLs are reported the same way everywhere.
    """
    url: Optional[str] = Field(None, description="Absolute URL to shorten")


class ShortenResponse(BaseModel):
    """Response schema for a shortened URL."""
    token: str
    short_url: str  # Full URL including base domain
    original_url: str


class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str
    components: Dict[str, Dict[str, Any]]


class ErrorResponse(BaseModel):
    """Response schema for errors."""
    detail: str
    error_code: Optional[str] = None  # Machine-readable error code
    field_errors: Optional[Dict[str, List[str]]] = None  # For validation errors
