"""Exceptions for the URL shortener service layer.

This module contains the exception hierarchy for the service layer,
providing domain-specific exceptions that abstract underlying implementation details.
"""

from typing import TYPE_CHECKING, Dict, List, Sequence

if TYPE_CHECKING:
    from urlshortener.services.validation import ValidationFailure


class ServiceError(Exception):
    """Base exception for all service-level errors."""
    pass


class URLError(ServiceError):
    """Base exception for URL-related errors."""
    pass


class URLValidationError(URLError):
    """The request failed one or more validation rules."""

    def __init__(self, failures: Sequence["ValidationFailure"]):
        self.failures = list(failures)
        super().__init__("; ".join(failure.message for failure in self.failures))

    @property
    def errors(self) -> Dict[str, List[str]]:
        """Failure messages grouped by field."""
        grouped: Dict[str, List[str]] = {}
        for failure in self.failures:
            grouped.setdefault(failure.field, []).append(failure.message)
        return grouped

    @property
    def codes(self) -> List[str]:
        return [failure.code for failure in self.failures]


class URLCreationError(URLError):
    """The store failed while looking up or persisting a URL mapping."""
    pass


class URLNotFoundError(URLError):
    """No URL mapping exists for the given token."""
    pass


class InvalidTokenError(URLNotFoundError):
    """The token does not decode to a short code."""
    pass
