"""Service layer for the URL shortener application.

Services orchestrate interactions between repositories and the token encoder.
"""

from urlshortener.services.codes import derive_code
from urlshortener.services.encoder import HashidsEncoder, ShortCodeEncoder, get_encoder
from urlshortener.services.shortener import ShortenUrlService

__all__ = [
    "ShortenUrlService",
    "HashidsEncoder",
    "ShortCodeEncoder",
    "get_encoder",
    "derive_code",
]
