"""
Data models for the URL shortener application.
"""

from urlshortener.models.url import Url, UrlBase, UrlCreate, UrlRead

__all__ = [
    "Url",
    "UrlBase",
    "UrlCreate",
    "UrlRead",
]
