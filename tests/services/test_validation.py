"""Tests for shorten request validation."""

import pytest

from urlshortener.services.exceptions import URLValidationError
from urlshortener.services.validation import (
    ValidationRule,
    collect_failures,
    is_absolute_url,
    validate_shorten_request,
)


@pytest.mark.service
class TestShortenValidation:

    @pytest.mark.parametrize("url", [
        "https://example.com",
        "http://example.com/path?q=1#frag",
        "ftp://files.example.org/pub",
        "http://localhost:8000",
        "https://user:pw@example.com",
    ])
    def test_accepts_absolute_urls(self, url):
        validate_shorten_request(url)

    @pytest.mark.parametrize("url", [None, ""])
    def test_missing_url_is_required_only(self, url):
        with pytest.raises(URLValidationError) as excinfo:
            validate_shorten_request(url)

        assert excinfo.value.codes == ["required"]
        assert excinfo.value.errors == {"url": ["Url is required."]}

    def test_whitespace_url_fails_both_rules(self):
        """Only null or empty input skips the format rule."""
        with pytest.raises(URLValidationError) as excinfo:
            validate_shorten_request("   ")

        assert excinfo.value.codes == ["required", "invalid_format"]
        assert excinfo.value.errors == {"url": ["Url is required.", "Url is not valid."]}

    @pytest.mark.parametrize("url", [
        "not-a-url",
        "example.com/path",
        "/relative/path",
        "mailto:someone@example.com",
        "https://",
        "http://[::1",
        "http://exa mple.com",
        "https://example.com:notaport",
        "http://%%%/",
    ])
    def test_rejects_non_absolute_urls(self, url):
        with pytest.raises(URLValidationError) as excinfo:
            validate_shorten_request(url)

        assert excinfo.value.codes == ["invalid_format"]
        assert excinfo.value.errors == {"url": ["Url is not valid."]}
        assert str(excinfo.value) == "Url is not valid."

    def test_is_absolute_url_rejects_non_strings(self):
        assert is_absolute_url(123) is False
        assert is_absolute_url(None) is False

    def test_all_failures_are_collected(self):
        """Rules run independently, so every failing rule is reported."""
        rules = [
            ValidationRule("url", "a", "first", lambda v: False),
            ValidationRule("url", "b", "skipped", lambda v: False, when=lambda v: False),
            ValidationRule("name", "c", "third", lambda v: v is not None),
        ]

        failures = collect_failures(rules, {"url": "x"})

        assert [f.code for f in failures] == ["a", "c"]
        assert URLValidationError(failures).errors == {"url": ["first"], "name": ["third"]}
