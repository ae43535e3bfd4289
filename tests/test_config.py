"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from urlshortener.core.config import Settings


def test_sqlite_engine_options_skip_pool_settings():
    settings = Settings(DATABASE_URL="sqlite+aiosqlite:///:memory:")

    assert settings.is_sqlite
    assert settings.engine_options() == {"echo": False}


def test_server_engine_options_include_pool_settings():
    settings = Settings(DATABASE_URL="postgresql+asyncpg://u:p@db:5432/urls", DB_POOL_SIZE=5)

    options = settings.engine_options()
    assert options["pool_size"] == 5
    assert options["pool_pre_ping"] is True


@pytest.mark.parametrize("alphabet", ["abc", "abcdefghijklmnop qrst"])
def test_hashids_alphabet_is_validated(alphabet):
    with pytest.raises(ValidationError):
        Settings(HASHIDS_ALPHABET=alphabet)
