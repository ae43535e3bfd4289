"""Reversible short code encoding.

Tokens are produced with Hashids. Hashids only encodes non-negative integers,
so codes are reinterpreted as unsigned 32-bit values before encoding and
mapped back to signed on decode. Non-negative codes encode exactly as plain
Hashids would.
"""

import logging
from functools import lru_cache
from typing import Optional, Protocol

from hashids import Hashids

from urlshortener.core.config import settings
from urlshortener.services.codes import INT32_MAX, INT32_MIN

logger = logging.getLogger(__name__)

_UINT32_MASK = 0xFFFFFFFF
_SIGN_BIT = 1 << 31


class ShortCodeEncoder(Protocol):
    """Reversible mapping between int32 short codes and public tokens."""

    def encode(self, code: int) -> str:
        ...

    def decode(self, token: str) -> Optional[int]:
        ...


class HashidsEncoder:
    """ShortCodeEncoder backed by the hashids library."""

    def __init__(self, salt: str = "", min_length: int = 0, alphabet: Optional[str] = None):
        kwargs = {"salt": salt, "min_length": min_length}
        if alphabet:
            kwargs["alphabet"] = alphabet
        self._hashids = Hashids(**kwargs)

    def encode(self, code: int) -> str:
        """Encode a signed 32-bit code.

        Raises:
            ValueError: If ``code`` is outside the int32 range
        """
        if not INT32_MIN <= code <= INT32_MAX:
            raise ValueError(f"Short code {code} is outside the signed 32-bit range")
        return self._hashids.encode(code & _UINT32_MASK)

    def decode(self, token: str) -> Optional[int]:
        """Decode a token back to its signed 32-bit code, or None if it is not one."""
        if not token:
            return None

        values = self._hashids.decode(token)
        if len(values) != 1 or values[0] > _UINT32_MASK:
            logger.debug(f"Token '{token}' does not decode to a single 32-bit code")
            return None

        value = values[0]
        return value - (1 << 32) if value & _SIGN_BIT else value


@lru_cache()
def get_encoder() -> HashidsEncoder:
    """Build the configured encoder once."""
    return HashidsEncoder(
        salt=settings.HASHIDS_SALT,
        min_length=settings.HASHIDS_MIN_LENGTH,
        alphabet=settings.HASHIDS_ALPHABET,
    )
