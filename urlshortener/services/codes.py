"""Short code derivation.

A URL's short code is the first four bytes of its UTF-8 encoding read as a
little-endian signed 32-bit integer. The derivation truncates, so every URL
sharing a four byte prefix (for instance every ``http`` URL) maps to the
same code. Collisions are neither detected nor rejected.
"""

import struct
from typing import Optional

CODE_WIDTH = 4
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

_CODE_STRUCT = struct.Struct("<i")


def derive_code(url: Optional[str]) -> int:
    """Derive the signed 32-bit short code for ``url``.

    ``None`` maps to 0. Inputs shorter than four bytes are padded with zero bytes.
    """
    if url is None:
        return 0

    prefix = url.encode("utf-8")[:CODE_WIDTH].ljust(CODE_WIDTH, b"\x00")
    return _CODE_STRUCT.unpack(prefix)[0]
