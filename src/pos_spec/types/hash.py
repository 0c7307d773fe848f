"""Hash type and the hashing primitive used for block linkage."""

import hashlib

from pydantic import Field
from typing_extensions import Annotated

HASH_HEX_LENGTH = 64
"""Length of a hex-encoded SHA-256 digest."""

HexDigest = Annotated[
    str,
    Field(
        pattern=r"^([0-9a-f]{64})?$",
        description="A lowercase hex SHA-256 digest, or empty for the genesis parent.",
    ),
]
"""
A type alias for a hex-encoded 32-byte hash.

The empty string is accepted because the genesis block has no predecessor.
"""


def sha256_hex(data: str | bytes) -> str:
    """
    Hash `data` with SHA-256 and return the lowercase hex digest.

    Strings are encoded as UTF-8 before hashing.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()
