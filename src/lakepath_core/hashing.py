"""Hash prefixes for object-store data file locations.

The prefix is the 32-bit MurmurHash3 (x86 variant, seed 0) of the UTF-8 encoded
name, written little-endian and rendered as unpadded URL-safe base64. Existing
tables depend on these exact bytes, so the scheme must never change.
"""

from __future__ import annotations

import base64

import mmh3

HASH_SEED = 0
HASH_NUM_BYTES = 4
HASH_PREFIX_LENGTH = 6


def murmur3_32(value: str) -> int:
    """Return the unsigned 32-bit MurmurHash3 of ``value``."""

    # Lone surrogates hash as "?", matching how other writers encode them.
    data = value.encode("utf-8", errors="replace")
    return mmh3.hash(data, HASH_SEED, signed=False)


def hash_bytes(value: str) -> bytes:
    """Return the 4 hash bytes of ``value`` in the hash's native (little-endian) order."""

    return murmur3_32(value).to_bytes(HASH_NUM_BYTES, "little")


def compute_hash(value: str) -> str:
    """Compute the 6-character base64url prefix used to spread files across keys."""

    encoded = base64.urlsafe_b64encode(hash_bytes(value))
    return encoded.rstrip(b"=").decode("ascii")
