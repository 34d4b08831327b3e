"""Hashing and bytes32 hex helpers."""

from __future__ import annotations

import hashlib

HEX_WIDTH = 64
_PAD_GROUP = "0000"


def sha256_hex(value: str) -> str:
    """Return SHA-256 hex digest for the provided string value."""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def hashlock(secret: str) -> str:
    """Return the 0x-prefixed SHA-256 hashlock for a swap secret."""
    return "0x" + sha256_hex(secret)


def normalize_hex(value: str) -> str:
    """Return ``value`` as a 0x-prefixed, 64-digit hex token.

    The UTF-8 bytes are hex encoded, then either truncated to 64 digits or
    padded with ``"0000"`` groups until at least 64 digits long and cut back
    to exactly 64. The last pad group may be cut in half.
    """
    encoded = value.encode("utf-8").hex()
    if len(encoded) >= HEX_WIDTH:
        return "0x" + encoded[:HEX_WIDTH]
    while len(encoded) < HEX_WIDTH:
        encoded += _PAD_GROUP
    return "0x" + encoded[:HEX_WIDTH]
