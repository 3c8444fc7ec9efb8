"""Digest primitives shared by the namehash encoder.

ENS uses the original Keccak-256 submission, which differs from the
standardized ``hashlib.sha3_256`` in its padding byte. Every node hash the
registry stores is computed with Keccak-256, so that is the production digest.
"""

from __future__ import annotations

from collections.abc import Callable

from Crypto.Hash import keccak

DIGEST_SIZE = 32

Digest = Callable[[bytes], bytes]
"""A 256-bit hash function: arbitrary bytes in, 32 bytes out."""

ZERO_HASH = bytes(DIGEST_SIZE)


def keccak256(data: bytes) -> bytes:
    """Return the Keccak-256 digest of *data*."""
    return keccak.new(digest_bits=256, data=data).digest()


def to_hex(value: bytes) -> str:
    """Render *value* as lowercase hex with a ``0x`` prefix."""
    return "0x" + value.hex()
