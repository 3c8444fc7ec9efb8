"""Content-hash record encoding for IPFS pointers.

Wire layout: ``0x01 || length (1 byte) || utf8(ipfs_hash)``, hex with ``0x``.
This is the simplified scheme the tutorial resolvers use, not the full
multicodec ``contenthash`` format of ENSIP-7.
"""

from __future__ import annotations

IPFS_PROTOCOL = 0x01
IPFS_PREFIXES = ("Qm", "bafy")
MAX_HASH_BYTES = 0xFF


class ContentHashError(ValueError):
    """Raised when a value cannot be encoded as a content hash."""


def encode_content_hash(ipfs_hash: str) -> str:
    """Encode an IPFS CID (``Qm...`` or ``bafy...``) as a content-hash record."""
    if not ipfs_hash.startswith(IPFS_PREFIXES):
        msg = f"Invalid IPFS hash format: {ipfs_hash!r}"
        raise ContentHashError(msg)
    raw = ipfs_hash.encode("utf-8")
    if len(raw) > MAX_HASH_BYTES:
        msg = f"IPFS hash too long: {len(raw)} bytes (max {MAX_HASH_BYTES})"
        raise ContentHashError(msg)
    return "0x" + bytes([IPFS_PROTOCOL, len(raw)]).hex() + raw.hex()


def decode_content_hash(content_hash: str) -> str:
    """Recover the IPFS hash from a record, or return *content_hash* unchanged.

    Non-IPFS records and malformed hex are passed through as-is.
    """
    text = content_hash[2:] if content_hash.startswith(("0x", "0X")) else content_hash
    try:
        raw = bytes.fromhex(text)
    except ValueError:
        return content_hash
    if len(raw) < 2 or raw[0] != IPFS_PROTOCOL:
        return content_hash
    length = raw[1]
    try:
        return raw[2 : 2 + length].decode("utf-8")
    except UnicodeDecodeError:
        return content_hash
