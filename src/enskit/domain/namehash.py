"""Namehash encoder — dotted name to 32-byte registry node.

Algorithm (EIP-137):
- ``namehash("") = 0x00 * 32`` (the root node).
- ``namehash(label + "." + rest) = H(namehash(rest) + H(label))``.

Evaluated iteratively from the rightmost label so deep names do not hit the
recursion limit. The digest ``H`` is injectable; the default is Keccak-256.

INVARIANT: the encoder is total over ``str``. Policy checks live in
:mod:`enskit.domain.validation`, never here.
"""

from __future__ import annotations

from collections import OrderedDict

from enskit.domain.hashing import ZERO_HASH, Digest, keccak256, to_hex
from enskit.domain.names import split_labels


def labelhash(label: str, digest: Digest = keccak256) -> bytes:
    """Hash one label's UTF-8 bytes."""
    return digest(label.encode("utf-8"))


def labelhash_hex(label: str, digest: Digest = keccak256) -> str:
    return to_hex(labelhash(label, digest))


def namehash(name: str, digest: Digest = keccak256) -> bytes:
    """Compute the 32-byte node hash for *name*.

    Empty labels (``"a..b"``, ``".eth"``) are hashed as empty strings.

    Examples:
        >>> namehash("").hex() == "00" * 32
        True
    """
    node = ZERO_HASH
    for label in reversed(split_labels(name)):
        node = digest(node + labelhash(label, digest))
    return node


def namehash_hex(name: str, digest: Digest = keccak256) -> str:
    """Canonical text form of :func:`namehash`: ``0x`` + 64 lowercase hex chars."""
    return to_hex(namehash(name, digest))


def token_id(label: str, digest: Digest = keccak256) -> int:
    """ERC-721 token id the base registrar assigns to a second-level *label*."""
    return int.from_bytes(labelhash(label, digest), "big")


class NamehashCache:
    """Caller-owned LRU memo for :func:`namehash`.

    Not shared between callers and not thread-safe; construct one per
    worker if concurrent use is needed.
    """

    def __init__(self, digest: Digest = keccak256, maxsize: int = 1024) -> None:
        if maxsize < 1:
            msg = f"maxsize must be positive, got {maxsize}"
            raise ValueError(msg)
        self._digest = digest
        self._maxsize = maxsize
        self._entries: OrderedDict[str, bytes] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def namehash(self, name: str) -> bytes:
        cached = self._entries.get(name)
        if cached is not None:
            self._entries.move_to_end(name)
            self.hits += 1
            return cached
        self.misses += 1
        node = namehash(name, self._digest)
        self._entries[name] = node
        if len(self._entries) > self._maxsize:
            self._entries.popitem(last=False)
        return node

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0
