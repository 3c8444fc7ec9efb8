"""NameService — namehash, validation, and registration-prep operations.

Wraps the pure domain functions in the ServiceResult contract. Label
policy, the name suffix, and the default network come from settings.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from enskit.domain.contenthash import (
    ContentHashError,
    decode_content_hash,
    encode_content_hash,
)
from enskit.domain.names import compose_name, normalize_name, split_labels
from enskit.domain.namehash import labelhash_hex, namehash_hex, token_id
from enskit.domain.networks import DEFAULT_NETWORK, contract_addresses, resolve_network
from enskit.domain.registration import (
    describe_duration,
    duration_seconds,
    generate_secret,
)
from enskit.domain.validation import validate_label
from enskit.services.base import BaseService

if TYPE_CHECKING:
    from enskit.config.settings import EnsSettings
    from enskit.services.result import ServiceResult

logger = logging.getLogger(__name__)


class NameService(BaseService):
    """Offline ENS name operations."""

    def __init__(self, settings: EnsSettings) -> None:
        super().__init__(settings)
        self._policy = settings.validation.to_policy()
        self._suffix = settings.names.suffix

    # ── Hashing ───────────────────────────────────────────────────────

    def namehash(self, name: str, *, normalize: bool = False) -> ServiceResult:
        """Compute the node hash for a full dotted *name*."""
        target = normalize_name(name) if normalize else name
        node = namehash_hex(target)
        logger.debug("namehash computed for %r: %s", target, node)
        return self._ok(
            "namehash",
            {"name": target, "node": node, "labels": split_labels(target)},
        )

    def labelhash(self, label: str) -> ServiceResult:
        """Hash a single label and derive its registrar token id."""
        return self._ok(
            "labelhash",
            {
                "label": label,
                "labelhash": labelhash_hex(label),
                "token_id": str(token_id(label)),
            },
        )

    # ── Validation ────────────────────────────────────────────────────

    def validate(self, label: str) -> ServiceResult:
        """Check one label against the configured policy.

        An invalid label yields ``ok=False`` with code ``INVALID_LABEL``
        and every violated rule in ``detail["errors"]``.
        """
        result = validate_label(label, self._policy)
        logger.debug("label %r validated: valid=%s", label, result.valid)
        if not result.valid:
            return self._invalid_label("validate", label, list(result.errors))
        return self._ok("validate", {"label": label, "valid": True, "errors": []})

    def validate_many(self, labels: Sequence[str]) -> ServiceResult:
        """Validate several labels; invalid ones are reported, not failed."""
        items: list[dict[str, Any]] = []
        for label in labels:
            result = validate_label(label, self._policy)
            items.append({"label": label, "valid": result.valid, "errors": list(result.errors)})
        valid_count = sum(1 for item in items if item["valid"])
        return self._ok(
            "validate_batch",
            {
                "items": items,
                "valid_count": valid_count,
                "invalid_count": len(items) - valid_count,
            },
        )

    # ── Registration prep ─────────────────────────────────────────────

    def prepare(self, label: str, *, years: int = 1) -> ServiceResult:
        """Run the offline pre-registration pipeline for *label*.

        validate -> compose full name -> namehash / labelhash / token id,
        plus rental duration and a fresh commitment secret.
        """
        op = "prepare"
        result = validate_label(label, self._policy)
        if not result.valid:
            return self._invalid_label(op, label, list(result.errors))

        try:
            seconds = duration_seconds(years)
        except ValueError as exc:
            return self._fail(op, "INVALID_DURATION", str(exc), {"years": years})

        name = compose_name(label, self._suffix)
        logger.debug("prepared registration for %r (%d years)", name, years)
        return self._ok(
            op,
            {
                "label": label,
                "name": name,
                "node": namehash_hex(name),
                "labelhash": labelhash_hex(label),
                "token_id": str(token_id(label)),
                "duration": describe_duration(years),
                "duration_seconds": seconds,
                "secret": generate_secret(),
            },
        )

    # ── Content hash ──────────────────────────────────────────────────

    def encode_content_hash(self, ipfs_hash: str) -> ServiceResult:
        op = "contenthash_encode"
        try:
            encoded = encode_content_hash(ipfs_hash)
        except ContentHashError as exc:
            return self._fail(op, "INVALID_CONTENT_HASH", str(exc), {"value": ipfs_hash})
        return self._ok(op, {"value": ipfs_hash, "content_hash": encoded})

    def decode_content_hash(self, content_hash: str) -> ServiceResult:
        decoded = decode_content_hash(content_hash)
        warnings: list[str] = []
        if decoded == content_hash:
            warnings.append("Not an IPFS content hash; returned unchanged")
        return self._ok(
            "contenthash_decode",
            {"content_hash": content_hash, "value": decoded},
            warnings=warnings,
        )

    # ── Networks ──────────────────────────────────────────────────────

    def addresses(self, network: str | None = None) -> ServiceResult:
        """Contract addresses for *network* (default from settings)."""
        requested = network or self._settings.network.default
        resolved = resolve_network(requested)
        warnings: list[str] = []
        if resolved is None:
            logger.warning("unknown network %r, using %s", requested, DEFAULT_NETWORK)
            warnings.append(f"Unknown network '{requested}', using {DEFAULT_NETWORK}")
            resolved = DEFAULT_NETWORK
        data: dict[str, Any] = {"network": str(resolved)}
        data.update(contract_addresses(resolved).model_dump())
        return self._ok("addresses", data, warnings=warnings)

    # ── Helpers ───────────────────────────────────────────────────────

    def _invalid_label(self, op: str, label: str, errors: list[str]) -> ServiceResult:
        return self._fail(
            op,
            "INVALID_LABEL",
            f"Invalid label '{label}': {errors[0]}"
            + (f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""),
            {"label": label, "errors": errors},
        )
