"""Label validation — client-side pre-check before registration.

Rules run in a fixed order and every rule is evaluated, so a caller gets the
complete list of problems at once:

1. length within ``[min_length, max_length]``, counted in UTF-16 code units
   (a character outside the Basic Multilingual Plane counts as two)
2. characters limited to ``a-z``, ``0-9``, and ``-``
3. no consecutive hyphens
4. alphanumeric (ASCII, either case) first and last character
5. not a reserved word (case-insensitive)

The boundary rule accepts uppercase letters. A lowercase-only boundary check
reports ``"ETH"`` three times (character set, boundary, reserved). Here
uppercase is reported once, by the character-set rule, so ``"ETH"`` yields
two violations.

Invalid input is a normal result, never an exception. The registrar contract
remains the final authority on what can be registered.
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterable

from pydantic import BaseModel, Field, model_validator

DEFAULT_RESERVED: frozenset[str] = frozenset({"eth", "xyz", "com", "org", "net", "io", "app"})

MSG_NOT_A_STRING = "Name must be a string"
MSG_CHARSET = "Name can only contain lowercase letters, numbers, and hyphens"
MSG_CONSECUTIVE_HYPHENS = "Name cannot contain consecutive hyphens"
MSG_BOUNDARY = "Name must start and end with alphanumeric character"
MSG_RESERVED = "This name is reserved"

_CHARSET_RE = re.compile(r"[a-z0-9-]+")
_ALNUM = frozenset(string.ascii_letters + string.digits)


def length_message(min_length: int, max_length: int) -> str:
    return f"Name must be between {min_length} and {max_length} characters"


def label_length(label: str) -> int:
    """Length of *label* in UTF-16 code units.

    Examples:
        >>> label_length("abc")
        3
        >>> label_length("\\U0001F600")
        2
    """
    return len(label.encode("utf-16-le", "surrogatepass")) // 2


class LabelPolicy(BaseModel):
    """Registration policy applied by :func:`validate_label`.

    Reserved words are product policy rather than protocol, so they are
    configured here instead of baked into the rule functions.
    """

    model_config = {"frozen": True}

    min_length: int = Field(default=3, ge=0)
    max_length: int = Field(default=63, ge=0)
    reserved: frozenset[str] = DEFAULT_RESERVED

    @model_validator(mode="after")
    def _check_bounds(self) -> LabelPolicy:
        if self.min_length > self.max_length:
            msg = f"min_length ({self.min_length}) exceeds max_length ({self.max_length})"
            raise ValueError(msg)
        return self

    def is_reserved(self, label: str) -> bool:
        lowered = label.lower()
        return any(lowered == word.lower() for word in self.reserved)


class ValidationResult(BaseModel):
    """Outcome of validating one label. ``valid`` iff ``errors`` is empty."""

    model_config = {"frozen": True}

    valid: bool
    errors: tuple[str, ...] = ()

    @classmethod
    def from_errors(cls, errors: Iterable[str]) -> ValidationResult:
        collected = tuple(errors)
        return cls(valid=not collected, errors=collected)


def validate_label(label: object, policy: LabelPolicy | None = None) -> ValidationResult:
    """Check *label* against every rule in *policy*.

    Examples:
        >>> validate_label("abc").valid
        True
        >>> validate_label("ab").errors
        ('Name must be between 3 and 63 characters',)
    """
    if not isinstance(label, str):
        return ValidationResult.from_errors([MSG_NOT_A_STRING])

    policy = policy or LabelPolicy()
    errors: list[str] = []

    if not policy.min_length <= label_length(label) <= policy.max_length:
        errors.append(length_message(policy.min_length, policy.max_length))

    if not _CHARSET_RE.fullmatch(label):
        errors.append(MSG_CHARSET)

    if "--" in label:
        errors.append(MSG_CONSECUTIVE_HYPHENS)

    if not label or label[0] not in _ALNUM or label[-1] not in _ALNUM:
        errors.append(MSG_BOUNDARY)

    if policy.is_reserved(label):
        errors.append(MSG_RESERVED)

    return ValidationResult.from_errors(errors)


def validate_labels(
    labels: Iterable[object], policy: LabelPolicy | None = None
) -> list[ValidationResult]:
    """Validate each label independently, preserving input order."""
    policy = policy or LabelPolicy()
    return [validate_label(label, policy) for label in labels]
