"""Dotted-name structure: splitting, composing, and normalization.

The root name is the empty string and has no labels. A name such as
``"a..b"`` has an empty middle label; these helpers keep it rather than
dropping it, so the encoder sees exactly what the caller wrote.
"""

from __future__ import annotations

LABEL_SEPARATOR = "."


def split_labels(name: str) -> list[str]:
    """Split *name* into labels, most-specific first.

    Examples:
        >>> split_labels("sub.example.eth")
        ['sub', 'example', 'eth']
        >>> split_labels("")
        []
        >>> split_labels("a..b")
        ['a', '', 'b']
    """
    if name == "":
        return []
    return name.split(LABEL_SEPARATOR)


def parent_name(name: str) -> str:
    """Drop the first label: ``"sub.example.eth"`` -> ``"example.eth"``."""
    _label, _sep, remainder = name.partition(LABEL_SEPARATOR)
    return remainder


def compose_name(label: str, suffix: str = "eth") -> str:
    """Append *suffix* to a single label to form a full name."""
    suffix = suffix.strip(LABEL_SEPARATOR)
    if not suffix:
        return label
    return f"{label}{LABEL_SEPARATOR}{suffix}"


def normalize_name(name: str) -> str:
    """Trim whitespace, drop one trailing root dot, and lowercase.

    Only applied on request. ``namehash`` hashes its input verbatim.
    """
    text = name.strip()
    if text.endswith(LABEL_SEPARATOR):
        text = text[:-1]
    return text.lower()
