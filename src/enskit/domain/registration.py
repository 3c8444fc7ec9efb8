"""Offline registration prep: rental durations and commitment secrets.

The commit/reveal exchange itself happens in the registrar controller;
these helpers only produce the values a caller hands to it.
"""

from __future__ import annotations

import secrets

SECONDS_PER_YEAR = 365 * 24 * 60 * 60
SECRET_BYTES = 32


def duration_seconds(years: int) -> int:
    """Rental duration in seconds for *years* (365-day years)."""
    if isinstance(years, bool) or not isinstance(years, int) or years < 1:
        msg = f"years must be a positive integer, got {years!r}"
        raise ValueError(msg)
    return years * SECONDS_PER_YEAR


def describe_duration(years: int) -> str:
    return f"{years} year{'s' if years != 1 else ''}"


def generate_secret() -> str:
    """Random 32-byte commitment secret as ``0x``-prefixed hex."""
    return "0x" + secrets.token_hex(SECRET_BYTES)
