"""Numeric bounds mirroring the C integer types the tool has always used."""
from __future__ import annotations

INT_MAX = 2**31 - 1
ULONG_MAX = 2**64 - 1


def saturating_increment(value: int, ceiling: int = INT_MAX) -> int:
    """Return ``value + 1`` unless that would pass ``ceiling``."""

    return value + 1 if value < ceiling else value
