"""Chunked zero-byte counting with an optional early-stop cap."""
from __future__ import annotations

from typing import BinaryIO

from zcount.common.limits import ULONG_MAX

DEFAULT_CHUNK_SIZE = 65_536


def count_zero_bytes(source: BinaryIO, cap: int = 0, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Count 0x00 bytes in ``source`` until EOF or until ``cap`` of them were seen.

    A ``cap`` of 0 means no limit. Reads never extend past the byte that
    brings the count to ``cap``, so the rest of the stream stays unread. The
    stream is neither closed nor rewound.
    """

    if cap < 0:
        raise ValueError(f"cap must be non-negative, got {cap}")
    limit = ULONG_MAX if cap == 0 else min(cap, ULONG_MAX)
    chunk_size = max(1, chunk_size)

    zeros = 0
    while zeros < limit:
        # every byte of a chunk may be zero, so never ask for more than we may still count
        chunk = source.read(min(chunk_size, limit - zeros))
        if not chunk:
            break
        zeros += chunk.count(0)
    return zeros
