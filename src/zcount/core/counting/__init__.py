"""Bounded zero-byte counting over binary streams."""

from .zero_counter import DEFAULT_CHUNK_SIZE, count_zero_bytes

__all__ = ["DEFAULT_CHUNK_SIZE", "count_zero_bytes"]
