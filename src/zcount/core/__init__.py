"""Counting and classification of zero bytes."""
