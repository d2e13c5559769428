"""Zero-byte counter for spotting files damaged by filesystem checkers."""

__version__ = "1.0"
