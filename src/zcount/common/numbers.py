"""Parsing of unsigned integer literals given on the command line."""
from __future__ import annotations

import re

from .errors import ErrorCode, ZcountError
from .limits import ULONG_MAX

# Same prefixes strtoul() accepts with base 0: 0x/0X hex, leading 0 octal, else decimal.
_LITERAL_PATTERN = re.compile(
    r"""
    \s*\+?
    (?:
        (?P<hex>0[xX][0-9a-fA-F]+)
      | (?P<oct>0[0-7]*)
      | (?P<dec>[1-9][0-9]*)
    )
    """,
    re.VERBOSE,
)


def parse_unsigned(text: str) -> int:
    """Parse ``text`` as a non-negative integer literal.

    Values beyond ``ULONG_MAX`` saturate there. An empty argument reads as 0,
    as strtoul() leaves nothing unconsumed in it. Raises ``ZcountError`` with
    ``USAGE_ERROR`` when the literal does not cover the whole argument.
    """

    if text == "":
        return 0
    match = _LITERAL_PATTERN.fullmatch(text)
    if match is None:
        raise ZcountError(
            ErrorCode.USAGE_ERROR,
            f"'{text}' is not a non-negative integer",
            context={"argument": text},
        )
    if match.group("hex"):
        value = int(match.group("hex"), 16)
    elif match.group("oct"):
        value = int(match.group("oct"), 8)
    else:
        value = int(match.group("dec"), 10)
    return min(value, ULONG_MAX)
