from __future__ import annotations

import pytest

from zcount.common.errors import ErrorCode, ZcountError
from zcount.common.limits import ULONG_MAX
from zcount.common.numbers import parse_unsigned


@pytest.mark.parametrize(
    ("text", "expected"),
    [("10", 10), ("0", 0), ("010", 8), ("0x10", 16), ("0XfF", 255), ("+5", 5), ("  7", 7)],
)
def test_accepts_c_style_literals(text: str, expected: int) -> None:
    assert parse_unsigned(text) == expected


@pytest.mark.parametrize("text", ["abc", "12abc", "08", "0x", "-1", "+", "  ", "5 ", "1.5"])
def test_rejects_partial_or_invalid_literals(text: str) -> None:
    with pytest.raises(ZcountError) as exc:
        parse_unsigned(text)
    assert exc.value.code == ErrorCode.USAGE_ERROR
    assert f"'{text}' is not a non-negative integer" in exc.value.args[0]


def test_huge_values_saturate() -> None:
    assert parse_unsigned("9" * 40) == ULONG_MAX


def test_empty_argument_reads_as_zero() -> None:
    assert parse_unsigned("") == 0
