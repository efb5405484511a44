"""Conversion between decimal text and integers."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_LIMIT = 922337203685477580


def _wrap32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's ``atoi`` does.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. A value past the 64-bit range gives -1 when
    positive and 0 when negative; otherwise the result wraps to 32 bits.
    """
    i = 0
    while i < len(text) and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < len(text) and "0" <= text[i] <= "9":
        digit = ord(text[i]) - ord("0")
        if result > _LIMIT or (result == _LIMIT and digit > 7):
            return -1 if sign == 1 else 0
        result = result * 10 + digit
        i += 1
    return _wrap32(result * sign)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)