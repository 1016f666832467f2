"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACE = " \t\n\v\f\r"


def _wrap32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Read a leading decimal integer, after optional blanks and one sign.

    Two sign characters in a row give 0, as does text with no leading
    digits. The result wraps to 32 bits like a C int.
    """
    i = 0
    while i < len(text) and text[i] in _SPACE:
        i += 1
    sign = 1
    while i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        if i + 1 < len(text) and text[i + 1] in "+-":
            return 0
        i += 1
    start = i
    while i < len(text) and "0" <= text[i] <= "9":
        i += 1
    digits = text[start:i]
    return _wrap32(sign * int(digits)) if digits else 0


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)