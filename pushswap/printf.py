"""A small formatted-output routine with the conversions c s p d i u x X %.

Integers follow C's 32-bit conventions: %d and %i read a signed int, while
%u, %x and %X read an unsigned int. Values outside those ranges wrap the way
a C int would.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, Union

DIGITS = "0123456789abcdef"
NULL_STRING = "(null)"
NULL_POINTER = "(nil)"
POINTER_PREFIX = "0x"

_INT_MIN = -(2**31)
_UINT_RANGE = 2**32

Char = Union[int, str]


def _to_int32(n: int) -> int:
    return (n - _INT_MIN) % _UINT_RANGE + _INT_MIN


def _to_uint32(n: int) -> int:
    return n % _UINT_RANGE


def itoa_base(value: int, base: int) -> str:
    """Digits of a non-negative value in a base from 2 to 16, lower case."""
    if not 2 <= base <= len(DIGITS):
        raise ValueError(f"base must be between 2 and {len(DIGITS)}, got {base}")
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")
    if value == 0:
        return DIGITS[0]
    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(DIGITS[remainder])
    return "".join(reversed(digits))


def format_char(c: Char) -> str:
    """One character; a code is reduced to its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def format_string(s: Optional[str]) -> str:
    """The string itself, or a marker for a missing string."""
    return NULL_STRING if s is None else s


def format_pointer(address: Optional[int]) -> str:
    """An address in hexadecimal with its prefix, or a marker for null."""
    if not address:
        return NULL_POINTER
    return POINTER_PREFIX + itoa_base(address, 16)


def format_int(n: int) -> str:
    """Decimal form of n read as a signed 32-bit int."""
    return str(_to_int32(n))


def format_unsigned(n: int) -> str:
    """Decimal form of n read as an unsigned 32-bit int."""
    return str(_to_uint32(n))


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal form of n read as an unsigned 32-bit int."""
    text = itoa_base(_to_uint32(n), 16)
    return text.upper() if upper else text


_CONVERSIONS = {
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": lambda n: format_hex(n, upper=False),
    "X": lambda n: format_hex(n, upper=True),
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            raise ValueError(f"unknown conversion '%{spec}'")
        try:
            arg = next(remaining)
        except StopIteration:
            raise ValueError(f"no argument left for '%{spec}'") from None
        yield convert(arg)


def render(fmt: str, *args: Any) -> str:
    """The text that fmt produces with args."""
    if fmt is None:
        raise ValueError("format must not be None")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)