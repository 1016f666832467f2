"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from typing import Iterable

from pushswap.libft.numbers import INT_MAX, INT_MIN
from pushswap.libft.text import split

_MAX_DIGITS = len(str(INT_MAX))


class InputError(ValueError):
    """The arguments do not describe a list of 32-bit integers."""


def is_valid_int(text: str) -> bool:
    """True for an optional sign followed by decimal digits within int range."""
    negative = text.startswith("-")
    body = text[1:] if text[:1] in ("+", "-") else text
    if not body or not all("0" <= ch <= "9" for ch in body):
        return False
    significant = body.lstrip("0") or "0"
    if len(significant) > _MAX_DIGITS:
        return False
    value = -int(significant) if negative else int(significant)
    return INT_MIN <= value <= INT_MAX


def _parse_value(token: str) -> int:
    if not is_valid_int(token):
        raise InputError(f"not a valid integer: {token!r}")
    return int(token)


def _parse_single(arg: str) -> list[int]:
    if not arg:
        raise InputError("empty argument")
    return [_parse_value(token) for token in split(arg, " ")]


def parse_args(args: Iterable[str]) -> list[int]:
    """The integers named by the arguments, in order.

    A single argument may hold several numbers separated by spaces; several
    arguments must each hold exactly one number.
    """
    args = list(args)
    if not args:
        return []
    if len(args) == 1:
        return _parse_single(args[0])
    return [_parse_value(arg) for arg in args]