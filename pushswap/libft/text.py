"""String building and splitting: substrings, joins, trims, splits, maps.

Strings end at their first NUL character, if they have one. A separator may
be given as a one-character string or as a character code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, MutableSequence, Optional, Union

from pushswap.libft.strings import strdup

Char = Union[int, str]

NUL = "\0"


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from offset start; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    s = strdup(s)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """s1 followed by s2."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: str) -> str:
    """s without the characters of charset at either end."""
    return strdup(s).strip(strdup(charset))


def _words(s: str, sep: Char) -> list[str]:
    return [word for word in strdup(s).split(_char(sep)) if word]


def count_words(s: str, sep: Char) -> int:
    """Number of non-empty runs of s between separators."""
    return len(_words(s, sep))


def split(s: str, sep: Char) -> list[str]:
    """The non-empty runs of s between separators, in order."""
    return _words(s, sep)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string of func(offset, character) for each character of s."""
    return "".join(func(i, ch) for i, ch in enumerate(strdup(s)))


def striteri(s: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call func(offset, character) on each character up to a NUL, in place.

    Where func returns a character it replaces the one at that offset.
    """
    for i, ch in enumerate(s):
        if ch == NUL:
            break
        result = func(i, ch)
        if result is not None:
            s[i] = result


@dataclass
class ListNode:
    """A link of a singly linked list."""

    content: Any
    next: Optional["ListNode"] = None


def lstnew(content: Any) -> ListNode:
    """A single list node holding content and linking to nothing."""
    return ListNode(content)