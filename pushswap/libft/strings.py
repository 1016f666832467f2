"""Null-terminated string routines over Python strings.

A string ends at its first NUL character, if it has one. Functions that
locate a character return its offset, or None when it is absent. The
bounded copy and concatenation return the new string together with the
length they tried to create.
"""

from __future__ import annotations

from typing import Optional, Union

Char = Union[int, str]

NUL = "\0"


def _cstr(s: str) -> str:
    end = s.find(NUL)
    return s if end < 0 else s[:end]


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def strlen(s: str) -> int:
    """Number of characters before the terminator."""
    return len(_cstr(s))


def strchr(s: str, c: Char) -> Optional[int]:
    """Offset of the first c; the terminator itself can be found."""
    s, ch = _cstr(s), _char(c)
    if ch == NUL:
        return len(s)
    offset = s.find(ch)
    return None if offset < 0 else offset


def strrchr(s: str, c: Char) -> Optional[int]:
    """Offset of the last c; the terminator itself can be found."""
    s, ch = _cstr(s), _char(c)
    if ch == NUL:
        return len(s)
    offset = s.rfind(ch)
    return None if offset < 0 else offset


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the difference of the first that differ."""
    s1, s2 = _cstr(s1), _cstr(s2)
    for i in range(n):
        left = ord(s1[i]) if i < len(s1) else 0
        right = ord(s2[i]) if i < len(s2) else 0
        if left != right:
            return left - right
        if left == 0:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Offset of little lying wholly within the first length characters of big."""
    big, little = _cstr(big), _cstr(little)
    if not little:
        return 0
    offset = big[: max(length, 0)].find(little)
    return None if offset < 0 else offset


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the resulting string and the length of src. With size 0 the
    destination is left as it was.
    """
    src = _cstr(src)
    if size <= 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters.

    Returns the resulting string and the length it tried to create; when dst
    already fills the buffer that length is size plus the length of src.
    """
    dst, src = _cstr(dst), _cstr(src)
    dst_len = min(len(dst), max(size, 0))
    if size <= dst_len:
        return dst, size + len(src)
    return dst + src[: size - 1 - dst_len], dst_len + len(src)


def strdup(s: str) -> str:
    """A copy of s up to its terminator."""
    return _cstr(s)