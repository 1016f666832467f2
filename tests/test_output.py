import os
import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.libft.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def _capture(write):
    r, w = os.pipe()
    try:
        write(w)
    finally:
        os.close(w)
    chunks = []
    try:
        while True:
            chunk = os.read(r, 4096)
            if not chunk:
                break
            chunks.append(chunk)
    finally:
        os.close(r)
    return b"".join(chunks)


def test_putchar_string():
    assert _capture(lambda fd: putchar_fd("a", fd)) == b"a"


def test_putchar_code():
    assert _capture(lambda fd: putchar_fd(ord("z"), fd)) == b"z"


def test_putchar_rejects_long_string():
    r, w = os.pipe()
    try:
        with pytest.raises(ValueError):
            putchar_fd("ab", w)
    finally:
        os.close(r)
        os.close(w)


@given(st.text(alphabet=string.printable, max_size=200))
def test_putstr_round_trip(s):
    assert _capture(lambda fd: putstr_fd(s, fd)).decode() == s


def test_putstr_stops_at_nul():
    assert _capture(lambda fd: putstr_fd("ab\0cd", fd)) == b"ab"


def test_putstr_non_ascii():
    assert _capture(lambda fd: putstr_fd("é", fd)).decode() == "é"


@given(st.text(alphabet=string.ascii_letters, max_size=100))
def test_putendl_appends_newline(s):
    assert _capture(lambda fd: putendl_fd(s, fd)) == s.encode() + b"\n"


def test_putnbr_minimum():
    assert _capture(lambda fd: putnbr_fd(-2147483648, fd)) == b"-2147483648"


@given(st.integers(-(2**31), 2**31 - 1))
def test_putnbr_round_trip(n):
    assert int(_capture(lambda fd: putnbr_fd(n, fd))) == n