"""Primitive writers: each puts one value on a text stream and returns its length."""

from __future__ import annotations

import operator
import sys
from typing import Any, TextIO

_UINT_MASK = 0xFFFFFFFF
_INT_SIGN = 0x80000000
_PTR_MASK = 0xFFFFFFFFFFFFFFFF

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"
POINTER_PREFIX = "0x"


def _emit(text: str, stream: TextIO | None) -> int:
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)


def _as_int32(value: Any) -> int:
    """Wrap an integer to the range of a signed 32-bit int."""
    n = operator.index(value) & _UINT_MASK
    return n - (1 << 32) if n & _INT_SIGN else n


def _as_uint32(value: Any) -> int:
    """Wrap an integer to the range of an unsigned 32-bit int."""
    return operator.index(value) & _UINT_MASK


def put_char(c: str | int, stream: TextIO | None = None) -> int:
    """Write a single character; an integer is taken as a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        char = c
    else:
        char = chr(operator.index(c) & 0xFF)
    return _emit(char, stream)


def put_str(s: str | None, stream: TextIO | None = None) -> int:
    """Write a string, or "(null)" for None."""
    if s is None:
        return _emit(NULL_STRING, stream)
    if not isinstance(s, str):
        raise TypeError(f"expected str or None, got {type(s).__name__}")
    return _emit(s, stream)


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write a signed 32-bit integer in decimal."""
    return _emit(str(_as_int32(n)), stream)


def put_hex(n: int, lowercase: bool = True, stream: TextIO | None = None) -> int:
    """Write an unsigned 32-bit integer in hexadecimal."""
    return _emit(format(_as_uint32(n), "x" if lowercase else "X"), stream)


def put_unsigned(n: int, stream: TextIO | None = None) -> int:
    """Write an unsigned 32-bit integer in decimal."""
    return _emit(str(_as_uint32(n)), stream)


def put_ptr(address: Any, stream: TextIO | None = None) -> int:
    """Write an address as 0x-prefixed lowercase hex, or "(nil)" for a null one.

    An integer is used as the address itself; None is null; any other object
    is represented by its identity.
    """
    if address is None:
        value = 0
    else:
        try:
            value = operator.index(address)
        except TypeError:
            value = id(address)
    value &= _PTR_MASK
    if value == 0:
        return _emit(NULL_POINTER, stream)
    return _emit(POINTER_PREFIX + format(value, "x"), stream)