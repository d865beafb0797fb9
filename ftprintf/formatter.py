"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import io
import re
import sys
from typing import Any, Callable, TextIO

from ftprintf.output import (
    put_char,
    put_hex,
    put_nbr,
    put_ptr,
    put_str,
    put_unsigned,
)

SPECIFIERS = "cspdiuxX%"

_FORMAT_PIECE = re.compile(r"%([cspdiuxX%])|(.)", re.DOTALL)

_CONVERSIONS: dict[str, Callable[[Any, TextIO], int]] = {
    "c": put_char,
    "d": put_nbr,
    "i": put_nbr,
    "s": put_str,
    "u": put_unsigned,
    "x": lambda value, stream: put_hex(value, True, stream),
    "X": lambda value, stream: put_hex(value, False, stream),
    "p": put_ptr,
}


def ft_printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Format ``args`` according to ``fmt``, write the result and return its length.

    A '%' not followed by a known specifier is written as is, as is the
    character after it. Too few arguments raise TypeError; extra ones are
    ignored. Write failures propagate from the stream.
    """
    target = sys.stdout if stream is None else stream
    values = iter(args)
    total = 0
    for match in _FORMAT_PIECE.finditer(fmt):
        spec, literal = match.groups()
        if spec is None:
            total += put_char(literal, target)
        elif spec == "%":
            total += put_char("%", target)
        else:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            total += _CONVERSIONS[spec](value, target)
    return total


def sprintf(fmt: str, *args: Any) -> str:
    """Return what ``ft_printf`` would write for the same arguments."""
    buffer = io.StringIO()
    ft_printf(fmt, *args, stream=buffer)
    return buffer.getvalue()