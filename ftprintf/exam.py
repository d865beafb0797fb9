"""The reduced printf: only %s, %d and %x are converted."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Any, Callable, TextIO

from ftprintf.output import put_char, put_hex, put_nbr, put_str

_FORMAT_PIECE = re.compile(r"%([sdx])|%(.?)|(.)", re.DOTALL)

_CONVERSIONS: dict[str, Callable[[Any, TextIO], int]] = {
    "s": put_str,
    "d": put_nbr,
    "x": lambda value, stream: put_hex(value, True, stream),
}


def exam_printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write ``fmt`` with %s, %d and %x replaced by ``args``; return the length written.

    Any other '%' is written alone and the character after it is dropped.
    Too few arguments raise TypeError; extra ones are ignored.
    """
    target = sys.stdout if stream is None else stream
    values = iter(args)
    total = 0
    for match in _FORMAT_PIECE.finditer(fmt):
        spec, _dropped, literal = match.groups()
        if spec is not None:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            total += _CONVERSIONS[spec](value, target)
        elif literal is not None:
            total += put_char(literal, target)
        else:
            total += put_char("%", target)
    return total


def main(argv: list[str] | None = None) -> int:
    """Print a few lines with exam_printf next to the built-in formatting."""
    parser = argparse.ArgumentParser(
        description="Compare exam_printf with Python's own formatting."
    )
    parser.parse_args(argv)
    out = sys.stdout
    samples: list[tuple[str, tuple[Any, ...]]] = [
        ("Hello my string %s\n", ("toto",)),
        ("Magic %s is %d\n", ("number", 42)),
        ("Hexadecimal for %d is %x\n", (42, 42)),
    ]
    for fmt, args in samples:
        exam_printf(fmt, *args, stream=out)
        out.write(fmt % args)
    out.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())