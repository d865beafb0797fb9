"""Side-by-side run of ft_printf against Python's own formatting."""

from __future__ import annotations

import argparse
import io
import sys
from typing import Any, TextIO

from ftprintf.formatter import ft_printf
from ftprintf.output import NULL_POINTER, put_char

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def _pointer_text(obj: Any) -> str:
    return NULL_POINTER if obj is None else "0x%x" % id(obj)


def _heading(title: str, out: TextIO) -> None:
    out.write(title + "\n")


def _write_or_fail(stream: TextIO, fmt: str, args: tuple[Any, ...]) -> int:
    try:
        return ft_printf(fmt, *args, stream=stream)
    except (OSError, ValueError):
        return -1


def _reference_or_fail(stream: TextIO, text: str) -> int:
    try:
        stream.write(text)
    except (OSError, ValueError):
        return -1
    return len(text)


def main(argv: list[str] | None = None) -> int:
    """Print each conversion with ft_printf, then the expected text."""
    parser = argparse.ArgumentParser(
        description="Compare ft_printf output with Python's formatting."
    )
    parser.parse_args(argv)
    out = sys.stdout

    _heading("STRING TEST:", out)
    s = "hello"
    ft_printf("string 1: %s\n", s, stream=out)
    out.write("string 2: %s\n" % s)

    _heading("CHAR TEST:", out)
    k = "w"
    ft_printf("char 1: %c\n", k, stream=out)
    out.write("char 2: %c\n" % k)

    _heading("INT TEST:", out)
    numbers = (-42, 0, 42, INT_MAX, INT_MIN)
    ft_printf("num 1: %d, %d, %d, %d, %d\n", *numbers, stream=out)
    out.write("num 2: %d, %d, %d, %d, %d\n" % numbers)

    _heading("POINTER TEST:", out)
    x = [5]
    pointers = (x, "hi", None)
    ft_printf("ptr 1:%p %p %p\n", *pointers, stream=out)
    out.write("ptr 2:%s %s %s\n" % tuple(_pointer_text(p) for p in pointers))

    _heading("HEX TEST:", out)
    hex_num = 26475
    ft_printf("print hex 1 %x and %X\n", hex_num, hex_num, stream=out)
    out.write("print hex 2 %x and %X\n" % (hex_num, hex_num))

    _heading("UNSIGNED TEST:", out)
    n = 4252
    ft_printf("print unsigned 1 %u\n", n, stream=out)
    out.write("print unsigned 2 %u\n" % n)

    _heading("INVALID SPEC TEST:", out)
    ft_printf("percent 1 %\n", stream=out)
    ft_printf("percent 1 %%\n", stream=out)
    out.write("percent 2 %%\n" % ())
    invalid_count = ft_printf("2abc %z\n", stream=out)
    out.write(f"{invalid_count}\n")

    _heading("TOTAL CHARS TEST", out)
    words = ("one", "two", "3", 42)
    total_mine = ft_printf("1%s,%s,%s,%d\n", *words, stream=out)
    put_char("\n", out)
    total_reference = _reference_or_fail(out, "2%s,%s,%s,%d\n" % words)
    out.write(f"total: {total_mine}\n")
    out.write(f"total2: {total_reference}\n")

    _heading("WRITE ERROR TEST", out)
    closed = io.StringIO()
    closed.close()
    cases: list[tuple[str, tuple[Any, ...], str]] = [
        ("%c", ("A",), "A"),
        ("%d", (1,), "1"),
        ("%u", (425,), "425"),
        ("%s", ("s",), "s"),
        ("%p", (x,), _pointer_text(x)),
        ("%x", (0,), "0"),
        ("%%", (), "%"),
        ("Hello", (), "Hello"),
    ]
    results = [
        (_write_or_fail(closed, fmt, args), _reference_or_fail(closed, text))
        for fmt, args, text in cases
    ]
    for mine, reference in results:
        out.write(f"1{mine}\n")
        out.write(f"2{reference}\n")

    out.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())