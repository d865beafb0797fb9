# ftprintf

A small, predictable printf-style formatter. It writes to any text stream
(standard output by default) and returns the number of characters written.

## Supported conversions

| Specifier | Meaning                                                              |
|-----------|----------------------------------------------------------------------|
| `%c`      | a single character; an integer is taken as a byte value              |
| `%s`      | a string; `None` prints `(null)`                                     |
| `%p`      | an address as `0x...` in lowercase hex; `None` or 0 prints `(nil)`; an object that is not an integer is shown by its identity |
| `%d` `%i` | an integer wrapped to signed 32 bits                                 |
| `%u`      | an integer wrapped to unsigned 32 bits                               |
| `%x` `%X` | an integer wrapped to unsigned 32 bits, in lower/upper hex           |
| `%%`      | a literal percent sign                                               |

A `%` followed by anything else (or at the end of the format) is written as
it is, and the character after it is then handled as ordinary text.

Too few arguments raise `TypeError`; extra arguments are ignored. Errors
raised by the stream while writing (for example on a closed stream) are not
caught.

## Usage

```python
import io
from ftprintf.formatter import ft_printf, sprintf

count = ft_printf("Magic %s is %d\n", "number", 42)   # writes to stdout, returns 19

text = sprintf("%x and %X", 26475, 26475)             # '676b and 676B'

buffer = io.StringIO()
ft_printf("%u%%", 4252, stream=buffer)
buffer.getvalue()                                      # '4252%'
```

The building blocks are in `ftprintf.output`: `put_char`, `put_str`,
`put_nbr`, `put_hex`, `put_unsigned` and `put_ptr`. Each writes one value to
a stream (standard output when none is given) and returns how many characters
it wrote.

`ftprintf.exam` has `exam_printf`, a smaller variant that converts only
`%s`, `%d` and `%x`. There, any other `%` is written alone and the character
right after it is dropped.

## Commands

```
ftprintf-demo    # prints each conversion with ft_printf next to Python's % formatting
ftprintf-exam    # prints the exam_printf examples next to Python's % formatting
```

## Limitations

There are no flags, field widths, precisions or length modifiers, and no
floating-point conversions.

## Running the tests

```
pip install ".[test]"
pytest
```