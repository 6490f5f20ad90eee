# miniprintf

A small `printf` with no dependencies and a fixed set of conversions. It
formats text. `sprintf` returns the text, and `printf` writes it to a stream
and returns the number of characters written.

## Installation

```
pip install miniprintf
```

## Supported conversions

| Spec      | Argument                          | Output                                         |
|-----------|-----------------------------------|------------------------------------------------|
| `%c`      | a one-character string, or an int | that character; an int is reduced to one byte  |
| `%s`      | a string or `None`                | the string, or `(null)` for `None`             |
| `%d` `%i` | an int                            | signed decimal, wrapped to 32 bits             |
| `%u`      | an int                            | unsigned decimal, wrapped to 32 bits           |
| `%x` `%X` | an int                            | lowercase or uppercase hex, 32 bits, no prefix |
| `%p`      | an int or `None`                  | `0x` and lowercase hex (64 bits); `0x0` for zero or `None` |
| `%%`      | none                              | a literal `%`                                  |

Integers wrap the way C integers of those sizes do. For example, `%d` of
`2**31` gives `-2147483648`, and `%u` or `%x` of `-1` gives `4294967295` or
`ffffffff`.

There are no flags, widths or precisions. An unknown specifier produces
nothing and takes no argument. A lone `%` at the end of the format produces
nothing.

## Errors

- An argument of the wrong type raises `TypeError`. Examples are a non-integer
  for `%d`, `%u`, `%x`, `%X` or `%p`, and a non-string other than `None` for
  `%s`.
- `%c` with a string that is not exactly one character raises `ValueError`.
- Too few arguments for the format raises `TypeError`. Any extra arguments are
  ignored.

## Usage

```python
from miniprintf.printf import printf, sprintf

text = sprintf("%s has %d items (%x)", "cart", 42, 255)
# 'cart has 42 items (ff)'

count = printf("pointer: %p\n", 0xDEADBEEF)
# writes "pointer: 0xdeadbeef\n" to standard output; count == 20
```

By default `printf(fmt, *args, stream=None)` writes to `sys.stdout`. Pass
`stream=` to write to any text stream instead.

The individual conversions are in `miniprintf.conversions`:
`format_char(value)`, `format_string(value)`, `format_decimal(value)`,
`format_unsigned(value)`, `format_hex(value, uppercase=False)` and
`format_pointer(address)`. Each one returns the rendered string.

## What it does not do

This is a library only. It has no command-line tool. It supports only the
conversions listed above, with no field widths, padding, precision or length
modifiers.