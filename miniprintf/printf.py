"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from miniprintf.conversions import (
    format_char,
    format_decimal,
    format_hex,
    format_pointer,
    format_string,
    format_unsigned,
)

_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "d": format_decimal,
    "i": format_decimal,
    "s": format_string,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
    "p": format_pointer,
    "u": format_unsigned,
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            yield "%"
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            # Unknown specifiers print nothing and consume no argument.
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        yield converter(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return the formatted string."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted string to stream (stdout by default) and return its length."""
    text = sprintf(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)