"""Renderers for the individual conversion specifiers."""

from __future__ import annotations

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"

_INT_BITS = 32
_POINTER_BITS = 64
_NULL_STRING = "(null)"
_NULL_POINTER = "0x0"


def _require_int(value: object, what: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"{what} requires an integer, not {type(value).__name__}")
    return value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _wrap_signed(value: int, bits: int) -> int:
    unsigned = _wrap_unsigned(value, bits)
    if unsigned >= 1 << (bits - 1):
        return unsigned - (1 << bits)
    return unsigned


def _to_base16(value: int, digits: str) -> str:
    """Render a non-negative integer with the given sixteen digit characters."""
    out = []
    while True:
        value, remainder = divmod(value, 16)
        out.append(digits[remainder])
        if value == 0:
            break
    return "".join(reversed(out))


def format_char(value: int | str) -> str:
    """Render a single character; integers are truncated to one byte."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a character conversion needs exactly one character")
        return value
    return chr(_wrap_unsigned(_require_int(value, "%c"), 8))


def format_decimal(value: int) -> str:
    """Render a signed decimal integer, wrapped to a 32-bit int."""
    return str(_wrap_signed(_require_int(value, "%d"), _INT_BITS))


def format_unsigned(value: int) -> str:
    """Render an unsigned decimal integer, wrapped to 32 bits."""
    return str(_wrap_unsigned(_require_int(value, "%u"), _INT_BITS))


def format_hex(value: int, uppercase: bool = False) -> str:
    """Render an unsigned 32-bit integer in hexadecimal."""
    number = _wrap_unsigned(_require_int(value, "%x"), _INT_BITS)
    return _to_base16(number, _HEX_UPPER if uppercase else _HEX_LOWER)


def format_pointer(address: int | None) -> str:
    """Render an address as 0x followed by lowercase hex; null is 0x0."""
    if address is None:
        return _NULL_POINTER
    number = _wrap_unsigned(_require_int(address, "%p"), _POINTER_BITS)
    if number == 0:
        return _NULL_POINTER
    return "0x" + _to_base16(number, _HEX_LOWER)


def format_string(value: str | None) -> str:
    """Render a string; None becomes "(null)"."""
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, not {type(value).__name__}")
    return value