"""Formatted output with a small, fixed set of conversions."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, TextIO

_INT_BITS = 32
_POINTER_BITS = 64


def _as_signed(value: Any) -> int:
    span = 1 << _INT_BITS
    half = span >> 1
    return (int(value) + half) % span - half


def _as_unsigned(value: Any) -> int:
    return int(value) % (1 << _INT_BITS)


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _conv_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _conv_pointer(value: Any) -> str:
    address = 0 if value is None else int(value) % (1 << _POINTER_BITS)
    return "(nil)" if address == 0 else f"0x{address:x}"


def _conv_decimal(value: Any) -> str:
    return str(_as_signed(value))


def _conv_unsigned(value: Any) -> str:
    return str(_as_unsigned(value))


def _conv_hex_lower(value: Any) -> str:
    return f"{_as_unsigned(value):x}"


def _conv_hex_upper(value: Any) -> str:
    return f"{_as_unsigned(value):X}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_string,
    "p": _conv_pointer,
    "d": _conv_decimal,
    "i": _conv_decimal,
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
}


def _take(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def format(template: str, *args: Any) -> str:
    """Render *template* with the conversions c, s, p, d, i, u, x, X and %%.

    An unknown conversion drops the '%' and keeps the following character;
    a lone '%' at the end of the template produces nothing.
    """
    values = iter(args)
    chars = iter(template)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        conversion = _CONVERSIONS.get(spec)
        if conversion is not None:
            out.append(conversion(_take(values)))
        else:
            out.append(spec)
    return "".join(out)


def _target(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def printf(template: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the rendered *template* to *file* (stdout by default); return its length."""
    text = format(template, *args)
    _target(file).write(text)
    return len(text)


def putstr(text: str, file: TextIO | None = None) -> None:
    """Write *text* to *file* (stdout by default)."""
    _target(file).write(text)


def putendl(text: str, file: TextIO | None = None) -> None:
    """Write *text* followed by a newline to *file* (stdout by default)."""
    _target(file).write(text + "\n")


def putnbr(n: int, file: TextIO | None = None) -> None:
    """Write the decimal form of *n* to *file* (stdout by default)."""
    _target(file).write(str(int(n)))