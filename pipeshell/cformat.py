"""A minimal printf: the conversions %c %s %p %d %i %u %x %X."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any, TextIO

_CONVERSIONS = frozenset("cspdiuxX")
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c needs a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    if isinstance(value, int):
        address = value & _POINTER_MASK
    else:
        address = id(value)
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _format_pointer(value)
    number = operator.index(value)
    if spec in "di":
        return str(_to_int32(number))
    unsigned = number & _UINT_MASK
    if spec == "u":
        return str(unsigned)
    if spec == "x":
        return f"{unsigned:x}"
    return f"{unsigned:X}"


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise ValueError(f"missing argument for %{spec}") from None


def cformat(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt``.

    An unknown conversion character is written as itself, so ``%%`` gives
    ``%``; a lone ``%`` at the end of the format is dropped.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    values = iter(args)
    chars = iter(fmt)
    pieces: list[str] = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in _CONVERSIONS:
            pieces.append(_convert(spec, _next_arg(values, spec)))
        else:
            pieces.append(spec)
    return "".join(pieces)


def cprintf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    text = cformat(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)