"""Small text helpers: number parsing, splitting, trimming and env lookup."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACE_CHARS = " \t\n\v\f\r"
_SPACE_RUN = re.compile(r"[ \t\n\v\f\r]+")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement signed integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def is_space(ch: str) -> bool:
    """Return True for a space or one of the characters tab through carriage return."""
    return len(ch) == 1 and ch in _SPACE_CHARS


def _scan_number(text: str) -> tuple[int, str]:
    """Skip leading blanks and an optional sign; return the sign and the rest."""
    pos = 0
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    return sign, text[pos:]


def _leading_digits(rest: str) -> str:
    end = 0
    while end < len(rest) and "0" <= rest[end] <= "9":
        end += 1
    return rest[:end]


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 32-bit signed value."""
    sign, rest = _scan_number(text)
    digits = _leading_digits(rest)
    value = int(digits) if digits else 0
    return _wrap(_wrap(value, 32) * sign, 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 64-bit signed value."""
    sign, rest = _scan_number(text)
    digits = _leading_digits(rest)
    value = int(digits) if digits else 0
    return _wrap(_wrap(value, 64) * sign, 64)


def atol_checked(text: str) -> int:
    """Parse a leading decimal integer that must fit a 32-bit signed int.

    Raises OverflowError as soon as the accumulated value leaves that range.
    """
    sign, rest = _scan_number(text)
    value = 0
    for digit in _leading_digits(rest):
        value = value * 10 + int(digit)
        if not INT_MIN <= value * sign <= INT_MAX:
            raise OverflowError(f"integer out of range: {text!r}")
    return value * sign


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def split_whitespace(text: str) -> list[str]:
    """Split ``text`` on runs of ASCII whitespace, dropping empty pieces."""
    return [piece for piece in _SPACE_RUN.split(text) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character found in ``charset``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def find_bounded(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` entirely within the first ``limit`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if not needle:
        return 0
    if limit < 0:
        raise ValueError("limit must not be negative")
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def getenv(
    name: str | None,
    env: Mapping[str, str] | Iterable[str] | None,
) -> str | None:
    """Look up ``name`` in a mapping or in a sequence of ``NAME=value`` strings."""
    if name is None or env is None:
        return None
    if isinstance(env, Mapping):
        return env.get(name)
    prefix = name + "="
    for entry in env:
        if entry.startswith(prefix):
            return entry[len(prefix):]
    return None