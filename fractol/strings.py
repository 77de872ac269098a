"""Small string helpers with the exact semantics of the C library routines they mirror."""

from __future__ import annotations

from itertools import zip_longest

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LLONG_MAX = 2**63 - 1
_ULLONG_MOD = 2**64
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. If the magnitude exceeds the signed 64-bit range the
    result is -1 for positive input and 0 for negative input. Otherwise the
    value is truncated to a signed 32-bit integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    magnitude = 0
    while pos < length and "0" <= text[pos] <= "9":
        magnitude = (magnitude * 10 + ord(text[pos]) - ord("0")) % _ULLONG_MOD
        if magnitude > _LLONG_MAX:
            return -1 if sign == 1 else 0
        pos += 1
    return _to_int32(magnitude * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of a signed 32-bit integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character found in ``charset``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start at or past the end of the text yields an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None
    when there is no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, stopping at the end of either string.

    Returns the difference of the first differing character codes, a
    missing character counting as zero, or 0 when the prefixes are equal.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0