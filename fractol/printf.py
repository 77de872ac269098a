"""A small printf supporting the c, s, d, i, u, p, x, X and % conversions."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_NULL_TEXT = "(null)"


def _wrap(value: int, bits: int, signed: bool) -> int:
    """Reduce an integer to a fixed-width machine value."""
    modulus = 1 << bits
    value %= modulus
    if signed and value >= modulus >> 1:
        value -= modulus
    return value


def _render_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError("%c expects a single character")
        return arg
    return chr(operator.index(arg) % 256)


def _render_string(arg: Any) -> str:
    if arg is None:
        return _NULL_TEXT
    if not isinstance(arg, str):
        raise TypeError("%s expects a string or None")
    return arg


def _render_signed(arg: Any) -> str:
    return str(_wrap(operator.index(arg), 32, signed=True))


def _render_unsigned(arg: Any) -> str:
    return str(_wrap(operator.index(arg), 32, signed=False))


def _render_pointer(arg: Any) -> str:
    address = 0 if arg is None else operator.index(arg)
    return "0x" + format(_wrap(address, 64, signed=False), "x")


def _render_hex_lower(arg: Any) -> str:
    return format(_wrap(operator.index(arg), 32, signed=False), "x")


def _render_hex_upper(arg: Any) -> str:
    return format(_wrap(operator.index(arg), 32, signed=False), "X")


_HANDLERS: dict[str, Callable[[Any], str]] = {
    "c": _render_char,
    "s": _render_string,
    "d": _render_signed,
    "i": _render_signed,
    "u": _render_unsigned,
    "p": _render_pointer,
    "x": _render_hex_lower,
    "X": _render_hex_upper,
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handler = _HANDLERS.get(spec)
    if handler is None:
        # Unknown conversions are printed as the bare character.
        return spec
    try:
        arg = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    return handler(arg)


def format_printf(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args`` and return the resulting text.

    A lone ``%`` at the very end of the template is dropped; an unknown
    conversion character is emitted as itself.
    """
    if template is None:
        raise TypeError("template must be a string, not None")
    values = iter(args)
    pieces: list[str] = []
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expanded template to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_printf(template, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)