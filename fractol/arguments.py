"""Command-line argument handling: choosing the fractal and its parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fractol.strings import strnstr

JULIA_REAL_LIMIT = 2.0
JULIA_IMAG_LIMIT = 1.5

REAL_RANGE_MESSAGE = "give a whidth value betwenn  -2 and 2"
IMAG_RANGE_MESSAGE = "give a hight value betwenn -1.5 and 1.5"

_BORDER = "-----------------------------------------------\n"
_BLANK = "-                                             -\n"


class FractalKind(Enum):
    """The fractals the program can draw."""

    MANDELBROT = 1
    JULIA = 2
    BURNING_SHIP = 3


_NAMES = {
    FractalKind.MANDELBROT: "mandelbrot",
    FractalKind.JULIA: "julia",
    FractalKind.BURNING_SHIP: "burningship",
}


class ArgumentError(Exception):
    """Raised when the command line does not describe a drawable fractal."""


@dataclass(frozen=True)
class FractalSpec:
    """The fractal to draw, its window title and, for Julia sets, the constant."""

    kind: FractalKind
    name: str
    c: complex = 0j


def parse_float(text: str) -> float:
    """Parse a leading decimal number such as ``-0.8`` or ``+1.25``.

    Leading whitespace and one sign are accepted; parsing stops at the first
    character that does not belong to ``digits[.digits]``. Text with no
    digits yields 0.0. There is no exponent syntax.
    """
    pos = 0
    length = len(text)
    while pos < length and (text[pos] == " " or "\t" <= text[pos] <= "\r"):
        pos += 1
    sign = 1.0
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1.0
        pos += 1
    result = 0.0
    while pos < length and "0" <= text[pos] <= "9":
        result = result * 10.0 + (ord(text[pos]) - ord("0"))
        pos += 1
    if pos < length and text[pos] == ".":
        pos += 1
    divisor = 1.0
    while pos < length and "0" <= text[pos] <= "9":
        divisor *= 10.0
        result = result + (ord(text[pos]) - ord("0")) / divisor
        pos += 1
    return result * sign


def matches_name(expected: str, given: str) -> bool:
    """Return True when ``given`` is exactly the fractal name ``expected``."""
    return (
        strnstr(expected, given, len(given)) is not None
        and len(expected) == len(given)
    )


def usage_message(bonus: bool = False) -> str:
    """Return the boxed usage text listing the accepted command lines."""
    lines = [
        _BORDER,
        _BLANK,
        "-    Allowed arguments are :                  -\n",
        _BLANK,
        "-         ./fractol mandelbrot                -\n",
        "-         ./fractol julia 'Width' 'Hight'     -\n",
    ]
    if bonus:
        lines.append("-         ./fractol burningship               -\n")
    lines.extend([_BLANK, _BORDER])
    return "".join(lines)


def parse_arguments(argv: list[str], bonus: bool = False) -> FractalSpec:
    """Turn the user's arguments (program name excluded) into a FractalSpec.

    Raises ArgumentError carrying the text to show the user when the
    arguments are not accepted. The burning ship is only offered when
    ``bonus`` is true.
    """
    args = list(argv)
    if len(args) == 1 and matches_name(_NAMES[FractalKind.MANDELBROT], args[0]):
        return FractalSpec(FractalKind.MANDELBROT, args[0])
    if len(args) == 3 and matches_name(_NAMES[FractalKind.JULIA], args[0]):
        real = parse_float(args[1])
        if not -JULIA_REAL_LIMIT <= real <= JULIA_REAL_LIMIT:
            raise ArgumentError(REAL_RANGE_MESSAGE)
        imag = parse_float(args[2])
        if not -JULIA_IMAG_LIMIT <= imag <= JULIA_IMAG_LIMIT:
            raise ArgumentError(IMAG_RANGE_MESSAGE)
        return FractalSpec(FractalKind.JULIA, args[0], complex(real, imag))
    if (
        bonus
        and len(args) == 1
        and matches_name(_NAMES[FractalKind.BURNING_SHIP], args[0])
    ):
        return FractalSpec(FractalKind.BURNING_SHIP, args[0])
    raise ArgumentError(usage_message(bonus))