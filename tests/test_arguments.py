import pytest

from fractol.arguments import (
    ArgumentError,
    FractalKind,
    FractalSpec,
    matches_name,
    parse_arguments,
    parse_float,
    usage_message,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.5", 1.5),
        ("-0.8", -0.8),
        ("  +2", 2.0),
        ("\t-1", -1.0),
        (".5", 0.5),
        ("abc", 0.0),
        ("", 0.0),
        ("1.2.3", 1.2),
        ("7x", 7.0),
    ],
)
def test_parse_float(text, expected):
    assert parse_float(text) == pytest.approx(expected)


def test_parse_float_no_exponent():
    assert parse_float("1e5") == pytest.approx(1.0)


@pytest.mark.parametrize(
    "expected, given, result",
    [
        ("mandelbrot", "mandelbrot", True),
        ("mandelbrot", "mandel", False),
        ("mandelbrot", "mandelbrotx", False),
        ("julia", "Julia", False),
        ("julia", "", False),
        ("", "", True),
    ],
)
def test_matches_name(expected, given, result):
    assert matches_name(expected, given) is result


def test_parse_mandelbrot():
    spec = parse_arguments(["mandelbrot"])
    assert spec == FractalSpec(FractalKind.MANDELBROT, "mandelbrot")


def test_parse_julia():
    spec = parse_arguments(["julia", "-0.8", "0.156"])
    assert spec.kind is FractalKind.JULIA
    assert spec.name == "julia"
    assert spec.c.real == pytest.approx(-0.8)
    assert spec.c.imag == pytest.approx(0.156)


def test_parse_julia_accepts_limits():
    spec = parse_arguments(["julia", "2", "-1.5"])
    assert spec.c == complex(2.0, -1.5)


def test_julia_real_out_of_range():
    with pytest.raises(ArgumentError, match="-2 and 2"):
        parse_arguments(["julia", "2.5", "0"])


def test_julia_imag_out_of_range():
    with pytest.raises(ArgumentError, match="-1.5 and 1.5"):
        parse_arguments(["julia", "0", "-1.6"])


def test_julia_real_checked_first():
    with pytest.raises(ArgumentError) as info:
        parse_arguments(["julia", "-3", "9"])
    assert "-2 and 2" in str(info.value)


def test_burning_ship_requires_bonus():
    with pytest.raises(ArgumentError) as info:
        parse_arguments(["burningship"])
    assert str(info.value) == usage_message(False)
    spec = parse_arguments(["burningship"], bonus=True)
    assert spec.kind is FractalKind.BURNING_SHIP


@pytest.mark.parametrize(
    "argv",
    [[], ["mandelbrot", "x"], ["julia"], ["julia", "0", "0", "0"], ["newton"]],
)
def test_bad_arguments_show_usage(argv):
    with pytest.raises(ArgumentError) as info:
        parse_arguments(argv, bonus=True)
    assert str(info.value) == usage_message(True)


def test_usage_message_lists_fractals():
    plain = usage_message(False)
    bonus = usage_message(True)
    assert "./fractol mandelbrot" in plain
    assert "./fractol julia" in plain
    assert "burningship" not in plain
    assert "./fractol burningship" in bonus
    assert bonus.count("\n") == plain.count("\n") + 1