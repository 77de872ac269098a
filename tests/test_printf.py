import io

import pytest

from fractol.printf import format_printf, printf


def test_plain_text_passes_through():
    assert format_printf("give a hight value") == "give a hight value"


def test_percent_escape():
    assert format_printf("100%% sure") == "100% sure"


def test_null_string():
    assert format_printf("%s", None) == "(null)"


def test_string_conversion():
    assert format_printf("[%s]", "mandelbrot") == "[mandelbrot]"


def test_char_from_int_and_str():
    assert format_printf("%c%c", ord("A"), "z") == "Az"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_printf("%c", "ab")


@pytest.mark.parametrize("number", [0, 42, -7, 2**31 - 1, -(2**31)])
def test_signed_matches_decimal(number):
    assert format_printf("%d", number) == str(number)
    assert format_printf("%i", number) == str(number)


def test_signed_wraps_to_32_bits():
    assert format_printf("%d", 2**31) == "-2147483648"


def test_unsigned_of_negative_wraps():
    assert format_printf("%u", -1) == str(2**32 - 1)


@pytest.mark.parametrize("number", [0, 9, 10, 255, 0xDEADBEEF])
def test_hex_conversions(number):
    assert format_printf("%x", number) == format(number, "x")
    assert format_printf("%X", number) == format(number, "X")


def test_pointer_formatting():
    address = 0x7FFE1234
    assert format_printf("%p", address) == "0x" + format(address, "x")
    assert format_printf("%p", None) == "0x0"


def test_unknown_conversion_prints_character():
    assert format_printf("a%qb") == "aqb"


def test_trailing_percent_is_dropped():
    assert format_printf("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_none_template_raises():
    with pytest.raises(TypeError):
        format_printf(None)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d%%", "k", 60, stream=stream)
    written = stream.getvalue()
    assert written == "k=60%"
    assert count == len(written)


def test_printf_count_includes_sign():
    stream = io.StringIO()
    count = printf("%d", -123, stream=stream)
    assert stream.getvalue() == "-123"
    assert count == 4