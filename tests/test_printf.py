import io

import pytest

from minitalk.printf import format, printf, putendl, putnbr, putstr


def test_plain_text_passes_through():
    assert format("hello world") == "hello world"


def test_percent_escape():
    assert format("100%%") == "100%"


def test_char_from_int_and_str():
    assert format("%c", ord("A")) == "A"
    assert format("[%c]", "x") == "[x]"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format("%c", "xy")


def test_string_and_null():
    assert format("%s!", "hi") == "hi!"
    assert format("%s", None) == "(null)"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, 2147483647])
def test_decimal_round_trip(n):
    assert int(format("%d", n)) == n
    assert int(format("%i", n)) == n


def test_decimal_minimum():
    assert format("%d", -2147483648) == "-2147483648"


def test_unsigned_wraps_negative():
    assert format("%u", -1) == "4294967295"


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 3735928559])
def test_hex_round_trip(n):
    lower = format("%x", n)
    upper = format("%X", n)
    assert int(lower, 16) == n
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_hex_upper_value():
    assert format("%X", 255) == "FF"


def test_pointer():
    assert format("%p", 0) == "(nil)"
    assert format("%p", 255) == "0xff"
    assert int(format("%p", 123456789)[2:], 16) == 123456789


def test_unknown_conversion_keeps_character():
    assert format("a%zb") == "azb"


def test_trailing_percent_is_dropped():
    assert format("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format("%d and %d", 1)


def test_mixed_template():
    assert format("%s=%d (%c)", "x", 42, "y") == "x=42 (y)"


def test_printf_writes_and_returns_length():
    out = io.StringIO()
    count = printf("%s:%d%%", "pid", 99, file=out)
    assert out.getvalue() == "pid:99%"
    assert count == len(out.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("Server PID: %d\n", 1234)
    captured = capsys.readouterr().out
    assert captured == "Server PID: 1234\n"
    assert count == len(captured)


def test_putstr_and_putendl():
    out = io.StringIO()
    putstr("abc", out)
    putendl("def", out)
    assert out.getvalue() == "abcdef\n"


@pytest.mark.parametrize("n", [0, 5, -6789, 12345, -2147483648])
def test_putnbr_round_trip(n):
    out = io.StringIO()
    putnbr(n, out)
    assert int(out.getvalue()) == n