import io

import pytest

from pushswap.printer import (
    HEX_LOWER,
    HEX_UPPER,
    format_hex,
    format_pointer,
    format_printf,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


def test_put_char_writes_one_character():
    out = io.StringIO()
    assert put_char("Z", out) == 1
    assert out.getvalue() == "Z"


def test_put_char_accepts_code():
    out = io.StringIO()
    put_char(ord("q"), out)
    assert out.getvalue() == "q"


def test_put_str_counts_and_writes():
    out = io.StringIO()
    assert put_str("Buenas", out) == len("Buenas")
    assert out.getvalue() == "Buenas"


def test_put_str_none_writes_null_marker():
    out = io.StringIO()
    assert put_str(None, out) == len("(null)")
    assert out.getvalue() == "(null)"


def test_put_endl_adds_newline():
    out = io.StringIO()
    put_endl("Holi", out)
    assert out.getvalue() == "Holi\n"


@pytest.mark.parametrize("n", [0, 456, -1000, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    count = put_nbr(n, out)
    assert int(out.getvalue()) == n
    assert count == len(out.getvalue())


def test_put_nbr_defaults_to_stdout(capsys):
    put_nbr(-3)
    assert capsys.readouterr().out == "-3"


@pytest.mark.parametrize("n", [0, 10, 15, 16, 4096, 123456789])
def test_format_hex_round_trip(n):
    assert int(format_hex(n, HEX_LOWER), 16) == n
    assert format_hex(n, HEX_UPPER) == format_hex(n, HEX_LOWER).upper()


def test_format_hex_pinned_value():
    assert format_hex(255) == "ff"


def test_format_hex_rejects_bad_input():
    with pytest.raises(ValueError):
        format_hex(-1)
    with pytest.raises(ValueError):
        format_hex(5, "0123")


def test_format_pointer():
    assert format_pointer(0) == "0x0"
    assert format_pointer(None) == "0x0"
    assert int(format_pointer(0xDEADBEEF), 16) == 0xDEADBEEF
    assert format_pointer(4096).startswith("0x")


def test_format_printf_mixed_conversions():
    result = format_printf("%c|%s|%d|%i|%%", "a", "Buenas", -3, 3)
    assert result == "a|Buenas|-3|3|%"


def test_format_printf_unsigned_wraps():
    assert int(format_printf("%u", -3)) == 2**32 - 3


def test_format_printf_hex_cases():
    assert format_printf("%x %X", 10, 10) == "a A"


def test_format_printf_null_string():
    assert format_printf("%s", None) == "(null)"


def test_format_printf_unknown_conversion_consumes_nothing():
    assert format_printf("%y%d", 7) == "7"


def test_format_printf_trailing_percent_stops():
    assert format_printf("abc%") == "abc"


def test_format_printf_missing_argument():
    with pytest.raises(ValueError):
        format_printf("%d %d", 1)


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("Mio D: %d\n", -3, stream=out)
    assert out.getvalue() == "Mio D: -3\n"
    assert count == len(out.getvalue())


def test_printf_to_stdout(capsys):
    printf("%s-%d", "x", 5)
    assert capsys.readouterr().out == "x-5"