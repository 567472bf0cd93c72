import io

import pytest

from sixkit.fmt import fprintf, printf, sprintf


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert int(sprintf("%d", n)) == n


@pytest.mark.parametrize("n", [0, 1, 255, 0xDEAD])
def test_hex_round_trip_uppercase(n):
    text = sprintf("%x", n)
    assert int(text, 16) == n
    assert text == text.upper()


def test_hex_negative_wraps_to_32_bits():
    assert int(sprintf("%x", -1), 16) == 0xFFFFFFFF


def test_pointer():
    text = sprintf("%p", 0x1234)
    assert text.startswith("0x")
    assert len(text) == 18
    assert int(text, 16) == 0x1234


def test_long_truncates_to_32_bits():
    assert sprintf("%l", 123456) == "123456"
    assert int(sprintf("%l", (1 << 32) + 5)) == 5


def test_strings():
    assert sprintf("%s", None) == "(null)"
    assert sprintf("name=%s!", "xv") == "name=xv!"


def test_char():
    assert sprintf("%c%c", ord("o"), "k") == "ok"


def test_percent_and_unknown():
    assert sprintf("100%%") == "100%"
    assert sprintf("%q") == "%q"
    assert sprintf("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_fprintf_matches_sprintf():
    stream = io.StringIO()
    fprintf(stream, "%s=%d\n", "x", 3)
    assert stream.getvalue() == sprintf("%s=%d\n", "x", 3)


def test_printf(capsys):
    printf("init: starting %s\n", "sh")
    assert capsys.readouterr().out == "init: starting sh\n"