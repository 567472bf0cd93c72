import io
import re

import pytest

from sixkit.grep import grep, main, match

CASES = [
    ("abc", "xxabcxx"),
    ("^abc", "abcd"),
    ("^abc", "xabc"),
    ("abc$", "xabc"),
    ("abc$", "abcx"),
    ("a.c", "abc"),
    ("a.c", "ac"),
    ("ab*c", "ac"),
    ("ab*c", "abbbc"),
    ("^a*$", "aaa"),
    ("^a*$", "aab"),
    (".*", ""),
    ("x", "abc"),
    ("^$", ""),
    ("^$", "a"),
    ("a.*z", "a to z"),
]


@pytest.mark.parametrize("pattern,text", CASES)
def test_match_agrees_with_re(pattern, text):
    assert match(pattern, text) == (re.search(pattern, text) is not None)


def test_grep_selects_lines():
    out = io.StringIO()
    count = grep("foo", io.StringIO("foo\nbar\nfood\n"), out)
    assert out.getvalue() == "foo\nfood\n"
    assert count == len(out.getvalue().splitlines())


def test_grep_ignores_unterminated_last_line():
    out = io.StringIO()
    grep("foo", io.StringIO("foo\nfoo"), out)
    assert out.getvalue() == "foo\n"


def test_grep_stops_on_overlong_line():
    out = io.StringIO()
    grep("foo", io.StringIO("x" * 2000 + "\nfoo\n"), out)
    assert out.getvalue() == ""


def test_main_file(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("alpha\nbeta\ngamma\n")
    assert main(["^.a", str(path)]) == 0
    assert capsys.readouterr().out == "gamma\n"


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope"
    assert main(["x", str(missing)]) == 1
    assert capsys.readouterr().out == f"grep: cannot open {missing}\n"


def test_main_usage(capsys):
    assert main([]) == 1
    assert "usage: grep pattern" in capsys.readouterr().err