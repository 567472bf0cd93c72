import io

from sixkit.textutils import cat, echo, main, primes, wc


def test_cat_round_trip():
    data = bytes(range(256)) * 5
    out = io.BytesIO()
    assert cat(io.BytesIO(data), out) == len(data)
    assert out.getvalue() == data


def test_echo():
    out = io.StringIO()
    echo(["a", "b"], out)
    assert out.getvalue() == "a b\n"


def test_echo_no_args():
    out = io.StringIO()
    echo([], out)
    assert out.getvalue() == ""


def test_wc_counts():
    text = "hello world\nfoo\n"
    lines, words, chars = wc(io.StringIO(text))
    assert chars == len(text)
    assert lines == text.count("\n")
    assert words == len(text.split())


def test_wc_empty():
    assert wc(io.StringIO("")) == (0, 0, 0)


def test_wc_bytes_and_nul_separates_words():
    lines, words, chars = wc(io.BytesIO(b"ab\0cd"))
    assert (lines, words, chars) == (0, 2, 5)


def test_primes_default():
    assert list(primes()) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]


def test_primes_cover_composites():
    found = list(primes(200))
    for n in range(2, 201):
        if n not in found:
            assert any(n % p == 0 for p in found if p < n)


def test_main_echo(capsys):
    assert main(["echo", "x", "y"]) == 0
    assert capsys.readouterr().out == "x y\n"


def test_main_primes(capsys):
    assert main(["primes"]) == 0
    first = capsys.readouterr().out.splitlines()[0]
    assert first == "prime 2"


def test_main_wc_file(tmp_path, capsys):
    path = tmp_path / "f.txt"
    path.write_bytes(b"one two\nthree\n")
    assert main(["wc", str(path)]) == 0
    assert capsys.readouterr().out == f"2 3 14 {path}\n"


def test_main_wc_missing(tmp_path, capsys):
    missing = tmp_path / "none"
    assert main(["wc", str(missing)]) == 1
    assert capsys.readouterr().out == f"wc: cannot open {missing}\n"


def test_main_cat_missing(tmp_path, capsys):
    missing = tmp_path / "none"
    assert main(["cat", str(missing)]) == 1
    assert capsys.readouterr().err == f"cat: cannot open {missing}\n"


def test_main_unknown(capsys):
    assert main(["frob"]) == 1
    assert "frob" in capsys.readouterr().err