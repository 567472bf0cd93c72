"""Small string and input helpers of the user library."""

from __future__ import annotations


def atoi(s):
    """Value of the leading decimal digits of s; no sign and no leading spaces."""
    if isinstance(s, (bytes, bytearray)):
        s = s.decode("latin-1")
    n = 0
    for c in s:
        if not "0" <= c <= "9":
            break
        n = n * 10 + ord(c) - ord("0")
    return n


def _cstring(s):
    data = s.encode() if isinstance(s, str) else bytes(s)
    nul = data.find(0)
    return data if nul < 0 else data[:nul]


def strcmp(p, q):
    """Compare as NUL-terminated byte strings; return the difference of the first unequal bytes."""
    for x, y in zip(_cstring(p) + b"\0", _cstring(q) + b"\0"):
        if x != y or x == 0:
            return x - y
    return 0


def gets(stream, maxlen):
    """Read at most maxlen-1 characters, stopping after a newline or carriage return."""
    chars = []
    while len(chars) + 1 < maxlen:
        c = stream.read(1)
        if not c:
            break
        chars.append(c)
        if c in ("\n", "\r"):
            break
    return "".join(chars)