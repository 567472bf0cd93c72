"""cat, echo, wc and a prime sieve."""

from __future__ import annotations

import sys

_BUFSIZE = 512
_WHITESPACE = " \r\t\n\v\0"


def cat(stream, out):
    """Copy stream to out; return the number of units copied."""
    total = 0
    while chunk := stream.read(_BUFSIZE):
        out.write(chunk)
        total += len(chunk)
    return total


def echo(args, out):
    """Write the arguments separated by spaces and ended by a newline."""
    args = list(args)
    if args:
        out.write(" ".join(args) + "\n")


def wc(stream):
    """Return (lines, words, characters) read from stream."""
    lines = words = chars = 0
    inword = False
    while chunk := stream.read(_BUFSIZE):
        if isinstance(chunk, (bytes, bytearray)):
            chunk = chunk.decode("latin-1")
        for c in chunk:
            chars += 1
            if c == "\n":
                lines += 1
            if c in _WHITESPACE:
                inword = False
            elif not inword:
                words += 1
                inword = True
    return lines, words, chars


def primes(limit=35):
    """Yield the primes from 2 up to limit, sieving each by the primes found before it."""
    found = []
    for n in range(2, limit + 1):
        if all(n % p for p in found):
            found.append(n)
            yield n


def _cat_main(files):
    sys.stdout.flush()
    out = sys.stdout.buffer
    if not files:
        cat(sys.stdin.buffer, out)
        out.flush()
        return 0
    for name in files:
        try:
            handle = open(name, "rb")
        except OSError:
            sys.stderr.write(f"cat: cannot open {name}\n")
            return 1
        with handle:
            cat(handle, out)
    out.flush()
    return 0


def _wc_main(files):
    if not files:
        lines, words, chars = wc(sys.stdin.buffer)
        sys.stdout.write(f"{lines} {words} {chars} \n")
        return 0
    for name in files:
        try:
            handle = open(name, "rb")
        except OSError:
            sys.stdout.write(f"wc: cannot open {name}\n")
            return 1
        with handle:
            lines, words, chars = wc(handle)
        sys.stdout.write(f"{lines} {words} {chars} {name}\n")
    return 0


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write("usage: textutils cat|echo|wc|primes [args...]\n")
        return 1
    command, *rest = args
    if command == "cat":
        return _cat_main(rest)
    if command == "echo":
        echo(rest, sys.stdout)
        return 0
    if command == "wc":
        return _wc_main(rest)
    if command == "primes":
        for p in primes():
            sys.stdout.write(f"prime {p}\n")
        return 0
    sys.stderr.write(f"unknown command {command}\n")
    return 1