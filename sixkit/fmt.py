"""Minimal printf: %d, %l, %x, %p, %s, %c and %%."""

from __future__ import annotations

import sys

_DIGITS = "0123456789ABCDEF"
_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1


def _int32(value):
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _printint(value, base, signed):
    value = _int32(value)
    negative = signed and value < 0
    x = (-value if negative else value) & _MASK32
    digits = []
    while True:
        digits.append(_DIGITS[x % base])
        x //= base
        if not x:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def _printptr(value):
    return "0x" + format(value & _MASK64, "016X")


def sprintf(fmt, *args):
    """Format args according to fmt and return the text."""
    values = iter(args)

    def arg():
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out = []
    pending = False
    for c in fmt:
        if not pending:
            if c == "%":
                pending = True
            else:
                out.append(c)
            continue
        pending = False
        if c == "d":
            out.append(_printint(arg(), 10, True))
        elif c == "l":
            out.append(_printint(arg(), 10, False))
        elif c == "x":
            out.append(_printint(arg(), 16, False))
        elif c == "p":
            out.append(_printptr(arg()))
        elif c == "s":
            s = arg()
            out.append("(null)" if s is None else str(s))
        elif c == "c":
            value = arg()
            out.append(value[:1] if isinstance(value, str) else chr(value & 0xFF))
        elif c == "%":
            out.append("%")
        else:
            out.append("%" + c)
    return "".join(out)


def fprintf(stream, fmt, *args):
    stream.write(sprintf(fmt, *args))


def printf(fmt, *args):
    fprintf(sys.stdout, fmt, *args)