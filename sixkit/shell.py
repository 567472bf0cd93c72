"""Parser for the shell's command language: words, redirections, pipes, lists and blocks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .layout import O_CREATE, O_RDONLY, O_TRUNC, O_WRONLY

WHITESPACE = " \t\r\n\v"
SYMBOLS = "<|>&;()"
MAXARGS = 10


class ShellSyntaxError(ValueError):
    """A command line could not be parsed."""


@dataclass
class ExecCmd:
    argv: list = field(default_factory=list)


@dataclass
class RedirCmd:
    cmd: "Command"
    file: str
    mode: int
    fd: int


@dataclass
class PipeCmd:
    left: "Command"
    right: "Command"


@dataclass
class ListCmd:
    left: "Command"
    right: "Command"


@dataclass
class BackCmd:
    cmd: "Command"


Command = Union[ExecCmd, RedirCmd, PipeCmd, ListCmd, BackCmd]

_REDIRECTIONS = {
    "<": (O_RDONLY, 0),
    ">": (O_WRONLY | O_CREATE | O_TRUNC, 1),
    "+": (O_WRONLY | O_CREATE, 1),
}


class _Scanner:
    def __init__(self, line):
        self.line = line
        self.pos = 0

    def skip(self):
        while self.pos < len(self.line) and self.line[self.pos] in WHITESPACE:
            self.pos += 1

    def peek(self, toks):
        self.skip()
        return self.pos < len(self.line) and self.line[self.pos] in toks

    def next(self):
        """Consume one token and return (kind, text); kind is '' at the end."""
        self.skip()
        line = self.line
        start = self.pos
        if start >= len(line):
            return "", ""
        c = line[start]
        if c in "|();&<":
            self.pos += 1
            kind = c
        elif c == ">":
            self.pos += 1
            if self.pos < len(line) and line[self.pos] == ">":
                self.pos += 1
                kind = "+"
            else:
                kind = ">"
        else:
            kind = "a"
            while (self.pos < len(line)
                   and line[self.pos] not in WHITESPACE
                   and line[self.pos] not in SYMBOLS):
                self.pos += 1
        text = line[start:self.pos]
        self.skip()
        return kind, text


def tokens(line):
    """Yield (kind, text) tokens; kind is 'a' for a word, '+' for '>>', else the symbol."""
    scanner = _Scanner(line)
    while True:
        kind, text = scanner.next()
        if not kind:
            return
        yield kind, text


def _parse_line(sc):
    cmd = _parse_pipe(sc)
    while sc.peek("&"):
        sc.next()
        cmd = BackCmd(cmd)
    if sc.peek(";"):
        sc.next()
        cmd = ListCmd(cmd, _parse_line(sc))
    return cmd


def _parse_pipe(sc):
    cmd = _parse_exec(sc)
    if sc.peek("|"):
        sc.next()
        cmd = PipeCmd(cmd, _parse_pipe(sc))
    return cmd


def _parse_redirs(cmd, sc):
    while sc.peek("<>"):
        kind, _ = sc.next()
        file_kind, name = sc.next()
        if file_kind != "a":
            raise ShellSyntaxError("missing file for redirection")
        mode, fd = _REDIRECTIONS[kind]
        cmd = RedirCmd(cmd, name, mode, fd)
    return cmd


def _parse_block(sc):
    if not sc.peek("("):
        raise ShellSyntaxError("parseblock")
    sc.next()
    cmd = _parse_line(sc)
    if not sc.peek(")"):
        raise ShellSyntaxError("syntax - missing )")
    sc.next()
    return _parse_redirs(cmd, sc)


def _parse_exec(sc):
    if sc.peek("("):
        return _parse_block(sc)
    cmd = ExecCmd()
    ret = _parse_redirs(cmd, sc)
    while not sc.peek("|)&;"):
        kind, word = sc.next()
        if not kind:
            break
        if kind != "a":
            raise ShellSyntaxError("syntax")
        cmd.argv.append(word)
        if len(cmd.argv) >= MAXARGS:
            raise ShellSyntaxError("too many args")
        ret = _parse_redirs(ret, sc)
    return ret


def parse(line):
    """Parse a command line into a command tree."""
    sc = _Scanner(line)
    cmd = _parse_line(sc)
    sc.skip()
    if sc.pos != len(line):
        raise ShellSyntaxError(f"leftovers: {line[sc.pos:]}")
    return cmd