"""ls, kill, ln, mkdir, rm and sleep."""

from __future__ import annotations

import os
import signal
import stat
import sys
import time
from enum import IntEnum

from .fmt import sprintf
from .ulib import atoi

DIRSIZ = 14
TICK_SECONDS = 0.1
_BUFSIZE = 512


class FileType(IntEnum):
    DIR = 1
    FILE = 2
    DEVICE = 3


def _file_type(mode):
    if stat.S_ISDIR(mode):
        return FileType.DIR
    if stat.S_ISREG(mode):
        return FileType.FILE
    return FileType.DEVICE


def fmtname(path):
    """Last component of path, blank-padded to DIRSIZ when shorter."""
    name = path[path.rfind("/") + 1:]
    if len(name) >= DIRSIZ:
        return name
    return name.ljust(DIRSIZ)


def ls(path, out=None):
    """List a file or a directory; return (path, type, inode, size) of each entry shown."""
    out = sys.stdout if out is None else out
    try:
        st = os.stat(path)
    except OSError:
        sys.stderr.write(f"ls: cannot open {path}\n")
        return []
    kind = _file_type(st.st_mode)
    if kind is FileType.FILE:
        out.write(sprintf("%s %d %d %l\n", fmtname(path), int(kind), st.st_ino, st.st_size))
        return [(path, kind, st.st_ino, st.st_size)]
    if kind is not FileType.DIR:
        return []
    if len(path) + 1 + DIRSIZ + 1 > _BUFSIZE:
        out.write("ls: path too long\n")
        return []
    try:
        names = sorted(os.listdir(path))
    except OSError:
        sys.stderr.write(f"ls: cannot open {path}\n")
        return []
    listed = []
    for name in (".", "..", *names):
        full = f"{path}/{name}"
        try:
            st = os.stat(full)
        except OSError:
            out.write(f"ls: cannot stat {full}\n")
            continue
        kind = _file_type(st.st_mode)
        out.write(sprintf("%s %d %d %d\n", fmtname(full), int(kind), st.st_ino, st.st_size))
        listed.append((full, kind, st.st_ino, st.st_size))
    return listed


def kill(pids):
    """Kill each process named by pid; return how many were signalled."""
    sig = getattr(signal, "SIGKILL", signal.SIGTERM)
    count = 0
    for pid in pids:
        pid = atoi(pid) if isinstance(pid, (str, bytes, bytearray)) else int(pid)
        if pid <= 0:
            continue
        try:
            os.kill(pid, sig)
        except (OSError, OverflowError):
            continue
        count += 1
    return count


def link(old, new):
    """Create a hard link new to old; report failure and return False."""
    try:
        os.link(old, new)
    except OSError:
        sys.stderr.write(f"link {old} {new}: failed\n")
        return False
    return True


def make_dirs(paths):
    """Create each directory, stopping at the first failure; return those created."""
    created = []
    for path in paths:
        try:
            os.mkdir(path)
        except OSError:
            sys.stderr.write(f"mkdir: {path} failed to create\n")
            break
        created.append(path)
    return created


def _unlink(path):
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.unlink(path)


def remove(paths):
    """Remove each file or empty directory, stopping at the first failure."""
    removed = []
    for path in paths:
        try:
            _unlink(path)
        except OSError:
            sys.stderr.write(f"rm: {path} failed to delete\n")
            break
        removed.append(path)
    return removed


def sleep(ticks):
    """Pause for a number of clock ticks."""
    time.sleep(max(0, ticks) * TICK_SECONDS)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write("usage: fileutils ls|kill|ln|mkdir|rm|sleep [args...]\n")
        return 1
    command, *rest = args
    if command == "ls":
        for path in rest or ["."]:
            ls(path)
        return 0
    if command == "kill":
        if not rest:
            sys.stderr.write("usage: kill pid...\n")
            return 1
        kill(rest)
        return 0
    if command == "ln":
        if len(rest) != 2:
            sys.stderr.write("Usage: ln old new\n")
            return 1
        link(*rest)
        return 0
    if command == "mkdir":
        if not rest:
            sys.stderr.write("Usage: mkdir files...\n")
            return 1
        make_dirs(rest)
        return 0
    if command == "rm":
        if not rest:
            sys.stderr.write("Usage: rm files...\n")
            return 1
        remove(rest)
        return 0
    if command == "sleep":
        if not rest:
            sys.stderr.write("Usage: sleep <ticks>\n")
            return 1
        sleep(atoi(rest[0]))
        return 0
    sys.stderr.write(f"unknown command {command}\n")
    return 1