"""ELF64 file and program headers."""

from __future__ import annotations

import struct
from dataclasses import dataclass

ELF_MAGIC = 0x464C457F

ELF_PROG_LOAD = 1

ELF_PROG_FLAG_EXEC = 1
ELF_PROG_FLAG_WRITE = 2
ELF_PROG_FLAG_READ = 4

_ELF_HEADER = struct.Struct("<I12sHHIQQQIHHHHHH")
_PROG_HEADER = struct.Struct("<IIQQQQQQ")


class ElfFormatError(ValueError):
    """Raised when bytes do not hold a well-formed ELF image."""


@dataclass(frozen=True)
class ElfHeader:
    magic: int = ELF_MAGIC
    ident: bytes = bytes(12)
    type: int = 0
    machine: int = 0
    version: int = 0
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = _ELF_HEADER.size
    phentsize: int = _PROG_HEADER.size
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    SIZE = _ELF_HEADER.size

    @classmethod
    def unpack(cls, data):
        """Decode a file header from the start of data."""
        if len(data) < _ELF_HEADER.size:
            raise ElfFormatError("truncated ELF header")
        header = cls(*_ELF_HEADER.unpack_from(data, 0))
        if header.magic != ELF_MAGIC:
            raise ElfFormatError(f"bad ELF magic {header.magic:#x}")
        return header

    def pack(self):
        return _ELF_HEADER.pack(
            self.magic, bytes(self.ident).ljust(12, b"\0")[:12], self.type,
            self.machine, self.version, self.entry, self.phoff, self.shoff,
            self.flags, self.ehsize, self.phentsize, self.phnum,
            self.shentsize, self.shnum, self.shstrndx,
        )


@dataclass(frozen=True)
class ProgramHeader:
    type: int = 0
    flags: int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    SIZE = _PROG_HEADER.size

    @classmethod
    def unpack(cls, data):
        """Decode a program header from the start of data."""
        if len(data) < _PROG_HEADER.size:
            raise ElfFormatError("truncated program header")
        return cls(*_PROG_HEADER.unpack_from(data, 0))

    def pack(self):
        return _PROG_HEADER.pack(
            self.type, self.flags, self.off, self.vaddr,
            self.paddr, self.filesz, self.memsz, self.align,
        )

    @property
    def is_load(self):
        return self.type == ELF_PROG_LOAD


def program_headers(data):
    """Return the program headers listed by the ELF image in data."""
    header = ElfHeader.unpack(data)
    result = []
    for i in range(header.phnum):
        start = header.phoff + i * _PROG_HEADER.size
        chunk = data[start:start + _PROG_HEADER.size]
        if len(chunk) < _PROG_HEADER.size:
            raise ElfFormatError(f"program header {i} lies beyond the image")
        result.append(ProgramHeader.unpack(chunk))
    return result