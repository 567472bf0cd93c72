import pytest

from sixkit.elf import (
    ELF_MAGIC,
    ELF_PROG_FLAG_EXEC,
    ELF_PROG_FLAG_READ,
    ELF_PROG_LOAD,
    ElfFormatError,
    ElfHeader,
    ProgramHeader,
    program_headers,
)


def _segment(vaddr):
    return ProgramHeader(
        type=ELF_PROG_LOAD,
        flags=ELF_PROG_FLAG_READ | ELF_PROG_FLAG_EXEC,
        off=0x1000,
        vaddr=vaddr,
        paddr=vaddr,
        filesz=0x200,
        memsz=0x300,
        align=0x1000,
    )


def test_header_starts_with_magic_bytes():
    raw = ElfHeader(entry=0x1000).pack()
    assert raw[:4] == b"\x7fELF"
    assert len(raw) == 64
    assert int.from_bytes(raw[:4], "little") == ELF_MAGIC


def test_header_round_trip():
    header = ElfHeader(ident=b"\x02\x01\x01" + bytes(9), type=2, machine=243,
                       version=1, entry=0x1234, phoff=64, phnum=3)
    assert ElfHeader.unpack(header.pack()) == header


def test_program_header_round_trip():
    ph = _segment(0x4000)
    raw = ph.pack()
    assert len(raw) == ProgramHeader.SIZE
    assert ProgramHeader.unpack(raw) == ph
    assert ProgramHeader.unpack(raw).is_load


def test_bad_magic_rejected():
    raw = bytearray(ElfHeader().pack())
    raw[0] = 0
    with pytest.raises(ElfFormatError):
        ElfHeader.unpack(bytes(raw))


def test_truncated_header_rejected():
    with pytest.raises(ElfFormatError):
        ElfHeader.unpack(ElfHeader().pack()[:-1])
    with pytest.raises(ElfFormatError):
        ProgramHeader.unpack(_segment(0).pack()[:10])


def test_program_headers_listed_in_order():
    segments = [_segment(0), _segment(0x2000)]
    header = ElfHeader(phoff=ElfHeader.SIZE, phnum=len(segments))
    image = header.pack() + b"".join(s.pack() for s in segments)
    assert program_headers(image) == segments


def test_program_headers_beyond_image_rejected():
    header = ElfHeader(phoff=ElfHeader.SIZE, phnum=2)
    image = header.pack() + _segment(0).pack()
    with pytest.raises(ElfFormatError):
        program_headers(image)