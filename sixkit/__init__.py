"""Memory layout, ELF headers, shell parser and user utilities of a small RISC-V teaching kernel."""

__version__ = "0.1.0"

__all__ = [
    "layout",
    "elf",
    "shell",
    "grep",
    "fmt",
    "ulib",
    "umalloc",
    "textutils",
    "fileutils",
]