# sixkit

sixkit models parts of a small RISC-V teaching operating system in plain
Python. It covers the machine and memory layout, Sv39 address arithmetic,
ELF headers, the shell grammar, a free-list allocator, and the classic
user-level text and file utilities.

It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install sixkit
```

To run the test suite, install the `test` extra and then run `pytest`:

```
pip install "sixkit[test]"
pytest
```

## What is inside

| Module             | What it gives you |
|--------------------|-------------------|
| `sixkit.layout`    | System limits (`NPROC`, `MAXPATH`, …), `open()` flags (`O_RDONLY`, `O_CREATE`, …), the physical memory layout of the qemu virt machine (`UART0`, `PLIC`, `KERNBASE`, `PHYSTOP`, `TRAMPOLINE`, …), PTE bits, and address helpers: `pgroundup`, `pgrounddown`, `pa2pte`, `pte2pa`, `pte_flags`, `pxshift`, `px`, `make_satp`, `kstack`, `clint_mtimecmp` and the `plic_*` register addresses. |
| `sixkit.elf`       | The frozen dataclasses `ElfHeader` and `ProgramHeader`, each with `unpack` and `pack`, plus `program_headers(data)`. A bad magic number or a truncated image raises `ElfFormatError`. |
| `sixkit.shell`     | `tokens(line)` and `parse(line)` for the shell grammar: words, `<`, `>`, `>>`, `\|`, `;`, `&` and parentheses. `parse` builds trees of `ExecCmd`, `RedirCmd`, `PipeCmd`, `ListCmd` and `BackCmd`, and it raises `ShellSyntaxError` on bad input. |
| `sixkit.grep`      | `match(pattern, text)`, a small regular-expression matcher that supports `^`, `.`, `*` and `$`. It also provides `grep(pattern, stream, out)`, which writes each matching line and returns the number of matches. |
| `sixkit.fmt`       | `sprintf`, `fprintf` and `printf`, which understand `%d %l %x %p %s %c %%`. An unknown directive is printed as it was written. |
| `sixkit.ulib`      | `atoi` (leading digits only), `strcmp` (NUL-terminated byte comparison) and `gets(stream, maxlen)`. |
| `sixkit.umalloc`   | `Heap`, a next-fit free-list allocator over a simulated heap. It provides `malloc`, `free` and `free_blocks()`. An exhausted heap raises `MemoryError`. |
| `sixkit.textutils` | `cat`, `echo`, `wc` (which returns lines, words and characters) and `primes(limit=35)`. |
| `sixkit.fileutils` | `fmtname`, `ls`, `kill`, `link`, `make_dirs`, `remove` and `sleep` (one tick is 0.1 s). These work on the host file system. |

## Examples

Address arithmetic:

```python
from sixkit.layout import pgroundup, pgrounddown, px

pgroundup(4097)      # 8192
pgrounddown(4097)    # 4096
px(0, 0x1000)        # 1
```

Parsing a shell line:

```python
from sixkit.shell import parse, PipeCmd

tree = parse("cat README | grep kernel > out")
isinstance(tree, PipeCmd)   # True
```

Matching:

```python
from sixkit.grep import match

match("^a.c$", "abc")   # True
match("^a.c$", "abcd")  # False
```

Formatting:

```python
from sixkit.fmt import sprintf

sprintf("%d %x", -5, 255)   # "-5 FF"
```

Allocating from the simulated heap:

```python
from sixkit.umalloc import Heap

heap = Heap()
block = heap.malloc(100)
heap.free(block)
```

## Command-line tools

- `sixkit-grep PATTERN [FILE ...]` prints the lines that match `PATTERN`. With no files, it reads standard input.
- `sixkit-text cat|echo|wc|primes [args...]` runs one of the text utilities.
- `sixkit-files ls|kill|ln|mkdir|rm|sleep [args...]` runs one of the file utilities.

## What it does not do

sixkit computes page-table indices, PTE encodings and layout addresses, but
it does not simulate physical memory or build page tables. It has no
process exercises (fork and pipe tests) and no randomised file-system
stress loop. It does not run a kernel.