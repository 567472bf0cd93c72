"""Next-fit free-list allocator over a simulated heap that grows with a break."""

from __future__ import annotations

HEADER_SIZE = 16
MIN_CORE_UNITS = 4096
_BASE = -1


class Heap:
    """A free-list allocator; addresses are plain integers inside the heap."""

    def __init__(self, capacity=1 << 24, origin=0):
        self.capacity = capacity
        self.origin = origin
        self._brk = 0
        self._size = {}
        self._next = {}
        self._allocated = set()
        self._freep = None

    def _address(self, unit):
        return self.origin + (unit + 1) * HEADER_SIZE

    def _unit(self, ptr):
        offset = ptr - self.origin
        if offset < HEADER_SIZE or offset % HEADER_SIZE:
            raise ValueError(f"not a heap pointer: {ptr:#x}")
        return offset // HEADER_SIZE - 1

    def _morecore(self, nunits):
        nunits = max(nunits, MIN_CORE_UNITS)
        if (self._brk + nunits) * HEADER_SIZE > self.capacity:
            raise MemoryError("heap exhausted")
        header = self._brk
        self._brk += nunits
        self._size[header] = nunits
        self._allocated.add(header)
        self.free(self._address(header))
        return self._freep

    def malloc(self, nbytes):
        """Allocate nbytes and return the address of the block."""
        if nbytes < 0:
            raise ValueError("negative size")
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        if self._freep is None:
            self._next[_BASE] = _BASE
            self._size[_BASE] = 0
            self._freep = _BASE
        prevp = self._freep
        p = self._next[prevp]
        while True:
            if self._size[p] >= nunits:
                if self._size[p] == nunits:
                    self._next[prevp] = self._next.pop(p)
                else:
                    self._size[p] -= nunits
                    p += self._size[p]
                    self._size[p] = nunits
                self._freep = prevp
                self._allocated.add(p)
                return self._address(p)
            if p == self._freep:
                p = self._morecore(nunits)
            prevp, p = p, self._next[p]

    def free(self, ptr):
        """Return a block to the free list, merging it with its neighbours."""
        bp = self._unit(ptr)
        if bp not in self._allocated:
            raise ValueError(f"free of unallocated pointer {ptr:#x}")
        self._allocated.remove(bp)
        size, nxt = self._size, self._next
        p = self._freep
        while not (p < bp < nxt[p]):
            if p >= nxt[p] and (bp > p or bp < nxt[p]):
                break
            p = nxt[p]
        q = nxt[p]
        if bp + size[bp] == q:
            size[bp] += size.pop(q)
            nxt[bp] = nxt.pop(q)
        else:
            nxt[bp] = q
        if p + size[p] == bp:
            size[p] += size.pop(bp)
            nxt[p] = nxt.pop(bp)
        else:
            nxt[p] = bp
        self._freep = p

    def free_blocks(self):
        """Return (address, size in bytes) of each free block, in address order."""
        return sorted(
            (self.origin + unit * HEADER_SIZE, self._size[unit] * HEADER_SIZE)
            for unit in self._next
            if unit != _BASE
        )