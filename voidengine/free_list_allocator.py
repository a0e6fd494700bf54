"""General-purpose allocator keeping its free space on an address-ordered list."""

from bisect import bisect_left

from voidengine.allocator import AllocationError, Allocator
from voidengine.config import DEFAULT_ALIGNMENT

_HEADER_SIZE = 16
_HEADER_ALIGN = 8
_FREE_NODE_SIZE = 16


class FreeListAllocator(Allocator):
    """First-fit allocator that splits free blocks and coalesces on free.

    Every block is preceded by a header; the bytes between the start of the
    free node a block was carved from and the returned address are its padding.
    """

    def __init__(self, total_size):
        if total_size < _FREE_NODE_SIZE:
            raise ValueError("size of pre-allocated buffer is too small")
        super().__init__(total_size)
        self._nodes = []
        self._headers = {}
        self._used_size = 0
        self.clear()

    @property
    def used_size(self):
        """Bytes taken by live blocks, padding and headers included."""
        return self._used_size

    @property
    def free_blocks(self):
        """Free regions as ``(address, size)`` pairs in address order."""
        return list(self._nodes)

    def alloc(self, size, align=DEFAULT_ALIGNMENT):
        self._check_size(size)
        self._check_alignment(align)
        if size > self.total_size - self._used_size:
            raise AllocationError("size of allocation is larger than what remains")
        aligned_size = self._align_up(size, _HEADER_ALIGN)
        effective_align = max(align, _HEADER_ALIGN)
        for index, (node_addr, node_size) in enumerate(self._nodes):
            if aligned_size > node_size:
                continue
            aligned_addr = self._align_up(node_addr + _HEADER_SIZE, effective_align)
            padding = aligned_addr - node_addr
            if node_size < padding + aligned_size:
                continue
            additional = self._split(index, padding + aligned_size)
            block_size = aligned_size + additional
            self._headers[aligned_addr] = (block_size, padding)
            self._used_size += padding + block_size
            self._zero(aligned_addr, block_size)
            return aligned_addr
        raise AllocationError("no free space left to allocate")

    def realloc(self, addr, new_size):
        """Grow the block at *addr* to hold *new_size* bytes; return its address.

        The block is extended in place when the free space right after it is
        large enough, otherwise its contents move to a new block.
        """
        block_size, _ = self._header_of(addr)
        self._check_size(new_size)
        aligned_new = self._align_up(new_size, _HEADER_ALIGN)
        if aligned_new <= block_size:
            return addr

        neighbour = addr + block_size
        index = bisect_left(self._nodes, (neighbour,))
        if index < len(self._nodes):
            node_addr, node_size = self._nodes[index]
            if node_addr == neighbour and block_size + node_size >= aligned_new:
                grow = aligned_new - block_size
                additional = self._split(index, grow)
                padding = self._headers[addr][1]
                self._headers[addr] = (block_size + grow + additional, padding)
                self._used_size += grow + additional
                return addr

        contents = self.read(addr, block_size)
        try:
            new_addr = self.alloc(aligned_new)
        except AllocationError as exc:
            raise AllocationError("no free space left to reallocate") from exc
        self.write(new_addr, contents)
        self.free(addr)
        return new_addr

    def free(self, addr):
        block_size, padding = self._header_of(addr)
        del self._headers[addr]
        node_size = block_size + padding
        self._used_size -= node_size
        self._insert_free(addr - padding, node_size)

    def clear(self):
        self._nodes = [(0, self.total_size)]
        self._headers.clear()
        self._used_size = 0

    def _header_of(self, addr):
        if addr is None:
            raise ValueError("free address is null")
        if not 0 <= addr < self.total_size:
            raise AllocationError("out of bounds memory address passed to allocator")
        try:
            return self._headers[addr]
        except KeyError:
            raise AllocationError(f"address {addr} is not a live block") from None

    def _split(self, index, taken):
        """Take *taken* bytes from the front of free node *index*.

        Returns the bytes added to the block because the remainder was too
        small to form a free node of its own.
        """
        node_addr, node_size = self._nodes[index]
        remaining = node_size - taken
        if remaining >= _FREE_NODE_SIZE:
            self._nodes[index] = (node_addr + taken, remaining)
            return 0
        del self._nodes[index]
        return remaining

    def _insert_free(self, addr, size):
        index = bisect_left(self._nodes, (addr,))
        self._nodes.insert(index, (addr, size))
        if index > 0:
            prev_addr, prev_size = self._nodes[index - 1]
            if prev_addr + prev_size == addr:
                self._nodes[index - 1] = (prev_addr, prev_size + size)
                del self._nodes[index]
                index -= 1
        if index + 1 < len(self._nodes):
            cur_addr, cur_size = self._nodes[index]
            next_addr, next_size = self._nodes[index + 1]
            if cur_addr + cur_size == next_addr:
                self._nodes[index] = (cur_addr, cur_size + next_size)
                del self._nodes[index + 1]