"""Allocator of equally sized chunks kept on a free list."""

from voidengine.allocator import AllocationError, Allocator
from voidengine.config import DEFAULT_ALIGNMENT

_FREE_NODE_SIZE = 8


class PoolAllocator(Allocator):
    """Hands out fixed-size chunks; the requested size is not consulted."""

    def __init__(self, total_size, chunk_size, chunk_alignment=DEFAULT_ALIGNMENT):
        if not total_size:
            raise ValueError("size of allocation must not be 0")
        if total_size < chunk_size:
            raise ValueError("size of allocation must be larger than chunk size")
        self._check_alignment(chunk_alignment)
        if chunk_size < _FREE_NODE_SIZE:
            raise ValueError("chunk is too small")
        super().__init__(total_size)
        stride_align = max(chunk_alignment, _FREE_NODE_SIZE)
        self._chunk_size = chunk_size
        self._chunk_alignment = chunk_alignment
        self._start = self._align_up(_FREE_NODE_SIZE, stride_align)
        self._aligned_chunk_size = self._align_up(chunk_size, stride_align)
        self._chunk_count = max(0, (total_size - self._start) // self._aligned_chunk_size)
        self._chunks = range(
            self._start,
            self._start + self._chunk_count * self._aligned_chunk_size,
            self._aligned_chunk_size,
        )
        self._free_chunks = []
        self.clear()

    @property
    def chunk_size(self):
        return self._chunk_size

    @property
    def aligned_chunk_size(self):
        """Distance between the starts of neighbouring chunks."""
        return self._aligned_chunk_size

    @property
    def chunk_count(self):
        return self._chunk_count

    @property
    def free_count(self):
        """Number of chunks currently available."""
        return len(self._free_chunks)

    def alloc(self, size, align=DEFAULT_ALIGNMENT):
        if not self._free_chunks:
            raise AllocationError("pool reservation is depleted")
        addr = self._free_chunks.pop()
        self._zero(addr, self._chunk_size)
        return addr

    def free(self, addr):
        if addr is None:
            raise ValueError("free address is null")
        if addr not in self._chunks:
            raise AllocationError("out of bounds memory address passed to pool")
        self._free_chunks.append(addr)

    def clear(self):
        self._free_chunks = list(self._chunks)