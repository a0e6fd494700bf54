"""Allocator whose blocks are released in reverse order of allocation."""

from voidengine.allocator import AllocationError
from voidengine.config import DEFAULT_ALIGNMENT
from voidengine.linear_allocator import LinearAllocator

_HEADER_SIZE = 8
_HEADER_ALIGN = 8


class StackAllocator(LinearAllocator):
    """Freeing a block also releases every block allocated after it."""

    def __init__(self, total_size):
        super().__init__(total_size)
        self._paddings = {}

    def alloc(self, size, align=DEFAULT_ALIGNMENT):
        self._check_alignment(align)
        self._check_size(size)
        aligned = self._align_up(self._offset + _HEADER_SIZE, max(align, _HEADER_ALIGN))
        padding = aligned - self._offset
        if self._offset + padding + size > self.total_size:
            raise AllocationError("memory reservation in stack is depleted")
        self._offset += padding + size
        self._paddings[aligned] = padding
        self._zero(aligned, size)
        return aligned

    def free(self, addr):
        if addr is None:
            raise ValueError("free address is null")
        if not 0 <= addr < self.total_size:
            raise AllocationError("out of bounds memory address passed to stack")
        padding = self._paddings.get(addr)
        if padding is None:
            raise AllocationError(f"address {addr} was not allocated from this stack")
        self._offset = addr - padding
        self._paddings = {key: value for key, value in self._paddings.items() if key < addr}

    def clear(self):
        super().clear()
        self._paddings.clear()