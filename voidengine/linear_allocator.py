"""Bump allocator that only releases everything at once."""

from voidengine.allocator import AllocationError, Allocator
from voidengine.config import DEFAULT_ALIGNMENT


class LinearAllocator(Allocator):
    """Hands out consecutive blocks; individual frees are ignored."""

    def __init__(self, total_size):
        if not total_size:
            raise ValueError("size of allocation must not be 0")
        super().__init__(total_size)
        self._offset = 0

    @property
    def offset(self):
        """Bytes consumed so far, padding included."""
        return self._offset

    def alloc(self, size, align=DEFAULT_ALIGNMENT):
        self._check_alignment(align)
        self._check_size(size)
        aligned = self._align_up(self._offset, align)
        if aligned >= self.total_size or aligned + size > self.total_size:
            raise AllocationError("the linear allocator reservation is depleted")
        self._offset = aligned + size
        self._zero(aligned, size)
        return aligned

    def free(self, addr):
        """Blocks are released only by :meth:`clear`."""

    def clear(self):
        self._offset = 0