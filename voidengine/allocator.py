"""Common base for allocators that hand out offsets into one reserved buffer."""

from abc import ABC, abstractmethod

from voidengine.config import DEFAULT_ALIGNMENT


class AllocationError(Exception):
    """Raised when an allocator cannot satisfy or accept a request."""


class Allocator(ABC):
    """A fixed-size byte reservation; addresses are offsets into it."""

    def __init__(self, total_size):
        if total_size < 0:
            raise ValueError("total size must not be negative")
        self._total_size = total_size
        self._buffer = bytearray(total_size)

    @property
    def total_size(self):
        """Size of the reservation in bytes."""
        return self._total_size

    @abstractmethod
    def alloc(self, size, align=DEFAULT_ALIGNMENT):
        """Reserve *size* zeroed bytes aligned to *align*; return the address."""

    @abstractmethod
    def free(self, addr):
        """Give back the block at *addr*."""

    @abstractmethod
    def clear(self):
        """Forget every allocation."""

    def read(self, addr, size):
        """Return *size* bytes starting at *addr*."""
        self._check_range(addr, size)
        return bytes(self._buffer[addr:addr + size])

    def write(self, addr, data):
        """Copy *data* into the reservation starting at *addr*."""
        data = bytes(data)
        self._check_range(addr, len(data))
        self._buffer[addr:addr + len(data)] = data

    def _check_range(self, addr, size):
        if addr < 0 or size < 0 or addr + size > self._total_size:
            raise AllocationError(
                f"range [{addr}, {addr + size}) lies outside the reservation"
            )

    def _zero(self, addr, size):
        self._buffer[addr:addr + size] = bytes(size)

    @staticmethod
    def _check_alignment(align):
        if align <= 0 or align & (align - 1):
            raise ValueError(f"alignment must be a power of two, got {align}")

    @staticmethod
    def _check_size(size):
        if size < 0:
            raise ValueError("allocation size must not be negative")

    @staticmethod
    def _align_up(value, align):
        return (value + align - 1) & ~(align - 1)