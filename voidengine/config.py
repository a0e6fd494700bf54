"""Engine-wide configuration values and small shared types."""

from dataclasses import dataclass
from enum import Enum

DEFAULT_ALIGNMENT = 16
"""Strictest fundamental alignment, used when a caller gives none."""


def kb(x):
    """Return *x* kibibytes in bytes."""
    return 1024 * x


def mb(x):
    """Return *x* mebibytes in bytes."""
    return 1024 * kb(x)


def gb(x):
    """Return *x* gibibytes in bytes."""
    return 1024 * mb(x)


@dataclass(frozen=True)
class ClientDimension:
    """Width and height of a window's client area."""

    width: int
    height: int


class GraphicAPI(Enum):
    """Graphics back ends the renderer can select."""

    UNKNOWN = 0
    D3D11 = 1


DEFAULT_PERSISTENT_ALLOC_SIZE = kb(4)
DEFAULT_PER_FRAME_ALLOC_SIZE = mb(8)
DEFAULT_RESOURCE_LOOKUP_ALLOC_SIZE = mb(2)
DEFAULT_RESOURCE_STREAM_ALLOC_SIZE = mb(128)
DEFAULT_RESOURCE_ALLOC_SIZE = mb(16)
DEFAULT_RESOURCE_CHUNK_SIZE = 128


@dataclass
class EngineConfig:
    """Sizes of the engine's memory reservations."""

    persistent_allocator_size: int = DEFAULT_PERSISTENT_ALLOC_SIZE
    per_frame_allocator_size: int = DEFAULT_PER_FRAME_ALLOC_SIZE
    resource_lookup_allocator_size: int = DEFAULT_RESOURCE_LOOKUP_ALLOC_SIZE
    resource_stream_allocator_size: int = DEFAULT_RESOURCE_STREAM_ALLOC_SIZE
    resource_allocator_size: int = DEFAULT_RESOURCE_ALLOC_SIZE
    resource_chunk_size: int = DEFAULT_RESOURCE_CHUNK_SIZE
    resource_alignment: int = DEFAULT_ALIGNMENT