"""Owner of the engine's long-lived memory reservations."""

from voidengine.config import EngineConfig
from voidengine.free_list_allocator import FreeListAllocator
from voidengine.linear_allocator import LinearAllocator
from voidengine.pool_allocator import PoolAllocator


class MemorySystem:
    """Creates the engine's allocators from an :class:`EngineConfig`."""

    def __init__(self):
        self._general = None
        self._per_frame = None
        self._resource_lookup = None
        self._resource = None

    @property
    def started(self):
        return self._general is not None

    def start_up(self, config=None):
        """Reserve every allocator with the sizes *config* gives."""
        config = config or EngineConfig()
        self._general = FreeListAllocator(config.persistent_allocator_size)
        self._per_frame = LinearAllocator(config.per_frame_allocator_size)
        self._resource_lookup = FreeListAllocator(config.resource_lookup_allocator_size)
        self._resource = PoolAllocator(
            config.resource_allocator_size,
            config.resource_chunk_size,
            config.resource_alignment,
        )

    def shut_down(self):
        """Drop every reservation."""
        self._general = None
        self._per_frame = None
        self._resource_lookup = None
        self._resource = None

    def _require(self, allocator):
        if allocator is None:
            raise RuntimeError("memory system has not been started")
        return allocator

    @property
    def general_allocator(self):
        return self._require(self._general)

    @property
    def per_frame_allocator(self):
        return self._require(self._per_frame)

    @property
    def resource_lookup_allocator(self):
        return self._require(self._resource_lookup)

    @property
    def resource_allocator(self):
        return self._require(self._resource)