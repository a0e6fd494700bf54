"""Game engine core: allocators, containers, events and a resource cache."""

__version__ = "0.1.0"

__all__ = [
    "config",
    "allocator",
    "linear_allocator",
    "stack_allocator",
    "pool_allocator",
    "free_list_allocator",
    "memory_system",
    "dynamic_array",
    "events",
    "flat_hash_map",
    "vertex",
    "resource_cache",
    "resource_system",
]