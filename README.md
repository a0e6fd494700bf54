# voidengine

Building blocks for the core of a small game engine, in pure Python with no
dependencies.

## What is in it

- `voidengine.config` – `kb`, `mb`, `gb` size helpers, `ClientDimension`,
  the `GraphicAPI` enum, `DEFAULT_ALIGNMENT` (16) and `EngineConfig`, a
  dataclass with the default sizes of the engine's memory reservations.
- `voidengine.allocator` – the abstract `Allocator` base and
  `AllocationError`. An allocator owns a fixed-size byte buffer; the
  "addresses" it returns are integer offsets into that buffer. Every
  allocator has `alloc(size, align)`, `free(addr)`, `clear()`, plus
  `read(addr, size)` and `write(addr, data)` to look at and change its bytes.
  Allocated bytes are zeroed.
- `voidengine.linear_allocator` – `LinearAllocator`, a bump allocator;
  `free` does nothing, `clear` releases everything. `offset` tells how much
  has been used.
- `voidengine.stack_allocator` – `StackAllocator`; freeing a block also
  releases every block allocated after it.
- `voidengine.pool_allocator` – `PoolAllocator(total_size, chunk_size,
  chunk_alignment)`, handing out fixed-size chunks whatever size is asked
  for. Exposes `chunk_size`, `aligned_chunk_size`, `chunk_count` and
  `free_count`.
- `voidengine.free_list_allocator` – `FreeListAllocator`, a first-fit
  allocator that splits free blocks and coalesces neighbours on `free`.
  `realloc(addr, new_size)` grows a block in place when the space after it
  is free, otherwise moves its contents to a new block. `used_size` and
  `free_blocks` show its state.
- `voidengine.memory_system` – `MemorySystem`; `start_up(config)` builds a
  general and a resource-lookup `FreeListAllocator`, a per-frame
  `LinearAllocator` and a resource `PoolAllocator` from an `EngineConfig`
  (the defaults when none is given). They are reached through
  `general_allocator`, `per_frame_allocator`, `resource_lookup_allocator`
  and `resource_allocator`, which raise `RuntimeError` before `start_up` or
  after `shut_down`.
- `voidengine.dynamic_array` – `DynamicArray(capacity=16, values=())`, a
  sequence with an explicit `capacity` that grows to one and a half times
  its size when full. `push_back`, `insert(index, value)`, `remove(index)`,
  `find(value)` (index or `None`), `pop_back`, `is_empty`, indexing and
  iteration.
- `voidengine.flat_hash_map` – `FlatHashMap(bucket_count=16)`, an
  open-addressing map with Robin Hood linear probing. The bucket count must
  be a power of two and doubles once the table is 80% full. `insert` raises
  `KeyError` for a key already present, `remove` and `[]` raise `KeyError`
  for a missing one, `get` returns `None`. Supports `in`, `len`, iteration,
  `items()`, `values()`, item assignment and `del`.
- `voidengine.events` – `KeyButton`, `MouseButton`, `EventCategory`,
  `EventType`, the `Event` base with `category` and `event_type`, and the
  frozen events `ApplicationClosedEvent`, `ApplicationResizingEvent`,
  `ApplicationEnterResizeEvent`, `ApplicationExitResizeEvent`,
  `KeyboardPressedEvent`, `KeyboardReleasedEvent`, `MousePressedEvent`,
  `MouseReleasedEvent`, `MouseWheelRotatedEvent` and `MouseMovedEvent`
  (with a `pos` giving a `MousePos`). `Layer` is the abstract interface
  (`on_init`, `on_attach`, `on_detach`, `on_update`, `on_event`).
- `voidengine.vertex` – `ResourceType`, `TypeFormat`, `VertexSemantic`,
  `VertexDescriptor`, `hash_vertex_desc` (a 64-bit FNV-1a style hash) and
  the default quad layout `DEFAULT_VERTEX_DESC` with its hash.
- `voidengine.resource_cache` – `ResourceCache`, a reference-counted table
  of resources keyed by GUID, with `ResourceRef`, `ResourceError` and
  `resource_type_of`. A resource class declares its kind with a
  `resource_type` class attribute; it is built as `cls(guid, *args)`, and
  its `close()` is called, if it has one, when it is destroyed. Given a
  `PoolAllocator`, each live resource holds one chunk of it.
- `voidengine.resource_system` – `ResourceSystem`, a front end to the cache
  that checks resource kinds: `generate_guid`, `create`, `acquire`,
  `release`, `destroy`, `inspect_ref` and `shut_down`.

## Installation

```
pip install .
```

## Examples

```python
from voidengine.config import kb
from voidengine.linear_allocator import LinearAllocator

frame = LinearAllocator(kb(1))
first = frame.alloc(10)          # 0
second = frame.alloc(4)          # 16, aligned to 16 bytes
frame.write(second, b"abcd")
assert frame.read(second, 4) == b"abcd"
frame.clear()
assert frame.offset == 0
```

```python
from voidengine.flat_hash_map import FlatHashMap

scores = FlatHashMap(4)
scores.insert("gggs", 2233)
scores.insert("domixi", 968)

assert "gggs" in scores
assert scores["domixi"] == 968
scores.remove("gggs")
assert "gggs" not in scores
```

```python
from voidengine.dynamic_array import DynamicArray

array = DynamicArray(4)
array.push_back(10)
array.push_back(20)
array.insert(array.find(10), 40)
array.insert(array.find(20), 65)
array.push_back(284)
assert list(array) == [40, 10, 65, 20, 284]
assert array.capacity == 6
```

```python
from voidengine.resource_system import ResourceSystem
from voidengine.vertex import ResourceType


class Mesh:
    resource_type = ResourceType.MESH

    def __init__(self, guid, name):
        self.guid = guid
        self.name = name


system = ResourceSystem()
guid = system.generate_guid()
mesh = system.create(Mesh, guid, "quad")
assert system.acquire(Mesh, guid) is mesh
assert system.inspect_ref(guid) == 2
system.release(Mesh, guid)
system.release(Mesh, guid)       # last reference: the mesh is destroyed
assert guid not in system.cache
```

## What it does not do

There is no window, renderer, graphics back end or main loop here:
`GraphicAPI`, the events and `Layer` describe what such parts would use,
but nothing in the package opens a window, draws, produces events or loads
shaders or other asset files. The allocators manage offsets into a Python
`bytearray`; they do not hand out real memory.

## Running the tests

```
pip install .[test]
pytest
```