import pytest

from voidengine.allocator import AllocationError
from voidengine.free_list_allocator import FreeListAllocator


@pytest.fixture
def heap():
    return FreeListAllocator(1024)


def _accounted(allocator):
    return allocator.used_size + sum(size for _, size in allocator.free_blocks)


def test_fresh_allocator_is_one_free_block(heap):
    assert heap.free_blocks == [(0, 1024)]
    assert heap.used_size == 0


def test_too_small_buffer_rejected():
    with pytest.raises(ValueError):
        FreeListAllocator(8)


def test_first_allocation_leaves_room_for_header(heap):
    assert heap.alloc(10) == 16


@pytest.mark.parametrize("align", [8, 16, 32, 64, 128])
def test_allocation_respects_alignment(heap, align):
    heap.alloc(3)
    assert heap.alloc(20, align) % align == 0


def test_non_power_of_two_alignment_rejected(heap):
    with pytest.raises(ValueError):
        heap.alloc(8, 24)


def test_blocks_do_not_overlap_and_are_zeroed(heap):
    a = heap.alloc(24)
    heap.write(a, b"\xff" * 24)
    b = heap.alloc(24)
    assert b >= a + 24
    assert heap.read(b, 24) == bytes(24)
    assert heap.read(a, 24) == b"\xff" * 24


def test_space_is_always_accounted_for(heap):
    addrs = [heap.alloc(size) for size in (5, 40, 17, 100)]
    assert _accounted(heap) == 1024
    for index in (1, 3):
        heap.free(addrs[index])
        assert _accounted(heap) == 1024


@pytest.mark.parametrize("order", [(0, 1, 2), (2, 1, 0), (1, 0, 2), (0, 2, 1)])
def test_freeing_everything_coalesces_back(heap, order):
    addrs = [heap.alloc(size) for size in (30, 64, 12)]
    for index in order:
        heap.free(addrs[index])
    assert heap.free_blocks == [(0, 1024)]
    assert heap.used_size == 0


def test_freed_block_is_reused(heap):
    a = heap.alloc(32)
    heap.alloc(32)
    heap.free(a)
    assert heap.alloc(32) == a


def test_request_larger_than_remaining_raises():
    with pytest.raises(AllocationError):
        FreeListAllocator(256).alloc(512)


def test_exhaustion_raises():
    allocator = FreeListAllocator(256)
    with pytest.raises(AllocationError):
        while True:
            allocator.alloc(32)
    assert _accounted(allocator) == 256


def test_double_free_raises():
    allocator = FreeListAllocator(256)
    a = allocator.alloc(16)
    allocator.free(a)
    with pytest.raises(AllocationError):
        allocator.free(a)


@pytest.mark.parametrize("addr, error", [(4096, AllocationError), (None, ValueError)])
def test_bad_free_raises(addr, error):
    with pytest.raises(error):
        FreeListAllocator(256).free(addr)


def test_realloc_grows_in_place_when_neighbour_is_free(heap):
    a = heap.alloc(16)
    heap.write(a, b"abcdefgh")
    assert heap.realloc(a, 64) == a
    assert heap.read(a, 8) == b"abcdefgh"
    assert _accounted(heap) == 1024
    heap.free(a)
    assert heap.free_blocks == [(0, 1024)]


def test_realloc_moves_when_neighbour_is_taken(heap):
    a = heap.alloc(16)
    b = heap.alloc(16)
    heap.write(a, b"payload!")
    moved = heap.realloc(a, 64)
    assert moved > b
    assert heap.read(moved, 8) == b"payload!"
    assert _accounted(heap) == 1024
    with pytest.raises(AllocationError):
        heap.free(a)


def test_realloc_to_smaller_size_keeps_address(heap):
    a = heap.alloc(64)
    used = heap.used_size
    assert heap.realloc(a, 8) == a
    assert heap.used_size == used


def test_realloc_without_space_raises():
    allocator = FreeListAllocator(128)
    a = allocator.alloc(16)
    allocator.alloc(16)
    with pytest.raises(AllocationError):
        allocator.realloc(a, 120)


def test_clear_forgets_allocations():
    allocator = FreeListAllocator(512)
    a = allocator.alloc(100)
    allocator.clear()
    assert allocator.free_blocks == [(0, 512)]
    with pytest.raises(AllocationError):
        allocator.free(a)