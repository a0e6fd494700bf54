import dataclasses

import pytest

from voidengine.config import (
    DEFAULT_ALIGNMENT,
    ClientDimension,
    EngineConfig,
    gb,
    kb,
    mb,
)


def test_kb_is_1024_bytes():
    assert kb(1) == 1024


def test_units_scale_by_1024():
    assert mb(1) == 1024 * kb(1)
    assert gb(2) == 2 * 1024 * mb(1)
    assert kb(0) == mb(0) == gb(0)


def test_engine_config_defaults():
    config = EngineConfig()
    assert config.persistent_allocator_size == kb(4)
    assert config.per_frame_allocator_size == mb(8)
    assert config.resource_lookup_allocator_size == mb(2)
    assert config.resource_stream_allocator_size == mb(128)
    assert config.resource_allocator_size == mb(16)
    assert config.resource_chunk_size == 128
    assert config.resource_alignment == DEFAULT_ALIGNMENT


def test_engine_config_override_keeps_other_defaults():
    config = EngineConfig(resource_chunk_size=256)
    assert config.resource_chunk_size == 256
    assert config.resource_allocator_size == EngineConfig().resource_allocator_size


def test_client_dimension_is_value_type():
    first = ClientDimension(1280, 720)
    assert first == ClientDimension(width=1280, height=720)
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.width = 5
    assert first.width == 1280