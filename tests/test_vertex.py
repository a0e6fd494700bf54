import pytest

from voidengine.vertex import (
    DEFAULT_VERTEX_DESC,
    DEFAULT_VERTEX_DESC_HASH,
    TypeFormat,
    VertexDescriptor,
    VertexSemantic,
    hash_vertex_desc,
)


def _position(offset=0):
    return VertexDescriptor(
        VertexSemantic.POSITION, 0, 0, TypeFormat.FORMAT_R32G32B32A32_FLOAT, offset
    )


def _texcoord(offset=16):
    return VertexDescriptor(VertexSemantic.TEXCOORD, 0, 0, TypeFormat.FORMAT_R32G32_FLOAT, offset)


def test_empty_layout_hashes_to_offset_basis():
    assert hash_vertex_desc([]) == 1469598103934665603


def test_default_hash_matches_default_layout():
    assert DEFAULT_VERTEX_DESC_HASH == hash_vertex_desc(DEFAULT_VERTEX_DESC)


def test_default_layout_is_position_then_texcoord():
    assert hash_vertex_desc(DEFAULT_VERTEX_DESC) == hash_vertex_desc([_position(), _texcoord()])
    assert list(DEFAULT_VERTEX_DESC) == [_position(), _texcoord()]


def test_hash_is_deterministic_and_accepts_any_iterable():
    layout = [_position(), _texcoord()]
    assert hash_vertex_desc(layout) == hash_vertex_desc(tuple(layout))
    assert hash_vertex_desc(iter(layout)) == hash_vertex_desc(layout)


def test_hash_depends_on_order():
    assert hash_vertex_desc([_position(), _texcoord()]) != hash_vertex_desc(
        [_texcoord(), _position()]
    )


@pytest.mark.parametrize(
    "changed",
    [
        VertexDescriptor(VertexSemantic.TEXCOORD, 0, 0, TypeFormat.FORMAT_R32G32B32A32_FLOAT, 0),
        VertexDescriptor(VertexSemantic.POSITION, 1, 0, TypeFormat.FORMAT_R32G32B32A32_FLOAT, 0),
        VertexDescriptor(VertexSemantic.POSITION, 0, 1, TypeFormat.FORMAT_R32G32B32A32_FLOAT, 0),
        VertexDescriptor(VertexSemantic.POSITION, 0, 0, TypeFormat.FORMAT_R32_UINT, 0),
        VertexDescriptor(VertexSemantic.POSITION, 0, 0, TypeFormat.FORMAT_R32G32B32A32_FLOAT, 4),
    ],
)
def test_every_field_affects_hash(changed):
    assert hash_vertex_desc([changed]) != hash_vertex_desc([_position()])


def test_hash_fits_in_64_bits():
    layout = [_position(offset=2**40), _texcoord(offset=2**63)] * 10
    value = hash_vertex_desc(layout)
    assert 0 <= value < 2**64


def test_descriptor_is_immutable_and_comparable():
    assert _position() == _position()
    with pytest.raises(AttributeError):
        _position().offset = 8