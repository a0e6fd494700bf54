"""Resource kinds and the vertex layout descriptions meshes carry."""

from dataclasses import dataclass
from enum import Enum

_FNV_OFFSET_BASIS = 1469598103934665603
_FNV_PRIME = 1099511628211
_MASK64 = (1 << 64) - 1


class ResourceType(Enum):
    """Kinds of resource the resource cache can hold."""

    SHADER = 0
    TEXTURE_2D = 1
    TEXTURE_3D = 2
    CUBEMAP = 3
    FONT = 4
    AUDIO = 5
    MESH = 6
    MATERIAL = 7
    UNKNOWN = 8


class TypeFormat(Enum):
    """Element formats a vertex attribute can have."""

    FORMAT_R32G32B32A32_FLOAT = 0
    FORMAT_R32G32B32_FLOAT = 1
    FORMAT_R32G32_FLOAT = 2
    FORMAT_R32_FLOAT = 3
    FORMAT_R32G32B32A32_INT = 4
    FORMAT_R32G32B32_INT = 5
    FORMAT_R32G32_INT = 6
    FORMAT_R32_INT = 7
    FORMAT_R32G32B32A32_UINT = 8
    FORMAT_R32G32B32_UINT = 9
    FORMAT_R32G32_UINT = 10
    FORMAT_R32_UINT = 11


class VertexSemantic(Enum):
    """Meaning of a vertex attribute."""

    POSITION = 0
    TEXCOORD = 1


@dataclass(frozen=True)
class VertexDescriptor:
    """One attribute of a vertex layout."""

    semantic: VertexSemantic
    semantic_index: int
    input_slot: int
    format: TypeFormat
    offset: int


def hash_vertex_desc(descriptors):
    """Return a 64-bit FNV-1a style hash of a sequence of vertex descriptors."""
    result = _FNV_OFFSET_BASIS
    for descriptor in descriptors:
        for value in (
            descriptor.semantic.value,
            descriptor.semantic_index,
            descriptor.input_slot,
            descriptor.offset,
            descriptor.format.value,
        ):
            result ^= value & _MASK64
            result = (result * _FNV_PRIME) & _MASK64
    return result


DEFAULT_VERTEX_DESC = (
    VertexDescriptor(VertexSemantic.POSITION, 0, 0, TypeFormat.FORMAT_R32G32B32A32_FLOAT, 0),
    VertexDescriptor(VertexSemantic.TEXCOORD, 0, 0, TypeFormat.FORMAT_R32G32_FLOAT, 16),
)
"""Layout of a textured quad: a four-float position followed by a UV pair."""

DEFAULT_VERTEX_DESC_HASH = hash_vertex_desc(DEFAULT_VERTEX_DESC)