"""Vertex data layouts and CPU-side vertex, index and vertex-array buffers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Iterator, Optional

import numpy as np


class ShaderDataType(Enum):
    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_COMPONENT_COUNTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 3 * 3,
    ShaderDataType.MAT4: 4 * 4,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}

_SIZES = {
    data_type: (1 if data_type is ShaderDataType.BOOL else 4 * count)
    for data_type, count in _COMPONENT_COUNTS.items()
}


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Size in bytes of one value of ``data_type``; 0 for an unknown type."""
    return _SIZES.get(data_type, 0)


@dataclass
class BufferElement:
    """One named attribute within a vertex."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    size: int = field(default=0, init=False)
    offset: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.size = shader_data_type_size(self.data_type)

    @property
    def component_count(self) -> int:
        return _COMPONENT_COUNTS.get(self.data_type, 0)


class BufferLayout:
    """An ordered list of elements with their byte offsets and the vertex stride."""

    def __init__(self, elements: Iterable[BufferElement] = ()) -> None:
        self._elements = [replace(element) for element in elements]
        offset = 0
        for element in self._elements:
            element.offset = offset
            offset += element.size
        self._stride = offset

    @property
    def stride(self) -> int:
        return self._stride

    @property
    def elements(self) -> tuple[BufferElement, ...]:
        return tuple(self._elements)

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)


class VertexBuffer:
    """A block of float vertex data together with the layout describing it."""

    def __init__(self, vertices: Iterable[float], layout: Optional[BufferLayout] = None) -> None:
        self.vertices = np.array(list(vertices), dtype=np.float32)
        self.layout = layout if layout is not None else BufferLayout()

    @property
    def size(self) -> int:
        """Size of the vertex data in bytes."""
        return int(self.vertices.nbytes)


class IndexBuffer:
    """A block of unsigned 32-bit vertex indices."""

    def __init__(self, indices: Iterable[int]) -> None:
        self.indices = np.array(list(indices), dtype=np.uint32)

    @property
    def count(self) -> int:
        return int(self.indices.size)


class VertexArray:
    """Groups the vertex and index buffers that make up one drawable."""

    def __init__(self) -> None:
        self._vertex_buffers: list[VertexBuffer] = []
        self._index_buffers: list[IndexBuffer] = []

    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None:
        if not vertex_buffer.layout.elements:
            raise ValueError("Vertex buffer has no layout")
        self._vertex_buffers.append(vertex_buffer)

    def add_index_buffer(self, index_buffer: IndexBuffer) -> None:
        self._index_buffers.append(index_buffer)

    @property
    def vertex_buffers(self) -> tuple[VertexBuffer, ...]:
        return tuple(self._vertex_buffers)

    @property
    def index_buffers(self) -> tuple[IndexBuffer, ...]:
        return tuple(self._index_buffers)