"""Vertex buffer layouts: element types, sizes, offsets and stride."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum


class ShaderDataType(IntEnum):
    NONE = 0
    BOOL = 1
    INT = 2
    INT2 = 3
    INT3 = 4
    INT4 = 5
    FLOAT = 6
    FLOAT2 = 7
    FLOAT3 = 8
    FLOAT4 = 9
    MAT3 = 10
    MAT4 = 11


_SIZES = {
    ShaderDataType.NONE: 0,
    ShaderDataType.BOOL: 4,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 4 * 2,
    ShaderDataType.INT3: 4 * 3,
    ShaderDataType.INT4: 4 * 4,
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 4 * 2,
    ShaderDataType.FLOAT3: 4 * 3,
    ShaderDataType.FLOAT4: 4 * 4,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
}

_COMPONENTS = {
    ShaderDataType.NONE: 0,
    ShaderDataType.BOOL: 1,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 3 * 3,
    ShaderDataType.MAT4: 4 * 4,
}


def _as_type(data_type: ShaderDataType | int) -> ShaderDataType:
    try:
        return ShaderDataType(data_type)
    except ValueError:
        raise ValueError(f"invalid shader data type: {data_type!r}") from None


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Size in bytes of one value of ``data_type``."""
    return _SIZES[_as_type(data_type)]


@dataclass
class BufferElement:
    """One attribute of a vertex; ``offset`` is set by the layout holding it."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    size: int = field(init=False)
    offset: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.data_type = _as_type(self.data_type)
        self.size = shader_data_type_size(self.data_type)

    def component_count(self) -> int:
        """Number of scalar components in the attribute."""
        return _COMPONENTS[self.data_type]


class BufferLayout:
    """An ordered list of elements with computed offsets and stride."""

    def __init__(self, elements: Iterable[BufferElement] = ()) -> None:
        self.elements: list[BufferElement] = list(elements)
        self.stride = 0
        for element in self.elements:
            element.offset = self.stride
            self.stride += element.size

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)