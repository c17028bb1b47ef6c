import pytest

from sampo.buffer import (
    BufferElement,
    BufferLayout,
    ShaderDataType,
    shader_data_type_size,
)


def test_sizes_fixed_by_type():
    assert shader_data_type_size(ShaderDataType.NONE) == 0
    assert shader_data_type_size(ShaderDataType.BOOL) == 4
    assert shader_data_type_size(ShaderDataType.MAT4) == 4 * 4 * 4


@pytest.mark.parametrize("data_type", list(ShaderDataType))
def test_size_is_four_bytes_per_component(data_type):
    element = BufferElement(data_type, "attr")
    assert element.size == 4 * element.component_count()


def test_invalid_type_raises():
    with pytest.raises(ValueError):
        shader_data_type_size(99)
    with pytest.raises(ValueError):
        BufferElement(42, "bad")


def test_element_defaults():
    element = BufferElement(ShaderDataType.FLOAT3, "a_Position")
    assert element.name == "a_Position"
    assert element.normalized is False
    assert element.offset == 0
    assert element.component_count() == 3


def test_layout_offsets_and_stride():
    layout = BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT3, "a_Position"),
            BufferElement(ShaderDataType.FLOAT4, "a_Color"),
            BufferElement(ShaderDataType.FLOAT2, "a_TexCoord", True),
        ]
    )
    elements = list(layout)
    assert len(layout) == 3
    assert elements[0].offset == 0
    for previous, current in zip(elements, elements[1:]):
        assert current.offset == previous.offset + previous.size
    assert layout.stride == sum(e.size for e in elements)
    assert elements[2].normalized is True


def test_empty_layout():
    layout = BufferLayout()
    assert len(layout) == 0
    assert layout.stride == 0
    assert list(layout) == []