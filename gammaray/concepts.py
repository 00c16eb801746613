"""Ready-made entity kinds that attach a useful set of components on creation."""

from __future__ import annotations

from .buffers import (
    BufferElement,
    BufferLayout,
    IndexBuffer,
    ShaderDataType,
    VertexArray,
    VertexBuffer,
)
from .components import (
    ComponentCamera3D,
    ComponentEditorCamera3DMovement,
    ComponentMesh3D,
    ComponentRenderTransform3D,
    ComponentTransform3D,
    ComponentTransformRect,
)
from .scene import Entity


class ConceptCamera3D(Entity):
    def init_components(self) -> None:
        self.add_component(ComponentTransform3D)
        self.add_component(ComponentCamera3D)


class ConceptEditorCamera3D(Entity):
    def init_components(self) -> None:
        self.add_component(ComponentTransform3D)
        self.add_component(ComponentCamera3D)
        self.add_component(ComponentEditorCamera3DMovement)


class ConceptCanvasItem(Entity):
    def init_components(self) -> None:
        self.add_component(ComponentTransformRect)


class ConceptMesh3D(Entity):
    """An entity with transforms and a mesh; subclasses fill the mesh in ``init_mesh``."""

    def init_components(self) -> None:
        self.add_component(ComponentRenderTransform3D)
        self.add_component(ComponentTransform3D)
        self.init_mesh(self.add_component(ComponentMesh3D))

    def init_mesh(self, mesh: ComponentMesh3D) -> None:
        """Fill in the mesh buffers; the base mesh stays empty."""


_BOX_POSITIONS = (
    (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5),
    (-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5),
    (-0.5, 0.5, -0.5), (-0.5, -0.5, -0.5), (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5),
    (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5), (0.5, -0.5, 0.5),
    (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5),
    (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5), (-0.5, 0.5, 0.5), (0.5, 0.5, 0.5),
)
_WHITE = (1.0, 1.0, 1.0, 1.0)
_BOX_VERTICES = tuple(value for position in _BOX_POSITIONS for value in (*position, *_WHITE))

_BOX_INDICES = (
    0, 3, 2,
    2, 1, 0,
    4, 5, 6,
    6, 7, 4,
    11, 8, 9,
    9, 10, 11,
    12, 13, 14,
    14, 15, 12,
    16, 17, 18,
    18, 19, 16,
    20, 21, 22,
    22, 23, 20,
)


class ConceptMesh3DBox(ConceptMesh3D):
    """A unit cube centred on the origin with white vertices."""

    def init_mesh(self, mesh: ComponentMesh3D) -> None:
        mesh.vertex_array = VertexArray()
        mesh.vertices = VertexBuffer(_BOX_VERTICES)
        mesh.vertices.layout = BufferLayout(
            [
                BufferElement(ShaderDataType.FLOAT3, "a_Position"),
                BufferElement(ShaderDataType.FLOAT4, "a_Color"),
            ]
        )
        mesh.vertex_array.add_vertex_buffer(mesh.vertices)
        mesh.indices = IndexBuffer(_BOX_INDICES)
        mesh.vertex_array.add_index_buffer(mesh.indices)