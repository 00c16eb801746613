"""Built-in scene components: transforms, cameras, lights, meshes and camera control."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

from .buffers import IndexBuffer, VertexArray, VertexBuffer
from .input import Input
from .keycodes import Key
from .scene import Component
from .values import Color, Rect2, Rect2i, Vector2i

_WORLD_UP = np.array([0.0, 1.0, 0.0])


def _vec(*values: float) -> np.ndarray:
    return np.array(values, dtype=float)


def _zeros3() -> np.ndarray:
    return np.zeros(3)


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix (row-major, for column vectors) looking from ``eye`` at ``center``."""
    eye_v = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye_v)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    matrix = np.identity(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -np.dot(s, eye_v)
    matrix[1, 3] = -np.dot(u, eye_v)
    matrix[2, 3] = np.dot(f, eye_v)
    return matrix


@dataclass(eq=False)
class ComponentRenderTransform3D(Component):
    """The final model matrix handed to the renderer."""

    matrix: np.ndarray = field(default_factory=lambda: np.identity(4))


@dataclass(eq=False)
class ComponentTransform3D(Component):
    """Position, rotation in degrees (x, yaw, pitch) and scale of an entity."""

    position: np.ndarray = field(default_factory=_zeros3)
    rotation: np.ndarray = field(default_factory=_zeros3)
    scale: np.ndarray = field(default_factory=_zeros3)
    flags: int = 0

    def is_dirty(self) -> bool:
        return bool(self.flags & 1)

    def set_dirty(self) -> None:
        self.flags |= 1

    def reset_dirty(self) -> None:
        self.flags = 0


@dataclass(eq=False)
class ComponentTransformRect(Component):
    """Placement of a 2D canvas item."""

    anchors: Rect2 = field(default_factory=Rect2)
    rect: Rect2i = field(default_factory=Rect2i)
    rotation: float = 0.0
    scale: np.ndarray = field(default_factory=lambda: np.zeros(2))


@dataclass
class ComponentCamera2D:
    """Marker for a 2D camera."""


@dataclass(eq=False)
class ComponentCamera3D(Component):
    """A perspective camera; its position comes from the owner's transform."""

    forward: np.ndarray = field(default_factory=lambda: _vec(0.0, 0.0, -1.0))
    up: np.ndarray = field(default_factory=lambda: _vec(0.0, 1.0, 0.0))
    right: np.ndarray = field(default_factory=lambda: _vec(1.0, 0.0, 0.0))
    fov: float = 90.0
    near_clip: float = 0.1
    far_clip: float = 100.0

    def view_matrix(self) -> np.ndarray:
        position = self.owner.get_component(ComponentTransform3D).position
        return look_at(position, position + self.forward, self.up)


@dataclass(eq=False)
class ComponentLight3D:
    color: Color = field(default_factory=Color)
    strength: float = 0.0
    direction: np.ndarray = field(default_factory=_zeros3)


@dataclass(eq=False)
class ComponentMesh3D(Component):
    """Geometry buffers of a 3D mesh."""

    vertices: Optional[VertexBuffer] = None
    indices: Optional[IndexBuffer] = None
    vertex_array: Optional[VertexArray] = None


@dataclass
class ComponentMeshGUI:
    """Marker for GUI geometry."""


@dataclass(eq=False)
class ComponentEditorCamera3DMovement(Component):
    """Free-fly editor camera control: mouse to look, WASD to move."""

    move_speed: float = 0.04
    rotation_speed: float = 0.2
    prev_mouse_pos: Vector2i = (0, 0)

    def on_init(self) -> None:
        self.owner.server.register_for_on_update(self.on_update)

    def on_update(self) -> None:
        transform = self.owner.get_component(ComponentTransform3D)
        camera = self.owner.get_component(ComponentCamera3D)
        source = Input.get_singleton()
        if source is None:
            raise RuntimeError("no input has been created")

        mouse_x, mouse_y = source.mouse_position
        prev_x, prev_y = self.prev_mouse_pos
        velocity_x, velocity_y = mouse_x - prev_x, mouse_y - prev_y

        rotation = transform.rotation
        rotation[1] += velocity_x * self.rotation_speed
        rotation[2] -= velocity_y * self.rotation_speed
        rotation[2] = min(max(rotation[2], -89.0), 89.0)

        yaw = math.radians(rotation[1])
        pitch = math.radians(rotation[2])
        camera.forward = _normalize(
            _vec(
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            )
        )
        camera.right = _normalize(np.cross(camera.forward, _WORLD_UP))
        camera.up = _normalize(np.cross(camera.right, camera.forward))

        wish_x = wish_y = 0.0
        if source.is_key_pressed(Key.A):
            wish_x = -1.0
        if source.is_key_pressed(Key.D):
            wish_x = 1.0
        if source.is_key_pressed(Key.W):
            wish_y = 1.0
        if source.is_key_pressed(Key.S):
            wish_y = -1.0

        transform.position = (
            transform.position
            + camera.forward * wish_y * self.move_speed
            + camera.right * wish_x * self.move_speed
        )
        self.prev_mouse_pos = source.mouse_position